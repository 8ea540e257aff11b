"""
Apply a raw filter map to a SQLAlchemy statement.

``FilterApplicator.apply`` resolves the map against the model's
:class:`FilterableAttributes`, classifies each entry and appends one
``WHERE`` criterion per applicable entry. Dotted paths traverse up to
``MAX_RELATION_DEPTH`` relationships through existence subqueries
(``relationship.any()`` for collections, ``relationship.has()`` for scalar
references); whatever segments remain name the leaf column.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy.orm import ColumnProperty, RelationshipProperty

from .constraints import DEFAULT_CONSTRAINT_REGISTRY
from .exceptions import UnknownAttributeError, UnknownRelationError
from .resolver import resolve_filters

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from sqlalchemy import ColumnElement

    from .attributes import FilterableAttributes
    from .constraints import ConstraintRegistry
    from .operations import FilterOperation

logger = logging.getLogger(__name__)

MAX_RELATION_DEPTH = 2


class FilterApplicator:
    """Applies filter maps to statements selecting from one model."""

    def __init__(
        self,
        model: type[Any],
        attributes: FilterableAttributes,
        *,
        registry: ConstraintRegistry | None = None,
    ) -> None:
        self._model = model
        self._attributes = attributes
        self._registry = registry or DEFAULT_CONSTRAINT_REGISTRY

    @property
    def model(self) -> type[Any]:
        return self._model

    @property
    def attributes(self) -> FilterableAttributes:
        return self._attributes

    def apply(self, query: Any, filters: Mapping[str, Any]) -> Any:
        """
        Append the criteria described by *filters* to *query*.

        Args:
            query: A ``Select`` (or legacy ``Query``) over the model.
            filters: Raw filter map, keys plain or dotted.

        Returns:
            The statement carrying the added criteria. Entries that are
            undeclared, null, bound to no known operation, or malformed add
            nothing.
        """
        for attribute, entry in resolve_filters(self._attributes, filters).items():
            if entry.value is None:
                logger.debug("Skipping filter %r: no value", attribute)
                continue
            if not self._attributes.is_filterable(attribute):
                logger.debug("Skipping filter %r: not filterable", attribute)
                continue

            operation = self._attributes.operation_for(attribute)
            if operation is None:
                logger.debug("Skipping filter %r: no operation", attribute)
                continue

            criterion = self.build_criterion(attribute, entry.value, operation)
            if criterion is None:
                logger.debug(
                    "Skipping filter %r: value %r does not fit %s",
                    attribute,
                    entry.value,
                    operation.value,
                )
                continue
            query = query.where(criterion)
        return query

    def build_criterion(
        self,
        attribute: str,
        value: Any,
        operation: FilterOperation,
    ) -> ColumnElement[bool] | None:
        """Compile one resolved entry, or ``None`` if it adds no constraint."""
        segments = attribute.split(".")
        relations = segments[:-1][:MAX_RELATION_DEPTH]
        leaf = ".".join(segments[len(relations) :])
        return self._compile_path(self._model, relations, leaf, value, operation)

    def _compile_path(
        self,
        model: type[Any],
        relations: Sequence[str],
        leaf: str,
        value: Any,
        operation: FilterOperation,
    ) -> ColumnElement[bool] | None:
        if not relations:
            column = _resolve_column(model, leaf)
            return self._registry.apply(operation, column, value)

        relation = relations[0]
        rel_attr = getattr(model, relation, None)
        prop = getattr(rel_attr, "property", None)
        if not isinstance(prop, RelationshipProperty):
            raise UnknownRelationError(model, relation)

        target_model = prop.mapper.class_
        inner = self._compile_path(
            target_model, relations[1:], leaf, value, operation
        )
        if inner is None:
            return None

        logger.debug(
            "Filtering %s through relation %r (table %s)",
            model.__name__,
            relation,
            self._attributes.table_for(relation, target_model),
        )
        if prop.uselist:
            return cast("ColumnElement[bool]", rel_attr.any(inner))
        return cast("ColumnElement[bool]", rel_attr.has(inner))


def _resolve_column(model: type[Any], name: str) -> Any:
    """Mapped column for *name*; ``table.column`` resolves via the metadata."""
    if "." in name:
        table_name, column_name = name.rsplit(".", 1)
        metadata = getattr(model, "metadata", None)
        table = metadata.tables.get(table_name) if metadata is not None else None
        if table is None or column_name not in table.c:
            raise UnknownAttributeError(model, name)
        return table.c[column_name]

    column = getattr(model, name, None)
    if not isinstance(getattr(column, "property", None), ColumnProperty):
        raise UnknownAttributeError(model, name)
    return column

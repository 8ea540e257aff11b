"""FilterableAttributes — per-model declaration of filterable fields.

A model declares its filterable fields as a plain mapping::

    {
        "name": "equals",
        "author.created_at": {"operation": "date", "table": "users"},
    }

A value is either an operation name (``like``, ``equals``, ``between``,
``date``) or an ``{operation, table}`` record used for relation-qualified
fields. The declaration is parsed once, when the model is configured, into
an immutable :class:`FilterableAttributes` mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .exceptions import FilterConfigurationError
from .operations import FilterOperation

logger = logging.getLogger(__name__)


class FilterableAttribute(BaseModel):
    """Parsed declaration for one filterable field."""

    model_config = ConfigDict(frozen=True)

    operation: FilterOperation | None = None
    table: str | None = None
    declared_as_record: bool = False


class _AttributeRecord(BaseModel):
    operation: str | None = None
    table: str | None = None


class FilterableAttributes(Mapping[str, FilterableAttribute]):
    """Immutable mapping of field name to :class:`FilterableAttribute`."""

    def __init__(
        self, attributes: Mapping[str, FilterableAttribute] | None = None
    ) -> None:
        self._attributes: dict[str, FilterableAttribute] = dict(attributes or {})

    @classmethod
    def from_config(
        cls, config: Mapping[str, Any], *, strict: bool = False
    ) -> FilterableAttributes:
        """
        Parse a raw declaration.

        Args:
            config: Mapping of field name to operation name or
                ``{operation, table}`` record.
            strict: Reject unknown operation names instead of turning them
                into no-ops.

        Raises:
            FilterConfigurationError: If the declaration is malformed.
        """
        if not isinstance(config, Mapping):
            raise FilterConfigurationError(
                "Filterable attributes must be declared as a mapping"
            )

        errors: dict[str, list[str]] = {}
        attributes: dict[str, FilterableAttribute] = {}
        for name, raw in config.items():
            if not isinstance(name, str) or not name:
                errors.setdefault(str(name), []).append(
                    "Attribute names must be non-empty strings"
                )
                continue
            parsed = _parse_attribute(name, raw, strict, errors)
            if parsed is not None:
                attributes[name] = parsed

        if errors:
            raise FilterConfigurationError(errors)
        return cls(attributes)

    def __getitem__(self, name: str) -> FilterableAttribute:
        return self._attributes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"

    def is_filterable(self, attribute: str) -> bool:
        """True if *attribute* is declared verbatim (dotted keys are not split)."""
        return attribute in self._attributes

    def operation_for(self, attribute: str) -> FilterOperation | None:
        """
        Return the operation to apply for a resolved attribute.

        Dotted keys only match a declared ``{operation, table}`` record for
        the whole dotted key. Plain keys only match a declared operation name.
        Anything else yields ``None``.
        """
        entry = self._attributes.get(attribute)
        if entry is None:
            return None
        if "." in attribute:
            return entry.operation if entry.declared_as_record else None
        return None if entry.declared_as_record else entry.operation

    def table_for(self, relation: str, model: type[Any]) -> str | None:
        """Declared table for *relation*, falling back to the model's table."""
        entry = self._attributes.get(relation)
        if entry is not None and entry.table:
            return entry.table
        return getattr(model, "__tablename__", None)


def _parse_attribute(
    name: str,
    raw: Any,
    strict: bool,
    errors: dict[str, list[str]],
) -> FilterableAttribute | None:
    if isinstance(raw, str):
        return FilterableAttribute(
            operation=_parse_operation(name, raw, strict, errors)
        )

    if isinstance(raw, Mapping):
        try:
            record = _AttributeRecord.model_validate(dict(raw))
        except PydanticValidationError as exc:
            for error in exc.errors():
                loc = ".".join([name, *(str(p) for p in error.get("loc", ()))])
                errors.setdefault(loc, []).append(error.get("msg", "invalid value"))
            return None
        return FilterableAttribute(
            operation=_parse_operation(name, record.operation, strict, errors),
            table=record.table,
            declared_as_record=True,
        )

    errors.setdefault(name, []).append(
        "Expected an operation name or an {operation, table} record, "
        f"got {type(raw).__name__}"
    )
    return None


def _parse_operation(
    name: str,
    raw: str | None,
    strict: bool,
    errors: dict[str, list[str]],
) -> FilterOperation | None:
    if raw is None:
        return None
    try:
        return FilterOperation(raw)
    except ValueError:
        if strict:
            errors.setdefault(name, []).append(f"Unknown filter operation {raw!r}")
        else:
            logger.warning(
                "Unknown filter operation %r for attribute %r; it will be ignored",
                raw,
                name,
            )
        return None

"""
SQLAlchemy model mixin exposing filter maps as query criteria.

Declare the filterable fields on the model::

    class Post(SmartFilterMixin, Base):
        __tablename__ = "posts"
        __filterable_attributes__ = {
            "title": "like",
            "author.created_at": {"operation": "date", "table": "users"},
        }

    stmt = Post.filtered({"title": "sql", "author.created_at": {"date_from": "2024-01-01"}})

The declaration is parsed when the class is created, so malformed
declarations fail at import time rather than on the first request. Set
``__filterable_strict__ = True`` to reject unknown operation names.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import select

from .applicator import FilterApplicator
from .attributes import FilterableAttributes
from .exceptions import FilterConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import Select


class SmartFilterMixin:
    """Adds ``apply_filter`` / ``filtered`` to a declarative model."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared = getattr(cls, "__filterable_attributes__", None)
        if declared is None:
            return
        attributes = FilterableAttributes.from_config(
            declared, strict=getattr(cls, "__filterable_strict__", False)
        )
        cls.__smart_filter__ = FilterApplicator(cls, attributes)  # type: ignore[attr-defined]

    @classmethod
    def filterable_attributes(cls) -> FilterableAttributes:
        return cls._smart_filter().attributes

    @classmethod
    def apply_filter(cls, query: Any, filters: Mapping[str, Any]) -> Any:
        """Append the criteria described by *filters* to *query*."""
        return cls._smart_filter().apply(query, filters)

    @classmethod
    def filtered(cls, filters: Mapping[str, Any]) -> Select[Any]:
        """``select(cls)`` with *filters* applied."""
        return cast("Select[Any]", cls.apply_filter(select(cls), filters))

    @classmethod
    def _smart_filter(cls) -> FilterApplicator:
        applicator: FilterApplicator | None = getattr(cls, "__smart_filter__", None)
        if applicator is None:
            raise FilterConfigurationError(
                f"{cls.__name__} does not declare __filterable_attributes__"
            )
        return applicator

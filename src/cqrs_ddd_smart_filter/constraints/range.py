"""Range constraints: between and date."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import func

from ..operations import FilterOperation
from .strategy import FilterConstraint

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

DATE_FROM = "date_from"
DATE_TO = "date_to"


class BetweenConstraint(FilterConstraint):
    """Inclusive range; only applied to a two-item sequence."""

    @property
    def operation(self) -> FilterOperation:
        return FilterOperation.BETWEEN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool] | None:
        if not _is_pair(value):
            return None
        return cast("ColumnElement[bool]", column.between(value[0], value[1]))


class DateConstraint(FilterConstraint):
    """
    Date range from a ``{date_from, date_to}`` record.

    Both bounds compare the raw column inclusively; a single bound compares
    the column's date part.
    """

    @property
    def operation(self) -> FilterOperation:
        return FilterOperation.DATE

    def apply(self, column: Any, value: Any) -> ColumnElement[bool] | None:
        if not isinstance(value, Mapping):
            return None
        date_from = value.get(DATE_FROM)
        date_to = value.get(DATE_TO)
        if date_from is not None and date_to is not None:
            return cast("ColumnElement[bool]", column.between(date_from, date_to))
        if date_from is not None:
            return cast("ColumnElement[bool]", func.date(column) >= date_from)
        if date_to is not None:
            return cast("ColumnElement[bool]", func.date(column) <= date_to)
        return None


def _is_pair(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and len(value) == 2
    )

"""Substring and equality constraints."""

from __future__ import annotations

import operator as op_module
from typing import TYPE_CHECKING, Any, cast

from ..operations import FilterOperation
from .strategy import FilterConstraint

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class LikeConstraint(FilterConstraint):
    @property
    def operation(self) -> FilterOperation:
        return FilterOperation.LIKE

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.like(f"%{value}%"))


class EqualsConstraint(FilterConstraint):
    @property
    def operation(self) -> FilterOperation:
        return FilterOperation.EQUALS

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", op_module.eq(column, value))

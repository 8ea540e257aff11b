"""
Leaf constraint strategy.

Each :class:`FilterOperation` is compiled by an isolated
``FilterConstraint`` registered in a ``ConstraintRegistry``, the same way
the specification compiler dispatches its operators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from ..operations import FilterOperation


class FilterConstraint(ABC):
    """
    Strategy interface for compiling a filter operation into a
    SQLAlchemy ``ColumnElement[bool]``.
    """

    @property
    @abstractmethod
    def operation(self) -> FilterOperation:
        """The operation this strategy handles."""
        ...

    @abstractmethod
    def apply(
        self,
        column: Any,
        value: Any,
    ) -> ColumnElement[bool] | None:
        """
        Build a SQLAlchemy filter clause.

        Args:
            column: A SQLAlchemy column or instrumented attribute.
            value: The raw filter value.

        Returns:
            A SQLAlchemy boolean expression, or ``None`` when the value does
            not have the shape the operation needs.
        """
        ...


class ConstraintRegistry:
    """
    Registry of ``FilterConstraint`` instances keyed by
    :class:`FilterOperation`.
    """

    def __init__(self) -> None:
        self._constraints: dict[FilterOperation, FilterConstraint] = {}

    def register(self, constraint: FilterConstraint) -> None:
        self._constraints[constraint.operation] = constraint

    def register_all(self, *constraints: FilterConstraint) -> None:
        for constraint in constraints:
            self.register(constraint)

    def get(self, operation: FilterOperation) -> FilterConstraint | None:
        return self._constraints.get(operation)

    def apply(
        self,
        operation: FilterOperation | None,
        column: Any,
        value: Any,
    ) -> ColumnElement[bool] | None:
        """
        Look up the operation and apply.

        Unregistered or missing operations produce no clause.
        """
        if operation is None:
            return None
        constraint = self.get(operation)
        if constraint is None:
            return None
        return constraint.apply(column, value)

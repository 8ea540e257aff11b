"""
Leaf constraint implementations and default registry.

Usage::

    from cqrs_ddd_smart_filter.constraints import DEFAULT_CONSTRAINT_REGISTRY

    clause = DEFAULT_CONSTRAINT_REGISTRY.apply(FilterOperation.LIKE, column, "abc")
"""

from __future__ import annotations

from .range import BetweenConstraint, DateConstraint
from .standard import EqualsConstraint, LikeConstraint
from .strategy import ConstraintRegistry, FilterConstraint


def build_default_constraint_registry() -> ConstraintRegistry:
    """Create a registry with all built-in constraints."""
    registry = ConstraintRegistry()
    registry.register_all(
        LikeConstraint(),
        EqualsConstraint(),
        BetweenConstraint(),
        DateConstraint(),
    )
    return registry


DEFAULT_CONSTRAINT_REGISTRY: ConstraintRegistry = build_default_constraint_registry()

__all__ = [
    "DEFAULT_CONSTRAINT_REGISTRY",
    "BetweenConstraint",
    "ConstraintRegistry",
    "DateConstraint",
    "EqualsConstraint",
    "FilterConstraint",
    "LikeConstraint",
    "build_default_constraint_registry",
]

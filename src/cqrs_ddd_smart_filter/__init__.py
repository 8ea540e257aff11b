"""HTTP-style filter maps as SQLAlchemy criteria — equality, substring, range, date."""

from __future__ import annotations

from .applicator import MAX_RELATION_DEPTH, FilterApplicator
from .attributes import FilterableAttribute, FilterableAttributes
from .constraints import (
    DEFAULT_CONSTRAINT_REGISTRY,
    ConstraintRegistry,
    FilterConstraint,
    build_default_constraint_registry,
)
from .exceptions import (
    FilterConfigurationError,
    SmartFilterError,
    UnknownAttributeError,
    UnknownRelationError,
)
from .mixins import SmartFilterMixin
from .operations import FilterOperation
from .resolver import ResolvedFilter, resolve_filters

__all__ = [
    "DEFAULT_CONSTRAINT_REGISTRY",
    "MAX_RELATION_DEPTH",
    "ConstraintRegistry",
    "FilterApplicator",
    "FilterConfigurationError",
    "FilterConstraint",
    "FilterOperation",
    "FilterableAttribute",
    "FilterableAttributes",
    "ResolvedFilter",
    "SmartFilterError",
    "SmartFilterMixin",
    "UnknownAttributeError",
    "UnknownRelationError",
    "build_default_constraint_registry",
    "resolve_filters",
]

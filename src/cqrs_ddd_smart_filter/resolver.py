"""Resolve raw filter maps against a model's filterable attributes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .attributes import FilterableAttributes
    from .operations import FilterOperation


class ResolvedFilter(NamedTuple):
    """A filter value ready for classification.

    ``operation`` and ``table`` are only set on entries synthesized from a
    dotted key whose root segment is itself declared.
    """

    value: Any
    operation: FilterOperation | None = None
    table: str | None = None


def resolve_filters(
    attributes: FilterableAttributes,
    filters: Mapping[str, Any],
) -> dict[str, ResolvedFilter]:
    """
    Merge *filters* with entries synthesized from declared dotted keys.

    For every declared key present in *filters* that contains a dot and whose
    root segment is declared too, an entry is added under the key with the
    root stripped (``author.profile.bio`` -> ``profile.bio``), carrying the
    root's operation and table. Deeper paths are left to the applicator.
    """
    filtered_keys = [key for key in attributes if key in filters]
    resolved = {key: ResolvedFilter(value) for key, value in filters.items()}
    resolved.update(_nested_filters(attributes, filtered_keys, filters))
    return resolved


def _nested_filters(
    attributes: FilterableAttributes,
    filtered_keys: Iterable[str],
    filters: Mapping[str, Any],
) -> dict[str, ResolvedFilter]:
    nested: dict[str, ResolvedFilter] = {}
    for key in filtered_keys:
        root, sep, rest = key.partition(".")
        if not sep or root not in attributes:
            continue
        entry = attributes[root]
        nested[rest] = ResolvedFilter(
            filters.get(key),
            entry.operation,
            entry.table if entry.declared_as_record else None,
        )
    return nested

from enum import Enum


class FilterOperation(str, Enum):
    """Leaf operations a filterable attribute can be declared with."""

    LIKE = "like"
    EQUALS = "equals"
    BETWEEN = "between"
    DATE = "date"

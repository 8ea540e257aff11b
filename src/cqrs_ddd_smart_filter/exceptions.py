"""Smart filter exceptions."""

from __future__ import annotations


class SmartFilterError(Exception):
    """Root exception for the smart filter package."""


class FilterConfigurationError(SmartFilterError):
    """Raised when a model's filterable attribute declaration is invalid.

    Carries structured errors: ``{attribute: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class UnknownRelationError(FilterConfigurationError):
    """Raised when a filter path names a relationship the model does not have."""

    def __init__(self, model: type, relation: str) -> None:
        self.model = model
        self.relation = relation
        super().__init__(
            {relation: [f"Model {model.__name__} has no relationship {relation!r}"]}
        )


class UnknownAttributeError(FilterConfigurationError):
    """Raised when a filter path ends in a column the model does not have."""

    def __init__(self, model: type, attribute: str) -> None:
        self.model = model
        self.attribute = attribute
        super().__init__(
            {attribute: [f"Model {model.__name__} has no attribute {attribute!r}"]}
        )

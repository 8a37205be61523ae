"""Errors raised by the calculator."""


class CalculatorError(Exception):
    """Base class for calculator errors."""


class FoodNotFoundError(CalculatorError):
    """Raised when a query matches no food in the dataset."""

    def __init__(self, query: str) -> None:
        super().__init__(f"No food matches {query!r}")
        self.query = query


class InvalidInputError(CalculatorError):
    """Raised when a portion or breed selection is missing or malformed."""

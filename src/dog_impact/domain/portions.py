"""Portion selectors."""

from enum import Enum

from dog_impact.domain.errors import InvalidInputError


class PortionSelection(Enum):
    """Named portion sizes a user can pick."""

    BITE = "bite"
    PIECE = "piece"
    SLICE = "slice"
    WHOLE_ITEM = "whole_item"
    HUNDRED_GRAM = "100g"

    @classmethod
    def parse(cls, raw: str) -> "PortionSelection":
        """Parse a selector string such as ``"slice"`` or ``"100g"``."""
        value = raw.strip().lower()
        for entry in cls:
            if entry.value == value or entry.name.lower() == value:
                return entry
        raise InvalidInputError(f"Unknown portion selection: {raw!r}")


FIXED_PORTION_GRAMS: dict[PortionSelection, float] = {
    PortionSelection.BITE: 5,
    PortionSelection.PIECE: 15,
    PortionSelection.SLICE: 30,
    PortionSelection.HUNDRED_GRAM: 100,
}

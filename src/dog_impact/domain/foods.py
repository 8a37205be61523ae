"""Reference data models for foods and dog breeds."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodRecord:
    """A food entry from the reference dataset."""

    category: str
    name: str
    calories_per_100g: float
    whole_item_weight_g: float | None = None
    warning: str | None = None
    per_100g: str = ""
    kilojoules_per_100g: float | None = None


@dataclass(frozen=True)
class BreedRecord:
    """A dog breed with its typical weight range in pounds."""

    name: str
    min_weight_lb: float
    max_weight_lb: float

    @property
    def avg_weight_lb(self) -> float:
        """Midpoint of the breed's weight range."""
        return (self.min_weight_lb + self.max_weight_lb) / 2

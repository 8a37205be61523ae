"""Domain models for impact calculations."""

from dataclasses import dataclass

from dog_impact.domain.foods import BreedRecord, FoodRecord
from dog_impact.domain.portions import PortionSelection


@dataclass(frozen=True)
class ImpactResult:
    """Calorie impact of a portion on a dog and its human equivalent."""

    dog_calories: float
    dog_daily_calories: float
    dog_impact_percent: float
    human_equivalent_kcal: float
    human_impact_percent: float


@dataclass(frozen=True)
class ComparisonCandidate:
    """A familiar human food with a reference calorie count."""

    name: str
    reference_calories: float


@dataclass(frozen=True)
class RelatableReference:
    """Rendered "that's like eating X" comparison."""

    display_text: str
    servings: float


@dataclass(frozen=True)
class ImpactReport:
    """Full output of a single calculation."""

    food: FoodRecord
    breed: BreedRecord
    portion: PortionSelection
    grams: float
    impact: ImpactResult
    references: tuple[RelatableReference, ...]

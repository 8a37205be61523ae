"""Pydantic request and response models for the HTTP API."""

from pydantic import BaseModel, Field

from dog_impact.domain.foods import BreedRecord, FoodRecord
from dog_impact.domain.impact import ImpactReport


class ImpactRequest(BaseModel):
    """Inputs for a single impact calculation."""

    food: str = Field(min_length=1)
    breed: str = Field(min_length=1)
    portion: str = "bite"


class FoodOut(BaseModel):
    """Food entry as exposed to clients."""

    category: str
    name: str
    calories_per_100g: float
    whole_item_weight_g: float | None = None
    warning: str | None = None

    @classmethod
    def from_record(cls, food: FoodRecord) -> "FoodOut":
        return cls(
            category=food.category,
            name=food.name,
            calories_per_100g=food.calories_per_100g,
            whole_item_weight_g=food.whole_item_weight_g,
            warning=food.warning,
        )


class BreedOut(BaseModel):
    """Breed entry with its average weight."""

    name: str
    min_weight_lb: float
    max_weight_lb: float
    avg_weight_lb: float

    @classmethod
    def from_record(cls, breed: BreedRecord) -> "BreedOut":
        return cls(
            name=breed.name,
            min_weight_lb=breed.min_weight_lb,
            max_weight_lb=breed.max_weight_lb,
            avg_weight_lb=breed.avg_weight_lb,
        )


class ImpactOut(BaseModel):
    """Calorie figures for a portion."""

    dog_calories: float = Field(ge=0)
    dog_daily_calories: float = Field(gt=0)
    dog_impact_percent: float = Field(ge=0)
    human_equivalent_kcal: float = Field(ge=0)
    human_impact_percent: float = Field(ge=0)


class ReferenceOut(BaseModel):
    """Relatable human food comparison."""

    display_text: str
    servings: float = Field(gt=0)


class ImpactResponse(BaseModel):
    """Full calculation result."""

    food: FoodOut
    breed: BreedOut
    portion: str
    grams: float
    impact: ImpactOut
    references: list[ReferenceOut]

    @classmethod
    def from_report(cls, report: ImpactReport) -> "ImpactResponse":
        impact = report.impact
        return cls(
            food=FoodOut.from_record(report.food),
            breed=BreedOut.from_record(report.breed),
            portion=report.portion.value,
            grams=report.grams,
            impact=ImpactOut(
                dog_calories=impact.dog_calories,
                dog_daily_calories=impact.dog_daily_calories,
                dog_impact_percent=impact.dog_impact_percent,
                human_equivalent_kcal=impact.human_equivalent_kcal,
                human_impact_percent=impact.human_impact_percent,
            ),
            references=[
                ReferenceOut(
                    display_text=reference.display_text, servings=reference.servings
                )
                for reference in report.references
            ],
        )

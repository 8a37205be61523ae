"""Calorie conversion between dog and human daily budgets."""

from dog_impact.domain.foods import BreedRecord, FoodRecord
from dog_impact.domain.impact import ImpactResult

HUMAN_DAILY_KCAL = 2200.0
DOG_KCAL_PER_LB_PER_DAY = 30.0


def convert(
    food: FoodRecord,
    grams: float,
    breed: BreedRecord,
    *,
    human_daily_kcal: float = HUMAN_DAILY_KCAL,
    dog_kcal_per_lb_per_day: float = DOG_KCAL_PER_LB_PER_DAY,
) -> ImpactResult:
    """Compute a portion's share of a dog's daily calories and its human equivalent.

    Values are not rounded. The breed's average weight must be positive, which
    the reference data parser guarantees.
    """
    dog_calories = (food.calories_per_100g / 100) * grams
    dog_daily_calories = breed.avg_weight_lb * dog_kcal_per_lb_per_day
    dog_impact_percent = (dog_calories / dog_daily_calories) * 100
    human_equivalent_kcal = (dog_impact_percent / 100) * human_daily_kcal
    human_impact_percent = (human_equivalent_kcal / human_daily_kcal) * 100
    return ImpactResult(
        dog_calories=dog_calories,
        dog_daily_calories=dog_daily_calories,
        dog_impact_percent=dog_impact_percent,
        human_equivalent_kcal=human_equivalent_kcal,
        human_impact_percent=human_impact_percent,
    )

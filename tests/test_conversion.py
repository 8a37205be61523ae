"""Tests for the calorie converter."""

import pytest

from dog_impact.domain.foods import BreedRecord
from dog_impact.domain.portions import PortionSelection
from dog_impact.services.conversion import convert
from dog_impact.services.portions import resolve_grams
from tests.conftest import make_food


def test_pizza_slice_for_twenty_pound_dog() -> None:
    food = make_food("Pizza", 270, whole_item_weight_g=100)
    breed = BreedRecord(name="Beagle", min_weight_lb=15, max_weight_lb=25)
    grams = resolve_grams(PortionSelection.SLICE, food)

    result = convert(food, grams, breed)

    assert grams == 30
    assert result.dog_calories == pytest.approx(81)
    assert result.dog_daily_calories == pytest.approx(600)
    assert result.dog_impact_percent == pytest.approx(13.5)
    assert result.human_equivalent_kcal == pytest.approx(297)
    assert result.human_impact_percent == pytest.approx(13.5)


@pytest.mark.parametrize("calories", [0.5, 52, 270, 884])
@pytest.mark.parametrize("grams", [5, 30, 182])
def test_human_percent_matches_dog_percent(calories, grams) -> None:
    food = make_food("Food", calories)
    breed = BreedRecord(name="Pug", min_weight_lb=14, max_weight_lb=18)

    result = convert(food, grams, breed)

    assert result.human_impact_percent == pytest.approx(result.dog_impact_percent)


def test_dog_calories_increase_with_portion_size() -> None:
    food = make_food("Cheddar Cheese", 403, whole_item_weight_g=250)
    breed = BreedRecord(name="Boxer", min_weight_lb=50, max_weight_lb=80)
    portions = [
        PortionSelection.BITE,
        PortionSelection.PIECE,
        PortionSelection.SLICE,
        PortionSelection.HUNDRED_GRAM,
        PortionSelection.WHOLE_ITEM,
    ]

    calories = [
        convert(food, resolve_grams(portion, food), breed).dog_calories
        for portion in portions
    ]

    assert calories == sorted(calories)
    assert len(set(calories)) == len(calories)


def test_custom_daily_budgets() -> None:
    food = make_food("Bacon", 500)
    breed = BreedRecord(name="Beagle", min_weight_lb=20, max_weight_lb=20)

    result = convert(
        food, 10, breed, human_daily_kcal=2000, dog_kcal_per_lb_per_day=25
    )

    assert result.dog_daily_calories == pytest.approx(500)
    assert result.dog_impact_percent == pytest.approx(10)
    assert result.human_equivalent_kcal == pytest.approx(200)


def test_zero_grams_yields_zero_impact() -> None:
    food = make_food("Apple", 52)
    breed = BreedRecord(name="Pug", min_weight_lb=14, max_weight_lb=18)

    result = convert(food, 0, breed)

    assert result.dog_calories == 0
    assert result.human_equivalent_kcal == 0
    assert result.dog_daily_calories > 0


def test_breed_average_weight() -> None:
    breed = BreedRecord(name="Labrador Retriever", min_weight_lb=55, max_weight_lb=80)

    assert breed.avg_weight_lb == 67.5

"""Shared test fixtures."""

from dataclasses import dataclass

import pytest

from dog_impact.adapters.csv_reference_loader import ReferenceLoader
from dog_impact.config import Settings
from dog_impact.containers import AppContainer, build_container
from dog_impact.domain.foods import BreedRecord, FoodRecord
from dog_impact.services.impact import ImpactService
from dog_impact.services.reference_data import ReferenceData


def make_food(
    name: str,
    calories_per_100g: float = 100,
    *,
    category: str = "Test",
    whole_item_weight_g: float | None = None,
    warning: str | None = None,
) -> FoodRecord:
    return FoodRecord(
        category=category,
        name=name,
        calories_per_100g=calories_per_100g,
        whole_item_weight_g=whole_item_weight_g,
        warning=warning,
    )


SAMPLE_FOODS = (
    make_food("Pizza Hut Brand Pizza", 276, category="Fast Food"),
    make_food("Pepperoni Pizza", 298, category="Fast Food", whole_item_weight_g=111),
    make_food("Pizza", 270, category="Fast Food", whole_item_weight_g=107),
    make_food("Cheddar Cheese", 403, category="Dairy"),
    make_food("Cheese Sauce, Restaurant Style", 180, category="Dairy"),
    make_food("Mozzarella Cheese", 280, category="Dairy"),
    make_food(
        "Grapes",
        69,
        category="Fruits",
        whole_item_weight_g=5,
        warning="Grapes are toxic to dogs.",
    ),
    make_food("Apple", 52, category="Fruits", whole_item_weight_g=182),
)

SAMPLE_BREEDS = (
    BreedRecord(name="Beagle", min_weight_lb=15, max_weight_lb=25),
    BreedRecord(name="Chihuahua", min_weight_lb=3, max_weight_lb=6),
    BreedRecord(name="Labrador Retriever", min_weight_lb=55, max_weight_lb=80),
)


@dataclass
class StaticReferenceLoader(ReferenceLoader):
    """Loader returning a fixed snapshot and counting calls."""

    data: ReferenceData
    calls: int = 0

    def load(self) -> ReferenceData:
        self.calls += 1
        return self.data


@pytest.fixture
def foods() -> tuple[FoodRecord, ...]:
    return SAMPLE_FOODS


@pytest.fixture
def reference_data() -> ReferenceData:
    return ReferenceData(foods=SAMPLE_FOODS, breeds=SAMPLE_BREEDS)


@pytest.fixture
def impact_service(reference_data: ReferenceData) -> ImpactService:
    return ImpactService(reference_data=reference_data)


@pytest.fixture
def settings() -> Settings:
    return Settings(suggestion_limit=3)


@pytest.fixture
def container(settings: Settings, reference_data: ReferenceData) -> AppContainer:
    return build_container(settings, loader=StaticReferenceLoader(reference_data))

"""Portion to gram resolution."""

from dog_impact.domain.foods import FoodRecord
from dog_impact.domain.portions import FIXED_PORTION_GRAMS, PortionSelection

WHOLE_ITEM_FALLBACK_GRAMS = 100.0


def resolve_grams(selection: PortionSelection, food: FoodRecord) -> float:
    """Return the gram weight of a portion of the given food."""
    if selection is PortionSelection.WHOLE_ITEM:
        weight = food.whole_item_weight_g
        if weight is not None and weight > 0:
            return float(weight)
        return WHOLE_ITEM_FALLBACK_GRAMS
    return float(FIXED_PORTION_GRAMS[selection])

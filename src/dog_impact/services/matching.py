"""Free-text food matching against the reference dataset."""

from collections.abc import Sequence

from dog_impact.domain.errors import FoodNotFoundError
from dog_impact.domain.foods import FoodRecord

_EXCLUDED_TOKENS = ("brand", "restaurant")


def match_food(query: str, foods: Sequence[FoodRecord]) -> FoodRecord:
    """Resolve a query to a single food, first match in dataset order wins.

    An exact (case-insensitive) name match takes priority. Otherwise the first
    food whose name contains every query token is returned, skipping branded
    and restaurant entries.
    """
    normalized = query.strip().lower()
    if not normalized:
        raise FoodNotFoundError(query)

    for food in foods:
        if food.name.lower() == normalized:
            return food

    tokens = normalized.split()
    for food in foods:
        name = food.name.lower()
        if any(excluded in name for excluded in _EXCLUDED_TOKENS):
            continue
        if _contains_all(name, tokens):
            return food

    raise FoodNotFoundError(query)


def suggest_foods(
    query: str, foods: Sequence[FoodRecord], min_length: int = 2
) -> list[FoodRecord]:
    """Return every food containing all query tokens, sorted by name."""
    normalized = query.strip().lower()
    if len(normalized) < min_length:
        return []
    tokens = normalized.split()
    matches = [food for food in foods if _contains_all(food.name.lower(), tokens)]
    return sorted(matches, key=lambda food: food.name)


def _contains_all(name: str, tokens: list[str]) -> bool:
    return all(token in name for token in tokens)

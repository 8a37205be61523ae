"""Relatable "that's like eating X" comparisons for a calorie amount."""

import math
from collections.abc import Sequence

from dog_impact.domain.impact import ComparisonCandidate, RelatableReference

MIN_SERVINGS = 0.1
MAX_SERVINGS = 5.0
DEFAULT_LIMIT = 3

# Below this many servings counts are rounded to the nearest half.
HALF_STEP_LIMIT = 2.0

_FRACTION_PHRASES = (
    (0.25, "a tiny bit of {name}"),
    (0.5, "a quarter of a {name}"),
    (0.75, "half a {name}"),
    (1.25, "1 {name}"),
)

PRIORITY_FOODS = frozenset(
    {
        "Pizza Slice",
        "Hamburger",
        "Hot Dog",
        "Apple",
        "Banana",
        "Orange",
        "Egg",
        "Slice of Bread",
        "Chocolate Bar",
        "Cookie",
        "Can of Soda",
        "Beer",
        "Glass of Wine",
        "Cup of Ice Cream",
        "Cup of French Fries",
        "Cup of Popcorn",
        "Handful of Chips",
    }
)

# Cup measures that still read as a snack rather than a recipe ingredient.
_RELATABLE_CUPS = frozenset(
    {"Cup of Ice Cream", "Cup of French Fries", "Cup of Popcorn"}
)

_DRIED_FRUITS = (
    "Strawberries",
    "Blueberries",
    "Raspberries",
    "Blackberries",
    "Cherries",
    "Peaches",
    "Pears",
    "Plums",
    "Grapes",
    "Oranges",
    "Lemons",
    "Limes",
    "Grapefruit",
    "Tangerines",
    "Clementines",
    "Blood Oranges",
    "Minneola",
    "Jujube",
    "Lychees",
    "Passion Fruit",
    "Plantains",
    "Pomegranate",
    "Quince",
    "Rambutan",
    "Rhubarb",
    "Starfruit",
    "Tamarind",
    "Watermelon",
    "Acerola",
    "Asian Pear",
    "Avocado",
    "Breadfruit",
    "Cantaloupe Melon",
    "Casaba Melon",
    "Cherimoya",
    "Dragon Fruit",
    "Durian",
    "Feijoa",
    "Galia Melon",
    "Guava",
    "Honeydew",
    "Jackfruit",
    "Mulberries",
    "Nectarine",
    "Olives",
    "Peach",
    "Persimmon",
    "Physalis",
    "Plum",
    "Raisins",
    "Tangerine",
)

COMMON_FOODS: tuple[ComparisonCandidate, ...] = (
    ComparisonCandidate("Pizza Slice", 285),
    ComparisonCandidate("Hamburger", 250),
    ComparisonCandidate("Hot Dog", 150),
    ComparisonCandidate("Chicken Breast", 165),
    ComparisonCandidate("Apple", 95),
    ComparisonCandidate("Banana", 105),
    ComparisonCandidate("Orange", 62),
    ComparisonCandidate("Egg", 70),
    ComparisonCandidate("Slice of Bread", 80),
    ComparisonCandidate("Cup of Rice", 200),
    ComparisonCandidate("Cup of Pasta", 200),
    ComparisonCandidate("Cup of Milk", 150),
    ComparisonCandidate("Cup of Yogurt", 150),
    ComparisonCandidate("Cup of Ice Cream", 250),
    ComparisonCandidate("Chocolate Bar", 240),
    ComparisonCandidate("Cookie", 50),
    ComparisonCandidate("Can of Soda", 150),
    ComparisonCandidate("Beer", 150),
    ComparisonCandidate("Glass of Wine", 125),
    ComparisonCandidate("Cup of Popcorn", 30),
    ComparisonCandidate("Handful of Chips", 150),
    ComparisonCandidate("Cup of French Fries", 365),
    ComparisonCandidate("Cup of Broccoli", 55),
    ComparisonCandidate("Cup of Carrots", 52),
    ComparisonCandidate("Cup of Sweet Potato", 180),
    ComparisonCandidate("Cup of Mashed Potatoes", 237),
    ComparisonCandidate("Cup of Oatmeal", 150),
    ComparisonCandidate("Cup of Cereal", 120),
    ComparisonCandidate("Cup of Granola", 400),
    ComparisonCandidate("Cup of Nuts", 800),
    ComparisonCandidate("Cup of Peanut Butter", 1517),
    ComparisonCandidate("Cup of Olive Oil", 1920),
    ComparisonCandidate("Cup of Butter", 1628),
    ComparisonCandidate("Cup of Honey", 1031),
    ComparisonCandidate("Cup of Sugar", 774),
    ComparisonCandidate("Cup of Flour", 455),
    ComparisonCandidate("Cup of Chocolate Chips", 805),
    ComparisonCandidate("Cup of Raisins", 434),
    ComparisonCandidate("Cup of Dried Cranberries", 400),
    ComparisonCandidate("Cup of Dried Apricots", 313),
    ComparisonCandidate("Cup of Dried Figs", 371),
    ComparisonCandidate("Cup of Dried Prunes", 407),
    ComparisonCandidate("Cup of Dried Dates", 502),
    ComparisonCandidate("Cup of Dried Mango", 319),
    ComparisonCandidate("Cup of Dried Pineapple", 434),
    ComparisonCandidate("Cup of Dried Papaya", 359),
    ComparisonCandidate("Cup of Dried Kiwi", 359),
    *(ComparisonCandidate(f"Cup of Dried {fruit}", 434) for fruit in _DRIED_FRUITS),
)


def relatable_catalog(
    catalog: Sequence[ComparisonCandidate] = COMMON_FOODS,
) -> tuple[ComparisonCandidate, ...]:
    """Drop ingredient-style "Cup of ..." entries that nobody eats on their own."""
    return tuple(
        candidate
        for candidate in catalog
        if not candidate.name.startswith("Cup of") or candidate.name in _RELATABLE_CUPS
    )


def select_references(
    target_kcal: float,
    catalog: Sequence[ComparisonCandidate],
    *,
    limit: int = DEFAULT_LIMIT,
    priority: frozenset[str] = PRIORITY_FOODS,
) -> tuple[RelatableReference, ...]:
    """Return up to ``limit`` comparisons, closest to a single serving first.

    Candidates needing fewer than 0.1 or more than 5 servings are dropped. An
    empty tuple means no comparison is available.
    """
    scored = [
        (candidate, target_kcal / candidate.reference_calories)
        for candidate in catalog
    ]
    in_range = [
        (candidate, servings)
        for candidate, servings in scored
        if MIN_SERVINGS <= servings <= MAX_SERVINGS
    ]
    ranked = sorted(
        in_range,
        key=lambda item: (
            item[0].name not in priority,
            abs(target_kcal - item[0].reference_calories),
        ),
    )
    references = [
        RelatableReference(
            display_text=describe_servings(candidate.name, servings),
            servings=servings,
        )
        for candidate, servings in ranked
    ]
    references.sort(key=lambda reference: abs(reference.servings - 1))
    return tuple(references[:limit])


def describe_servings(name: str, servings: float) -> str:
    """Render a serving count as friendly text, e.g. ``"half a Banana"``."""
    for upper_bound, template in _FRACTION_PHRASES:
        if servings < upper_bound:
            return template.format(name=name)
    if servings < HALF_STEP_LIMIT:
        rounded = _round_half_up(servings * 2) / 2
        label = name if rounded == 1 else pluralize(name)
        return f"{_format_count(rounded)} {label}"
    return f"{_format_count(_round_half_up(servings))} {pluralize(name)}"


def pluralize(name: str) -> str:
    """Append an "s" unless the name already ends in one."""
    if name.endswith("s"):
        return name
    return f"{name}s"


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def _format_count(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return f"{value:g}"

"""Parsing of tabular reference data into immutable records."""

import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from dog_impact.domain.errors import InvalidInputError
from dog_impact.domain.foods import BreedRecord, FoodRecord

_CALORIES_WITH_UNIT = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*k?cal", re.IGNORECASE)
_KILOJOULES_WITH_UNIT = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*kj", re.IGNORECASE)

_MIN_FOOD_COLUMNS = 5
_MIN_BREED_COLUMNS = 3


@dataclass(frozen=True)
class ReferenceData:
    """Immutable snapshot of the foods and breeds loaded for a session."""

    foods: tuple[FoodRecord, ...]
    breeds: tuple[BreedRecord, ...]

    def find_breed(self, name: str) -> BreedRecord:
        """Return the breed with the given name."""
        if not name or not name.strip():
            raise InvalidInputError("A breed must be selected")
        wanted = name.strip()
        for breed in self.breeds:
            if breed.name == wanted:
                return breed
        raise InvalidInputError(f"Unknown breed: {name!r}")


def parse_calories(raw: str | None) -> float | None:
    """Parse a calorie value such as ``"62"`` or ``"62 cal"``."""
    if raw is None:
        return None
    return _parse_with_unit(raw, _CALORIES_WITH_UNIT)


def parse_kilojoules(raw: str | None) -> float | None:
    """Parse a kilojoule value such as ``"259"`` or ``"259 kJ"``."""
    if raw is None:
        return None
    return _parse_with_unit(raw, _KILOJOULES_WITH_UNIT)


def parse_food_row(row: Sequence[str]) -> FoodRecord | None:
    """Build a food record from a row, or return None if it is malformed."""
    if len(row) < _MIN_FOOD_COLUMNS:
        return None
    cells = [cell.strip() for cell in row]
    name = cells[1]
    calories = parse_calories(cells[3])
    if not name or calories is None or calories <= 0:
        return None
    whole_item = _cell(cells, 5)
    whole_item_weight = _parse_float(whole_item) if whole_item else None
    if whole_item_weight is not None and whole_item_weight <= 0:
        whole_item_weight = None
    return FoodRecord(
        category=cells[0],
        name=name,
        calories_per_100g=calories,
        whole_item_weight_g=whole_item_weight,
        warning=_cell(cells, 6) or None,
        per_100g=cells[2],
        kilojoules_per_100g=parse_kilojoules(cells[4]),
    )


def parse_breed_row(row: Sequence[str]) -> BreedRecord | None:
    """Build a breed record from a row, or return None if it is malformed."""
    if len(row) < _MIN_BREED_COLUMNS:
        return None
    name = row[0].strip()
    min_weight = _parse_float(row[1])
    max_weight = _parse_float(row[2])
    if not name or min_weight is None or max_weight is None:
        return None
    if min_weight <= 0 or max_weight <= 0 or max_weight < min_weight:
        return None
    return BreedRecord(name=name, min_weight_lb=min_weight, max_weight_lb=max_weight)


def parse_foods(rows: Iterable[Sequence[str]]) -> tuple[FoodRecord, ...]:
    """Parse food rows in dataset order, dropping malformed ones."""
    parsed = (parse_food_row(row) for row in rows)
    return tuple(food for food in parsed if food is not None)


def parse_breeds(rows: Iterable[Sequence[str]]) -> tuple[BreedRecord, ...]:
    """Parse breed rows, dropping malformed ones, sorted by name."""
    parsed = (parse_breed_row(row) for row in rows)
    breeds = [breed for breed in parsed if breed is not None]
    return tuple(sorted(breeds, key=lambda breed: breed.name))


def _cell(cells: list[str], index: int) -> str:
    return cells[index] if index < len(cells) else ""


def _parse_with_unit(raw: str, pattern: re.Pattern[str]) -> float | None:
    match = pattern.match(raw)
    text = match.group(1) if match else raw.strip()
    return _parse_float(text)


def _parse_float(text: str) -> float | None:
    try:
        value = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value

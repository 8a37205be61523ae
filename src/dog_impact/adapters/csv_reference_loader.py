"""CSV-backed loader for the food and breed reference tables."""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from dog_impact.services.reference_data import (
    ReferenceData,
    parse_breeds,
    parse_foods,
)

_logger = logging.getLogger(__name__)


class ReferenceLoader(Protocol):
    """Interface for loading reference data snapshots."""

    def load(self) -> ReferenceData:
        """Load foods and breeds and return an immutable snapshot."""


@dataclass
class CsvReferenceLoader(ReferenceLoader):
    """Read the calories and breeds CSV files from disk."""

    foods_path: Path
    breeds_path: Path
    encoding: str = "utf-8"

    def load(self) -> ReferenceData:
        """Load both tables, skipping malformed rows."""
        food_rows = self._read_rows(self.foods_path)
        breed_rows = self._read_rows(self.breeds_path)
        foods = parse_foods(food_rows)
        breeds = parse_breeds(breed_rows)
        _log_counts("foods", self.foods_path, len(food_rows), len(foods))
        _log_counts("breeds", self.breeds_path, len(breed_rows), len(breeds))
        return ReferenceData(foods=foods, breeds=breeds)

    def _read_rows(self, path: Path) -> list[list[str]]:
        """Return the data rows of a CSV file without its header."""
        with path.open(newline="", encoding=self.encoding) as handle:
            rows = [row for row in csv.reader(handle) if any(c.strip() for c in row)]
        return rows[1:]


def _log_counts(kind: str, path: Path, total: int, parsed: int) -> None:
    skipped = total - parsed
    if skipped:
        _logger.warning(
            "Skipped %s malformed %s rows in %s (loaded %s)",
            skipped,
            kind,
            path,
            parsed,
        )
    else:
        _logger.info("Loaded %s %s from %s", parsed, kind, path)

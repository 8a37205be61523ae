"""Application service tying matching, portions and conversion together."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from dog_impact.domain.errors import FoodNotFoundError
from dog_impact.domain.foods import FoodRecord
from dog_impact.domain.impact import ComparisonCandidate, ImpactReport
from dog_impact.domain.portions import PortionSelection
from dog_impact.services.conversion import (
    DOG_KCAL_PER_LB_PER_DAY,
    HUMAN_DAILY_KCAL,
    convert,
)
from dog_impact.services.matching import match_food, suggest_foods
from dog_impact.services.portions import resolve_grams
from dog_impact.services.reference_data import ReferenceData
from dog_impact.services.references import (
    DEFAULT_LIMIT,
    relatable_catalog,
    select_references,
)

_logger = logging.getLogger(__name__)


@dataclass
class ImpactService:
    """Compute impact reports against a loaded reference snapshot."""

    reference_data: ReferenceData
    catalog: Sequence[ComparisonCandidate] = field(default_factory=relatable_catalog)
    human_daily_kcal: float = HUMAN_DAILY_KCAL
    dog_kcal_per_lb_per_day: float = DOG_KCAL_PER_LB_PER_DAY
    max_references: int = DEFAULT_LIMIT
    suggestion_min_length: int = 2

    def estimate(
        self, query: str, portion: PortionSelection | str, breed_name: str
    ) -> ImpactReport:
        """Match the food, resolve the portion and compute the full report."""
        selection = (
            portion
            if isinstance(portion, PortionSelection)
            else PortionSelection.parse(portion)
        )
        breed = self.reference_data.find_breed(breed_name)
        try:
            food = match_food(query, self.reference_data.foods)
        except FoodNotFoundError:
            _logger.debug("No food matched query=%r", query)
            raise

        grams = resolve_grams(selection, food)
        impact = convert(
            food,
            grams,
            breed,
            human_daily_kcal=self.human_daily_kcal,
            dog_kcal_per_lb_per_day=self.dog_kcal_per_lb_per_day,
        )
        references = select_references(
            impact.human_equivalent_kcal, self.catalog, limit=self.max_references
        )
        if not references:
            _logger.debug(
                "No comparison available for %.1f kcal", impact.human_equivalent_kcal
            )
        return ImpactReport(
            food=food,
            breed=breed,
            portion=selection,
            grams=grams,
            impact=impact,
            references=references,
        )

    def suggest(self, query: str, limit: int | None = None) -> list[FoodRecord]:
        """Return name-sorted suggestions for a partially typed query."""
        matches = suggest_foods(
            query, self.reference_data.foods, min_length=self.suggestion_min_length
        )
        if limit is None:
            return matches
        return matches[:limit]

"""Dependency container wiring for the application."""

from dataclasses import dataclass

from dog_impact.adapters.csv_reference_loader import (
    CsvReferenceLoader,
    ReferenceLoader,
)
from dog_impact.config import Settings
from dog_impact.services.impact import ImpactService
from dog_impact.services.reference_data import ReferenceData


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    reference_data: ReferenceData
    impact_service: ImpactService


def build_container(
    settings: Settings | None = None, loader: ReferenceLoader | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_loader = loader or CsvReferenceLoader(
        foods_path=resolved_settings.foods_csv_path,
        breeds_path=resolved_settings.breeds_csv_path,
    )
    reference_data = resolved_loader.load()
    impact_service = ImpactService(
        reference_data=reference_data,
        human_daily_kcal=resolved_settings.human_daily_kcal,
        dog_kcal_per_lb_per_day=resolved_settings.dog_kcal_per_lb_per_day,
        max_references=resolved_settings.max_references,
        suggestion_min_length=resolved_settings.suggestion_min_length,
    )
    return AppContainer(
        settings=resolved_settings,
        reference_data=reference_data,
        impact_service=impact_service,
    )

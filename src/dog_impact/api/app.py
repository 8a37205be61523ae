"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from dog_impact.api.models import BreedOut, FoodOut, ImpactRequest, ImpactResponse
from dog_impact.app_logging import configure_logging
from dog_impact.containers import AppContainer
from dog_impact.domain.errors import FoodNotFoundError, InvalidInputError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    logger.info(
        "Serving %s foods and %s breeds",
        len(container.reference_data.foods),
        len(container.reference_data.breeds),
    )

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/breeds")
    async def list_breeds(request: Request) -> dict[str, list[BreedOut]]:
        """Return all breeds in alphabetical order."""
        state_container: AppContainer = request.app.state.container
        return {
            "breeds": [
                BreedOut.from_record(breed)
                for breed in state_container.reference_data.breeds
            ]
        }

    @app.get("/foods/suggestions")
    async def food_suggestions(
        request: Request, q: str = ""
    ) -> dict[str, list[FoodOut]]:
        """Return foods whose names contain every word of the query."""
        state_container: AppContainer = request.app.state.container
        matches = state_container.impact_service.suggest(
            q, limit=state_container.settings.suggestion_limit
        )
        return {"foods": [FoodOut.from_record(food) for food in matches]}

    @app.post("/impact")
    async def impact(payload: ImpactRequest, request: Request) -> ImpactResponse:
        """Calculate a portion's impact on the dog and its human equivalent."""
        state_container: AppContainer = request.app.state.container
        try:
            report = state_container.impact_service.estimate(
                payload.food, payload.portion, payload.breed
            )
        except FoodNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except InvalidInputError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return ImpactResponse.from_report(report)

    return app

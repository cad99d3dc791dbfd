"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from caffeine_check.api.models import (
    CalculateRequest,
    CalculateResponse,
    ItemResponse,
)
from caffeine_check.app_logging import configure_logging
from caffeine_check.containers import AppContainer
from caffeine_check.domain.assessment import AssessmentResult, ConsumptionEntry, Profile
from caffeine_check.domain.errors import AssessmentError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Caffeine Check")
    app.state.container = container

    @app.exception_handler(AssessmentError)
    async def assessment_error_handler(
        request: Request, exc: AssessmentError
    ) -> JSONResponse:
        logger.warning("Rejected assessment request: %s (%s)", exc, exc.kind)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc), "error": exc.kind},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/items", response_model=list[ItemResponse])
    async def list_items(request: Request) -> list[ItemResponse]:
        """Return the caffeine item catalog."""
        state_container: AppContainer = request.app.state.container
        return [
            ItemResponse(
                id=item.id,
                name=item.name,
                caffeine_per_unit=item.caffeine_per_unit,
            )
            for item in state_container.assessment_service.list_items()
        ]

    @app.post("/api/calculate", response_model=CalculateResponse)
    async def calculate(
        payload: CalculateRequest, request: Request
    ) -> CalculateResponse:
        """Assess a day's caffeine intake."""
        state_container: AppContainer = request.app.state.container
        result = state_container.assessment_service.assess(
            Profile(age=payload.age, weight=payload.weight),
            [
                ConsumptionEntry(item_id=item.item_id, quantity=item.quantity)
                for item in payload.selected_items
            ],
        )
        return _to_response(result)

    return app


def _to_response(result: AssessmentResult) -> CalculateResponse:
    return CalculateResponse(
        total_intake=result.total_intake,
        limit=result.limit,
        is_over_limit=result.is_over_limit,
        severity=result.severity.value,
        bracket=result.bracket,
        problems=list(result.problems),
        recommendations=list(result.recommendations),
    )

"""Health check and reset routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from board.application.usecase.system import (
    HealthResponse,
    HealthUseCase,
    ResetResponse,
    ResetUseCase,
)

router = APIRouter(tags=["health"], route_class=DishkaRoute)


@router.get("/health", response_model=HealthResponse)
async def health_check(health_use_case: FromDishka[HealthUseCase]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Status, server time, API version and entity counts
    """
    return health_use_case.execute()


@router.post("/reset", response_model=ResetResponse)
async def reset(reset_use_case: FromDishka[ResetUseCase]) -> ResetResponse:
    """Restore the initial data set and drop every session token."""
    return reset_use_case.execute()

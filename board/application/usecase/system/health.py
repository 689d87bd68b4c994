"""Health check use case."""

from datetime import datetime

from board.application.usecase.schemas import APIModel
from board.domain.service import AdminService


class CountsItem(APIModel):
    users: int
    posts: int
    comments: int
    sessions: int


class HealthResponse(APIModel):
    """Liveness report with current entity counts."""

    status: str = "ok"
    timestamp: datetime
    version: str
    counts: CountsItem


class HealthUseCase:
    """Use case for the health endpoint."""

    def __init__(self, admin_service: AdminService, version: str) -> None:
        """Initialize health use case.

        Args:
            admin_service: Admin domain service
            version: API version reported to clients
        """
        self.admin_service = admin_service
        self.version = version

    def execute(self) -> HealthResponse:
        counts = self.admin_service.counts()
        return HealthResponse(
            timestamp=datetime.now(),
            version=self.version,
            counts=CountsItem(**counts.model_dump()),
        )

"""Reset use case."""

import logfire

from board.application.usecase.schemas import APIModel
from board.domain.service import AdminService


class ResetResponse(APIModel):
    success: bool = True
    message: str = "Store reset to initial state"


class ResetUseCase:
    """Use case for restoring the initial data set.

    Every session token is dropped, so all clients are logged out.
    """

    def __init__(self, admin_service: AdminService) -> None:
        self.admin_service = admin_service

    def execute(self) -> ResetResponse:
        with logfire.span("reset.execute"):
            self.admin_service.reset()
            return ResetResponse()

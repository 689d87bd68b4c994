"""Logout use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.schemas import SuccessResponse
from board.domain.service import AuthService


class LogoutRequest(BaseModel):
    """Logout request."""

    token: Optional[str] = None


class LogoutUseCase:
    """Use case for ending a bearer session. Always succeeds."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    def execute(self, request: LogoutRequest) -> SuccessResponse:
        self.auth_service.logout(request.token)
        return SuccessResponse()

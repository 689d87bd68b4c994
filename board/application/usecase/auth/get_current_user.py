"""Get current user use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.schemas import APIModel, PublicUser
from board.domain.error import UnauthorizedError
from board.domain.service import AuthService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: Optional[str] = None


class CurrentUserResponse(APIModel):
    """Current user response."""

    user: PublicUser


class GetCurrentUserUseCase:
    """Use case for resolving a bearer token to its account."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize get current user use case.

        Args:
            auth_service: Auth domain service
        """
        self.auth_service = auth_service

    def execute(self, request: GetCurrentUserRequest) -> CurrentUserResponse:
        """Execute get current user flow.

        Args:
            request: Request carrying the bearer token

        Returns:
            The token's account

        Raises:
            UnauthorizedError: If the token is missing or unknown
        """
        user = self.auth_service.resolve(request.token)
        if user is None:
            raise UnauthorizedError("Unauthorized")
        return CurrentUserResponse(user=PublicUser.from_user(user))

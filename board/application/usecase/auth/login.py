"""Login use case."""

from pydantic import BaseModel

from board.application.usecase.auth.register import AuthResponse
from board.application.usecase.schemas import PublicUser
from board.domain.service import AuthService


class LoginRequest(BaseModel):
    """Login request."""

    username: str = ""
    password: str = ""


class LoginUseCase:
    """Use case for logging in with username and password."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Auth domain service
        """
        self.auth_service = auth_service

    def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Args:
            request: Login request

        Returns:
            Account and new session token

        Raises:
            ValidationError: If a field is empty
            InvalidCredentialsError: If no account matches
        """
        session = self.auth_service.login(request.username, request.password)
        return AuthResponse(
            user=PublicUser.from_user(session.user),
            token=session.token.root,
        )

"""Register use case."""

from pydantic import BaseModel

from board.application.usecase.schemas import APIModel, PublicUser
from board.domain.service import AuthService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str = ""
    email: str = ""
    password: str = ""


class AuthResponse(APIModel):
    """Account plus the bearer token for its new session."""

    user: PublicUser
    token: str


class RegisterUseCase:
    """Use case for creating an account."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Auth domain service
        """
        self.auth_service = auth_service

    def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Args:
            request: Register request

        Returns:
            New account and session token

        Raises:
            ValidationError: If a field is invalid or already in use
        """
        session = self.auth_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
        )
        return AuthResponse(
            user=PublicUser.from_user(session.user),
            token=session.token.root,
        )

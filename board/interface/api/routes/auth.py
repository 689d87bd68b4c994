"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status

from board.application.usecase.auth import (
    AuthResponse,
    CurrentUserResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from board.application.usecase.schemas import SuccessResponse
from board.interface.api.deps import get_bearer_token

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and return a bearer token for it.

    Args:
        request: Username, email and password
        register_use_case: Register use case from DI

    Returns:
        New account and its token
    """
    return register_use_case.execute(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Log in with username and password.

    Returns:
        Account and a fresh token (earlier tokens stay valid)
    """
    return login_use_case.execute(request)


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    logout_use_case: FromDishka[LogoutUseCase],
    token: str | None = Depends(get_bearer_token),
) -> SuccessResponse:
    """Drop the bearer token. Succeeds even without one."""
    return logout_use_case.execute(LogoutRequest(token=token))


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_bearer_token),
) -> CurrentUserResponse:
    """Get the account behind the bearer token.

    Raises:
        UnauthorizedError: If the token is missing or unknown (401)
    """
    return get_current_user_use_case.execute(GetCurrentUserRequest(token=token))

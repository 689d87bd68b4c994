"""User use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
)

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "UserProfileResponse",
]

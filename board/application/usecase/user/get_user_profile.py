"""Get user profile use case."""

from pydantic import BaseModel

from board.application.usecase.schemas import APIModel, UserProfile
from board.domain.error import NotFoundError
from board.domain.service import UserService
from board.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str


class UserProfileResponse(APIModel):
    """Public profile response."""

    user: UserProfile


class GetUserProfileUseCase:
    """Use case for reading another user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    def execute(self, request: GetUserProfileRequest) -> UserProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = UserId(request.user_id)
        user = self.user_service.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id, "User not found")
        return UserProfileResponse(user=UserProfile.from_user(user))

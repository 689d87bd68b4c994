"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from board.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from board.application.usecase.post import (
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from board.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserProfileResponse:
    """Get a user's public profile.

    Args:
        user_id: User ID
        get_user_profile_use_case: Get user profile use case from DI

    Returns:
        Profile without the email address
    """
    return get_user_profile_use_case.execute(GetUserProfileRequest(user_id=user_id))


@router.get("/{user_id}/posts", response_model=ListPostsResponse)
async def get_user_posts(
    user_id: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> ListPostsResponse:
    """A user's posts, newest first. Unknown users have none."""
    return list_posts_use_case.execute(ListPostsRequest(author_id=user_id))


@router.get("/{user_id}/comments", response_model=GetCommentsResponse)
async def get_user_comments(
    user_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """A user's comments across all posts, newest first."""
    return get_comments_use_case.execute(GetCommentsRequest(author_id=user_id))

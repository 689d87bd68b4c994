"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status

from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostResponse,
)
from board.application.usecase.schemas import APIModel, SuccessResponse
from board.interface.api.deps import get_bearer_token

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(APIModel):
    """API request for creating a post."""

    title: str = ""
    content: str = ""


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> ListPostsResponse:
    """List every post, newest first."""
    return list_posts_use_case.execute(ListPostsRequest())


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    token: str | None = Depends(get_bearer_token),
) -> PostResponse:
    """Create a new post.

    Requires authentication.

    Args:
        request: Post title and content
        create_post_use_case: Create post use case from DI
        token: Bearer token

    Returns:
        Created post
    """
    return create_post_use_case.execute(
        CreatePostRequest(token=token, title=request.title, content=request.content)
    )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Get a post by ID."""
    return get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.delete("/{post_id}", response_model=SuccessResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    token: str | None = Depends(get_bearer_token),
) -> SuccessResponse:
    """Delete a post and all of its comments.

    Only the author may delete a post.
    """
    return delete_post_use_case.execute(DeletePostRequest(token=token, post_id=post_id))

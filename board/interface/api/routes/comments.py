"""Comment routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status

from board.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
)
from board.application.usecase.schemas import APIModel, SuccessResponse
from board.interface.api.deps import get_bearer_token

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(APIModel):
    """API request for creating a comment."""

    content: str = ""
    parent_id: Optional[str] = None


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Flat list of a post's comments, newest first."""
    return get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))


@router.get("/posts/{post_id}/comments/tree", response_model=GetCommentThreadResponse)
async def get_comment_thread(
    post_id: str,
    get_comment_thread_use_case: FromDishka[GetCommentThreadUseCase],
) -> GetCommentThreadResponse:
    """A post's comments as nested reply trees.

    Replies to deleted comments appear under a node with ``deleted: true``.
    """
    return get_comment_thread_use_case.execute(GetCommentThreadRequest(post_id=post_id))


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    token: str | None = Depends(get_bearer_token),
) -> CommentResponse:
    """Comment on a post, or reply to a comment via ``parentId``.

    Requires authentication.

    Args:
        post_id: Post ID
        request: Comment content and optional parent comment ID
        create_comment_use_case: Create comment use case from DI
        token: Bearer token

    Returns:
        Created comment
    """
    return create_comment_use_case.execute(
        CreateCommentRequest(
            token=token,
            post_id=post_id,
            content=request.content,
            parent_id=request.parent_id,
        )
    )


@router.delete("/comments/{comment_id}", response_model=SuccessResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    token: str | None = Depends(get_bearer_token),
) -> SuccessResponse:
    """Delete a comment. Replies to it are kept."""
    return delete_comment_use_case.execute(
        DeleteCommentRequest(token=token, comment_id=comment_id)
    )

"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from board.application.usecase.comment import CommentResponse
from board.application.usecase.post import PostResponse
from board.application.usecase.schemas import APIModel
from board.application.usecase.vote import (
    VoteCommentRequest,
    VoteCommentUseCase,
    VotePostRequest,
    VotePostUseCase,
)
from board.interface.api.deps import get_bearer_token

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(APIModel):
    """API request for voting. ``voteType`` is "up" or "down"."""

    vote_type: str = ""


@router.post("/posts/{post_id}/vote", response_model=PostResponse)
async def vote_post(
    post_id: str,
    request: VoteAPIRequest,
    vote_post_use_case: FromDishka[VotePostUseCase],
    token: str | None = Depends(get_bearer_token),
) -> PostResponse:
    """Toggle the caller's vote on a post.

    Voting the same way twice removes the vote; voting the other way
    switches it.

    Args:
        post_id: Post ID
        request: Vote direction
        vote_post_use_case: Vote on post use case from DI
        token: Bearer token

    Returns:
        Post with updated counters
    """
    return vote_post_use_case.execute(
        VotePostRequest(token=token, post_id=post_id, vote_type=request.vote_type)
    )


@router.post("/comments/{comment_id}/vote", response_model=CommentResponse)
async def vote_comment(
    comment_id: str,
    request: VoteAPIRequest,
    vote_comment_use_case: FromDishka[VoteCommentUseCase],
    token: str | None = Depends(get_bearer_token),
) -> CommentResponse:
    """Toggle the caller's vote on a comment."""
    return vote_comment_use_case.execute(
        VoteCommentRequest(
            token=token, comment_id=comment_id, vote_type=request.vote_type
        )
    )

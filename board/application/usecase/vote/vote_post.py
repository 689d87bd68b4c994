"""Vote on post use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.post.create_post import PostResponse
from board.application.usecase.schemas import PostItem
from board.domain.service import AuthService, PostService, VoteService
from board.domain.value import PostId


class VotePostRequest(BaseModel):
    """Vote on post request."""

    token: Optional[str] = None
    post_id: str
    vote_type: str = ""


class VotePostUseCase:
    """Use case for toggling a vote on a post."""

    def __init__(
        self,
        auth_service: AuthService,
        vote_service: VoteService,
        post_service: PostService,
    ) -> None:
        """Initialize vote on post use case.

        Args:
            auth_service: Auth service to resolve the bearer token
            vote_service: Vote domain service
            post_service: Post service (for the comment count in the response)
        """
        self.auth_service = auth_service
        self.vote_service = vote_service
        self.post_service = post_service

    def execute(self, request: VotePostRequest) -> PostResponse:
        """Execute vote flow.

        Args:
            request: Vote request

        Returns:
            Post with updated counters

        Raises:
            UnauthorizedError: If the token does not resolve
            NotFoundError: If the post does not exist
            ValidationError: If vote_type is not "up" or "down"
        """
        actor = self.auth_service.resolve(request.token)
        post = self.vote_service.vote_post(
            actor, PostId(request.post_id), request.vote_type
        )
        return PostResponse(
            post=PostItem.from_post(post, self.post_service.count_comments(post.id))
        )

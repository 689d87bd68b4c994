"""Create post use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.schemas import APIModel, PostItem
from board.domain.service import AuthService, PostService


class CreatePostRequest(BaseModel):
    """Create post request."""

    token: Optional[str] = None
    title: str = ""
    content: str = ""


class PostResponse(APIModel):
    """Single post response."""

    post: PostItem


class CreatePostUseCase:
    """Use case for creating a post."""

    def __init__(self, auth_service: AuthService, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            auth_service: Auth service to resolve the bearer token
            post_service: Post domain service
        """
        self.auth_service = auth_service
        self.post_service = post_service

    def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            Created post

        Raises:
            UnauthorizedError: If the token does not resolve
            ValidationError: If title or content is too short
        """
        actor = self.auth_service.resolve(request.token)
        post = self.post_service.create_post(actor, request.title, request.content)
        return PostResponse(post=PostItem.from_post(post, comment_count=0))

"""Create comment use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.schemas import APIModel, CommentItem
from board.domain.service import AuthService, CommentService
from board.domain.value import CommentId, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    token: Optional[str] = None
    post_id: str
    content: str = ""
    parent_id: Optional[str] = None  # Comment being replied to


class CommentResponse(APIModel):
    """Single comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a comment."""

    def __init__(
        self, auth_service: AuthService, comment_service: CommentService
    ) -> None:
        """Initialize create comment use case.

        Args:
            auth_service: Auth service to resolve the bearer token
            comment_service: Comment domain service
        """
        self.auth_service = auth_service
        self.comment_service = comment_service

    def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            UnauthorizedError: If the token does not resolve
            ValidationError: If the content is too short
            NotFoundError: If the post does not exist
        """
        actor = self.auth_service.resolve(request.token)
        comment = self.comment_service.create_comment(
            actor,
            post_id=PostId(request.post_id),
            content=request.content,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )
        return CommentResponse(comment=CommentItem.from_comment(comment))

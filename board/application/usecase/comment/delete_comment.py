"""Delete comment use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.schemas import SuccessResponse
from board.domain.service import AuthService, CommentService
from board.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    token: Optional[str] = None
    comment_id: str


class DeleteCommentUseCase:
    """Use case for deleting a single comment (replies are kept)."""

    def __init__(
        self, auth_service: AuthService, comment_service: CommentService
    ) -> None:
        self.auth_service = auth_service
        self.comment_service = comment_service

    def execute(self, request: DeleteCommentRequest) -> SuccessResponse:
        """Execute delete comment flow.

        Raises:
            UnauthorizedError: If the token does not resolve
            NotFoundError: If the comment does not exist
            ForbiddenError: If the caller is not the author
        """
        actor = self.auth_service.resolve(request.token)
        self.comment_service.delete_comment(actor, CommentId(request.comment_id))
        return SuccessResponse()

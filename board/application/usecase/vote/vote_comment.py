"""Vote on comment use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.comment.create_comment import CommentResponse
from board.application.usecase.schemas import CommentItem
from board.domain.service import AuthService, VoteService
from board.domain.value import CommentId


class VoteCommentRequest(BaseModel):
    """Vote on comment request."""

    token: Optional[str] = None
    comment_id: str
    vote_type: str = ""


class VoteCommentUseCase:
    """Use case for toggling a vote on a comment."""

    def __init__(self, auth_service: AuthService, vote_service: VoteService) -> None:
        self.auth_service = auth_service
        self.vote_service = vote_service

    def execute(self, request: VoteCommentRequest) -> CommentResponse:
        """Execute vote flow.

        Raises:
            UnauthorizedError: If the token does not resolve
            NotFoundError: If the comment does not exist
            ValidationError: If vote_type is not "up" or "down"
        """
        actor = self.auth_service.resolve(request.token)
        comment = self.vote_service.vote_comment(
            actor, CommentId(request.comment_id), request.vote_type
        )
        return CommentResponse(comment=CommentItem.from_comment(comment))

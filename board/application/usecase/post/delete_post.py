"""Delete post use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.schemas import SuccessResponse
from board.domain.service import AuthService, PostService
from board.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    token: Optional[str] = None
    post_id: str


class DeletePostUseCase:
    """Use case for deleting a post and its comments."""

    def __init__(self, auth_service: AuthService, post_service: PostService) -> None:
        self.auth_service = auth_service
        self.post_service = post_service

    def execute(self, request: DeletePostRequest) -> SuccessResponse:
        """Execute delete post flow.

        Raises:
            UnauthorizedError: If the token does not resolve
            NotFoundError: If the post does not exist
            ForbiddenError: If the caller is not the author
        """
        actor = self.auth_service.resolve(request.token)
        self.post_service.delete_post(actor, PostId(request.post_id))
        return SuccessResponse()

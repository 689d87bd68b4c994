"""Get post use case."""

from pydantic import BaseModel

from board.application.usecase.post.create_post import PostResponse
from board.application.usecase.schemas import PostItem
from board.domain.error import NotFoundError
from board.domain.service import PostService
from board.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase:
    """Use case for fetching one post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    def execute(self, request: GetPostRequest) -> PostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(request.post_id)
        post = self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", post_id, "Post not found")
        return PostResponse(
            post=PostItem.from_post(post, self.post_service.count_comments(post_id))
        )

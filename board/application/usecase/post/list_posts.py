"""List posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from board.application.usecase.schemas import APIModel, PostItem
from board.domain.service import PostService
from board.domain.value import UserId


class ListPostsRequest(BaseModel):
    """List posts request."""

    author_id: Optional[str] = None  # Restrict to one author's posts


class ListPostsResponse(APIModel):
    """List posts response."""

    posts: list[PostItem]


class ListPostsUseCase:
    """Use case for listing posts, newest first."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        An unknown author yields an empty list, not an error.

        Args:
            request: List posts request

        Returns:
            Posts with their comment counts
        """
        with logfire.span("list_posts.execute", author_id=request.author_id):
            if request.author_id is not None:
                posts = self.post_service.list_posts_by_author(UserId(request.author_id))
            else:
                posts = self.post_service.list_posts()

            items = [
                PostItem.from_post(post, self.post_service.count_comments(post.id))
                for post in posts
            ]
            logfire.info("Posts listed", count=len(items))
            return ListPostsResponse(posts=items)

"""Get comments use cases (flat list and thread)."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.schemas import APIModel, CommentItem, CommentNodeItem
from board.domain.service import CommentService
from board.domain.value import PostId, UserId


class GetCommentsRequest(BaseModel):
    """Get comments request. Exactly one of the filters is expected."""

    post_id: Optional[str] = None
    author_id: Optional[str] = None


class GetCommentsResponse(APIModel):
    """Flat comment list, newest first."""

    comments: list[CommentItem]


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    post_id: str


class GetCommentThreadResponse(APIModel):
    """Top-level comment nodes with nested replies."""

    comments: list[CommentNodeItem]


class GetCommentsUseCase:
    """Use case for listing a post's or a user's comments."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        A post or author with no comments, including an unknown one, yields
        an empty list.
        """
        if request.author_id is not None:
            comments = self.comment_service.get_comments_by_author(
                UserId(request.author_id)
            )
        elif request.post_id is not None:
            comments = self.comment_service.get_comments_for_post(
                PostId(request.post_id)
            )
        else:
            comments = []

        return GetCommentsResponse(
            comments=[CommentItem.from_comment(c) for c in comments]
        )


class GetCommentThreadUseCase:
    """Use case for reading a post's comments as reply trees."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    def execute(self, request: GetCommentThreadRequest) -> GetCommentThreadResponse:
        thread = self.comment_service.build_thread(PostId(request.post_id))
        return GetCommentThreadResponse(
            comments=[CommentNodeItem.from_node(node) for node in thread]
        )

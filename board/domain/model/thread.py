"""Comment thread read model."""

from typing import Optional

from pydantic import Field

from board.domain.model.comment import Comment
from board.domain.model.common import DomainModel
from board.domain.value import CommentId

DELETED_AUTHOR = "[deleted]"


class CommentNode(DomainModel):
    """One node of a comment tree.

    A node without a comment stands in for a parent that no longer exists,
    so its replies still have somewhere to hang.
    """

    id: CommentId
    comment: Optional[Comment] = None
    author_username: str = DELETED_AUTHOR
    replies: list["CommentNode"] = Field(default_factory=list)

    @property
    def is_placeholder(self) -> bool:
        return self.comment is None

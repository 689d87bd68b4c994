"""Comment entity.

Comments form a tree per post through ``parent_id``. The tree is not stored;
it is rebuilt from the flat list when a thread is read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import Votable
from board.domain.value import CommentId, PostId, UserId


class Comment(Votable):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    - parent_id: Parent comment (None for top-level). Not checked on creation,
      and replies outlive a deleted parent.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)

"""Post aggregate root."""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import Votable
from board.domain.value import PostId, UserId


class Post(Votable):
    """Post aggregate root.

    Deleting a post removes every comment attached to it.
    """

    id: PostId
    title: str
    content: str
    author_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

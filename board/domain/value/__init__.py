"""Domain value objects for the board."""

from board.domain.value.identifiers import (
    CommentId,
    PostId,
    UserId,
    new_comment_id,
    new_post_id,
    new_user_id,
)
from board.domain.value.types import (
    AvatarColor,
    SessionToken,
    VotableType,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "new_user_id",
    "new_post_id",
    "new_comment_id",
    # Types
    "AvatarColor",
    "SessionToken",
    "VotableType",
    "VoteType",
]

"""Domain model entities for the board."""

from board.domain.model.comment import Comment
from board.domain.model.common import DomainModel, Votable
from board.domain.model.post import Post
from board.domain.model.session import Session
from board.domain.model.thread import DELETED_AUTHOR, CommentNode
from board.domain.model.user import User

__all__ = [
    "DomainModel",
    "Votable",
    "User",
    "Post",
    "Comment",
    "Session",
    "CommentNode",
    "DELETED_AUTHOR",
]

"""Response items shared by the HTTP use cases.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.domain.model import Comment, CommentNode, Post, User
from board.domain.value import VoteType


class APIModel(BaseModel):
    """Base for wire models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PublicUser(APIModel):
    """The logged-in user's own account, as returned by auth endpoints."""

    id: str
    username: str
    email: str
    avatar: str

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            avatar=user.avatar.root,
        )


class UserProfile(APIModel):
    """Another user's public profile (no email)."""

    id: str
    username: str
    avatar: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=user.id,
            username=user.username,
            avatar=user.avatar.root,
            created_at=user.created_at,
        )


class PostItem(APIModel):
    """Post in responses."""

    id: str
    title: str
    content: str
    author_id: str
    created_at: datetime
    upvotes: int
    downvotes: int
    score: int
    voted_by: dict[str, VoteType]
    comment_count: int

    @classmethod
    def from_post(cls, post: Post, comment_count: int) -> "PostItem":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author_id=post.author_id,
            created_at=post.created_at,
            upvotes=post.upvotes,
            downvotes=post.downvotes,
            score=post.score,
            voted_by=dict(post.voted_by),
            comment_count=comment_count,
        )


class CommentItem(APIModel):
    """Comment in responses."""

    id: str
    content: str
    author_id: str
    post_id: str
    parent_id: Optional[str]
    created_at: datetime
    upvotes: int
    downvotes: int
    score: int
    voted_by: dict[str, VoteType]

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=comment.id,
            content=comment.content,
            author_id=comment.author_id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
            upvotes=comment.upvotes,
            downvotes=comment.downvotes,
            score=comment.score,
            voted_by=dict(comment.voted_by),
        )


class CommentNodeItem(APIModel):
    """Comment tree node in responses. ``comment`` is null for a deleted parent."""

    id: str
    comment: Optional[CommentItem]
    author: str
    deleted: bool
    replies: list["CommentNodeItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentNodeItem":
        return cls(
            id=node.id,
            comment=CommentItem.from_comment(node.comment) if node.comment else None,
            author=node.author_username,
            deleted=node.is_placeholder,
            replies=[cls.from_node(reply) for reply in node.replies],
        )


class SuccessResponse(APIModel):
    """Acknowledgement for operations with nothing to return."""

    success: bool = True

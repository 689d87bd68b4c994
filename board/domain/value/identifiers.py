"""Typed identifiers for board entities.

Identifiers are prefixed strings (``user-1``, ``post-3f2a...``) so that seeded
records and generated ones share one format.
"""

from typing import NewType
from uuid import uuid4

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)


def new_user_id() -> UserId:
    return UserId(f"user-{uuid4().hex[:12]}")


def new_post_id() -> PostId:
    return PostId(f"post-{uuid4().hex[:12]}")


def new_comment_id() -> CommentId:
    return CommentId(f"comment-{uuid4().hex[:12]}")

"""Vote use cases."""

from .vote_comment import VoteCommentRequest, VoteCommentUseCase
from .vote_post import VotePostRequest, VotePostUseCase

__all__ = [
    "VoteCommentRequest",
    "VoteCommentUseCase",
    "VotePostRequest",
    "VotePostUseCase",
]

"""In-memory repository implementations.

The board keeps no data across restarts; these are the only implementations.
"""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .session import InMemorySessionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemorySessionRepository",
    "InMemoryUserRepository",
]

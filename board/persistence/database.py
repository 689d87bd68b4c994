"""In-memory database: one set of repositories shared by the whole process."""

from dataclasses import dataclass, field

from board.persistence.repository import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
)


@dataclass
class InMemoryDatabase:
    """Holds the repositories that make up one board's state."""

    users: InMemoryUserRepository = field(default_factory=InMemoryUserRepository)
    posts: InMemoryPostRepository = field(default_factory=InMemoryPostRepository)
    comments: InMemoryCommentRepository = field(
        default_factory=InMemoryCommentRepository
    )
    sessions: InMemorySessionRepository = field(
        default_factory=InMemorySessionRepository
    )

"""Board administration: health counts and full reset."""

from abc import ABC, abstractmethod

import logfire

from board.domain.event import ChangeNotifier
from board.domain.model.common import DomainModel
from board.domain.repository import (
    CommentRepository,
    PostRepository,
    SessionRepository,
    UserRepository,
)

from .base import Service


class DataSeeder(ABC):
    """Fills freshly cleared repositories with initial data."""

    @abstractmethod
    def seed(self) -> None:
        pass


class BoardCounts(DomainModel):
    """Entity counts reported by the health check."""

    users: int
    posts: int
    comments: int
    sessions: int


class AdminService(Service):
    """Domain service for operational endpoints."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        session_repository: SessionRepository,
        seeder: DataSeeder,
        notifier: ChangeNotifier,
    ) -> None:
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.session_repository = session_repository
        self.seeder = seeder
        self.notifier = notifier

    def counts(self) -> BoardCounts:
        return BoardCounts(
            users=self.user_repository.count(),
            posts=self.post_repository.count(),
            comments=self.comment_repository.count(),
            sessions=self.session_repository.count(),
        )

    def reset(self) -> BoardCounts:
        """Drop all state, including every session token, and reseed.

        Returns:
            Counts after reseeding
        """
        with logfire.span("admin_service.reset"):
            self.session_repository.clear()
            self.comment_repository.clear()
            self.post_repository.clear()
            self.user_repository.clear()
            self.seeder.seed()

            counts = self.counts()
            logfire.info("Board reset", **counts.model_dump())
            self.notifier.notify()
            return counts

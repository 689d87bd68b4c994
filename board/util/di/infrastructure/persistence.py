"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from board.config import Settings
from board.domain.repository import (
    CommentRepository,
    PostRepository,
    SessionRepository,
    UserRepository,
)
from board.domain.service import DataSeeder
from board.persistence.database import InMemoryDatabase
from board.persistence.seed import DemoDataSeeder, EmptySeeder
from board.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    Implementations provide ``InMemoryDatabase`` and ``DataSeeder``; the
    repositories are taken from the database.
    """

    __mock_component__ = "persistence"

    scope = Scope.APP

    @provide
    def get_user_repository(self, database: InMemoryDatabase) -> UserRepository:
        """Provide User repository."""
        return database.users

    @provide
    def get_post_repository(self, database: InMemoryDatabase) -> PostRepository:
        """Provide Post repository."""
        return database.posts

    @provide
    def get_comment_repository(self, database: InMemoryDatabase) -> CommentRepository:
        """Provide Comment repository."""
        return database.comments

    @provide
    def get_session_repository(self, database: InMemoryDatabase) -> SessionRepository:
        """Provide Session repository."""
        return database.sessions


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider: in-memory, seeded with demo data."""

    __is_mock__ = False

    @provide
    def get_seeder(self, settings: Settings, database: InMemoryDatabase) -> DataSeeder:
        """Provide the seeder used at startup and on reset."""
        if settings.seed.enabled:
            return DemoDataSeeder(database)
        return EmptySeeder()

    @provide
    def get_database(self, settings: Settings) -> InMemoryDatabase:
        """Provide the process-wide database, seeded per settings."""
        database = InMemoryDatabase()
        if settings.seed.enabled:
            DemoDataSeeder(database).seed()
        logfire.info("In-memory database created", seeded=settings.seed.enabled)
        return database

"""Mock persistence providers for testing."""

from dishka import provide

from board.domain.service import DataSeeder
from board.persistence.database import InMemoryDatabase
from board.persistence.seed import EmptySeeder
from board.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider: an empty board that resets to empty.

    A new container gets a new database, so tests are isolated.
    """

    __is_mock__ = True

    @provide
    def get_database(self) -> InMemoryDatabase:
        """Provide an empty in-memory database."""
        return InMemoryDatabase()

    @provide
    def get_seeder(self) -> DataSeeder:
        """Provide a seeder that adds nothing."""
        return EmptySeeder()

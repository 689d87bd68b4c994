"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .container import build_async_test_container, build_test_container

__all__ = [
    "MockPersistenceProvider",
    "build_async_test_container",
    "build_test_container",
]

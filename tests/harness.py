"""Test harness for unit and E2E tests.

Every fixture builds a fresh container, so each test starts from its own
empty (or freshly seeded) board.
"""

import pytest

from board.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields a dishka Container

    Usage:
        # Unit tests - empty in-memory board
        unit_env = create_env_fixture()

        # Seeded board, as in production
        seeded_env = create_env_fixture(unmock={"persistence"})

        def test_create_post(unit_env):
            post_service = unit_env.get(PostService)
            ...
    """

    @pytest.fixture
    def _test_environment():
        container = build_test_container(unmock=unmock or set())

        with container() as request_container:
            yield request_container

        container.close()

    return _test_environment

"""Test configuration and fixtures."""

import logfire
import pytest

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def demo_credentials() -> dict[str, str]:
    """Login of the seeded demo account."""
    return {"username": "demo_user", "password": "password123"}

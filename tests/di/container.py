"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, Container, make_async_container, make_container
from dishka.integrations.fastapi import FastapiProvider

from board.util.di import PROVIDERS, Component, ProviderBase, get_provider


def build_test_container(unmock: set[Component] | None = None) -> Container:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.

    Returns:
        Configured synchronous test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - empty board
        container = build_test_container()

        # Seeded board, as in production
        container = build_test_container(unmock={"persistence"})
    """
    return make_container(*_provider_instances(unmock or set()))


def build_async_test_container(
    unmock: set[Component] | None = None,
) -> AsyncContainer:
    """Build test container for ``create_app``.

    Same selection rules as ``build_test_container``, plus FastAPI integration.
    """
    return make_async_container(
        *_provider_instances(unmock or set()), FastapiProvider()
    )


def _provider_instances(unmock: set[Component]) -> list[ProviderBase]:
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        is_mockable = bool(base.__subclasses__())

        if not is_mockable:
            # Concrete provider - always use as-is
            provider_class = get_provider(base, use_mock=False)
        else:
            component_name = getattr(base, "__mock_component__", None)
            use_mock = component_name not in unmock if component_name else False
            provider_class = get_provider(base, use_mock=use_mock)

        provider_instances.append(provider_class())

    return provider_instances


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components
    """
    all_components = {
        getattr(p, "__mock_component__")
        for p in PROVIDERS
        if p.__subclasses__() and getattr(p, "__mock_component__", None)
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

"""Shared pytest fixtures for routeguard tests."""

import pytest

from routeguard.domain.models import GuardConfig, NavigationState
from routeguard.infrastructure.cache.memory import InMemoryGuardCache
from routeguard.infrastructure.router.memory import InMemoryRouter


@pytest.fixture
def router() -> InMemoryRouter:
    """Router whose user is currently on the dashboard."""
    return InMemoryRouter(initial_location="/dashboard")


@pytest.fixture
def admin_state() -> NavigationState:
    """Navigation attempt to the admin area."""
    return NavigationState(location="/admin?tab=users", name="admin")


@pytest.fixture
def config() -> GuardConfig:
    """Default engine configuration (no global fallback)."""
    return GuardConfig()


@pytest.fixture
def fallback_config() -> GuardConfig:
    """Configuration with an unauthorized fallback path."""
    return GuardConfig(fallback_path="/unauthorized")


@pytest.fixture
def guard_cache() -> InMemoryGuardCache:
    """Create an isolated in-memory guard cache."""
    return InMemoryGuardCache()

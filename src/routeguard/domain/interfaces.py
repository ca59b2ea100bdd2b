"""
Domain interfaces (Ports) for route guard evaluation.

These abstract base classes define the contracts that guards, host routers
and caches must satisfy. They have no external dependencies.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from routeguard.domain.models import GuardConfig, GuardOutcome, NavigationState
    from routeguard.domain.resolver import NavigationResolver

logger = logging.getLogger("routeguard.guard")


class RouterInterface(ABC):
    """
    Port for the host router.

    The engine only reads from the router: it asks where the user currently
    is and whether the router is still mounted. Performing the actual
    navigation is the host router's job once it receives the outcome.
    """

    @abstractmethod
    def get_current_location(self) -> str:
        """
        Return the location the user is currently at.

        Returns:
            The current path (the location before the attempted navigation)
        """
        pass

    @property
    def is_mounted(self) -> bool:
        """Whether the router is still attached to a live view."""
        return True


class GuardInterface(ABC):
    """
    Port for navigation guards.

    A guard receives a resolver together with the navigation context and
    target state, and must call exactly one of ``resolver.next()``,
    ``resolver.redirect(path)`` or ``resolver.block()``, either directly or
    after any number of awaits. A guard that never resolves stalls the
    navigation.

    Guards are built once and reused across navigations; they must not keep
    per-navigation mutable state.
    """

    @abstractmethod
    def on_navigation(
        self,
        resolver: "NavigationResolver",
        context: RouterInterface,
        state: "NavigationState",
    ) -> Awaitable[None] | None:
        """
        Decide the navigation by calling one resolver method.

        May be a plain method or a coroutine function.

        Args:
            resolver: One-shot outcome carrier for this evaluation
            context: The host router the navigation happens in
            state: The attempted destination
        """
        pass

    async def execute_with_resolver(
        self,
        context: RouterInterface,
        state: "NavigationState",
        config: "GuardConfig | None" = None,
    ) -> "GuardOutcome":
        """
        Run this guard to resolution.

        Creates the single resolver for this evaluation, runs
        ``on_navigation`` and waits until the resolver has been completed.

        Args:
            context: The host router
            state: The attempted destination
            config: Engine configuration handed to the resolver

        Returns:
            The outcome reported by the guard
        """
        from routeguard.domain.resolver import NavigationResolver

        resolver = NavigationResolver(context, state, config)
        pending = self.on_navigation(resolver, context, state)
        if inspect.isawaitable(pending):
            await pending
        if not resolver.is_resolved:
            logger.debug(
                "%s returned without resolving %s; waiting for resolution",
                type(self).__name__,
                state.location,
            )
        return await resolver.wait()


class GuardCacheInterface(ABC):
    """
    Port for guard-owned caches.

    Injected into guards that memoize expensive checks, so cache state is
    explicit and can be isolated per test.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """
        Retrieve a cached value.

        Args:
            key: Cache key

        Returns:
            The value, or None when missing or expired
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """
        Store a value.

        Args:
            key: Cache key
            value: Value to store
            ttl: Seconds until expiry; None keeps the value until invalidated
        """
        pass

    @abstractmethod
    def invalidate(self, key: str) -> None:
        """Drop a single key."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every key."""
        pass

"""
Outcome caching for expensive guards.

The cache is an injected collaborator owned by the guard instance, so each
test (or each application) decides its own cache lifetime.
"""

import logging
from collections.abc import Callable

from routeguard.domain.interfaces import (
    GuardCacheInterface,
    GuardInterface,
    RouterInterface,
)
from routeguard.domain.models import GuardOutcome, NavigationState
from routeguard.domain.resolver import NavigationResolver
from routeguard.guards.base import RouteGuard

logger = logging.getLogger("routeguard.cached")

CacheKey = Callable[[RouterInterface, NavigationState], str]


class CachedGuard(RouteGuard):
    """
    Reuse an inner guard's outcome for navigations with the same key.

    Only ``Allow`` outcomes are cached by default: a blocked navigation
    redirects relative to the current location, which differs between
    navigations. Pass ``cache_redirects=True`` when the inner guard only
    ever redirects to fixed paths.
    """

    def __init__(
        self,
        guard: GuardInterface,
        cache: GuardCacheInterface,
        key: CacheKey,
        ttl: float | None = None,
        cache_redirects: bool = False,
    ):
        """
        Args:
            guard: Guard whose outcome is cached
            cache: Cache owned by this guard
            key: Builds the cache key from (context, state)
            ttl: Seconds an entry stays valid; None for no expiry
            cache_redirects: Also cache ``Redirect`` outcomes
        """
        self.guard = guard
        self.cache = cache
        self.key = key
        self.ttl = ttl
        self.cache_redirects = cache_redirects

    async def on_navigation(
        self,
        resolver: NavigationResolver,
        context: RouterInterface,
        state: NavigationState,
    ) -> None:
        key = self.key(context, state)
        cached = self.cache.get(key)
        if isinstance(cached, GuardOutcome):
            logger.debug("Cache hit for %s: %s", key, cached)
            resolver.resolve(cached)
            return

        outcome = await self.guard.execute_with_resolver(
            context, state, resolver.config
        )
        if outcome.continue_navigation or self.cache_redirects:
            self.cache.set(key, outcome, self.ttl)
        resolver.resolve(outcome)

    def __repr__(self) -> str:
        return f"CachedGuard({self.guard!r})"

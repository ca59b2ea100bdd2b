"""
In-memory router for tests and examples.

Tracks a current location and applies guard outcomes the way a host router
would: Allow renders the target, Redirect re-runs navigation at the new path.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping

from routeguard.domain.interfaces import RouterInterface
from routeguard.domain.models import NavigationState

logger = logging.getLogger("routeguard.router")

RedirectHook = Callable[[RouterInterface, NavigationState], Awaitable[str | None]]


class InMemoryRouter(RouterInterface):
    """Minimal host router holding the current location."""

    def __init__(
        self,
        initial_location: str = "/",
        routes: Mapping[str, object] | None = None,
        max_redirects: int = 10,
    ):
        """
        Args:
            initial_location: Location before the first navigation
            routes: Route objects by path, exposed as ``NavigationState.route``
            max_redirects: Redirect hops allowed per ``go`` before giving up
        """
        self._location = initial_location
        self._routes = dict(routes or {})
        self._mounted = True
        self._max_redirects = max_redirects
        self.history: list[str] = [initial_location]

    def get_current_location(self) -> str:
        return self._location

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def unmount(self) -> None:
        """Detach the router, as when its hosting view is torn down."""
        self._mounted = False

    def match(self, location: str) -> NavigationState:
        """Build the navigation state for ``location``, with its matched route."""
        state = NavigationState(location=location)
        return NavigationState(location=location, route=self._routes.get(state.path))

    async def go(
        self,
        location: str,
        redirect: RedirectHook,
    ) -> str:
        """
        Navigate to ``location``, following redirects from ``redirect``.

        Args:
            location: Target location
            redirect: The redirect hook, e.g. from RouteGuardUtils

        Returns:
            The location finally rendered

        Raises:
            RuntimeError: If redirects exceed ``max_redirects``
        """
        target = location
        for _ in range(self._max_redirects + 1):
            state = self.match(target)
            next_location = await redirect(self, state)
            if next_location is None or next_location == target:
                self._location = target
                self.history.append(target)
                return target
            logger.debug("Redirect %s -> %s", target, next_location)
            target = next_location
        raise RuntimeError(f"Too many redirects navigating to {location}")

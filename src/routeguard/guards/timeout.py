"""
Bounded-latency wrapper for guards.

The engine imposes no timeout of its own; wrap a guard in TimeoutGuard
when a navigation must not wait indefinitely on it.
"""

import asyncio
import logging

from routeguard.domain.exceptions import GuardConfigurationError
from routeguard.domain.interfaces import GuardInterface, RouterInterface
from routeguard.domain.models import NavigationState
from routeguard.domain.resolver import NavigationResolver
from routeguard.guards.base import RouteGuard

logger = logging.getLogger("routeguard.timeout")


class TimeoutGuard(RouteGuard):
    """
    Resolve on behalf of a guard that takes too long.

    If the inner guard has not resolved within ``timeout`` seconds its
    evaluation is cancelled and the navigation is redirected to
    ``on_timeout``, or blocked when no path is given.
    Errors raised by the inner guard, including its own ``TimeoutError``,
    propagate unchanged.
    """

    def __init__(
        self,
        guard: GuardInterface,
        timeout: float,
        on_timeout: str | None = None,
    ):
        """
        Args:
            guard: Guard to bound
            timeout: Seconds to wait for the inner guard
            on_timeout: Redirect target on timeout; None blocks
        """
        if timeout <= 0:
            raise GuardConfigurationError("timeout must be positive")
        if on_timeout == "":
            raise GuardConfigurationError("on_timeout cannot be empty")
        self.guard = guard
        self.timeout = timeout
        self.on_timeout = on_timeout

    async def on_navigation(
        self,
        resolver: NavigationResolver,
        context: RouterInterface,
        state: NavigationState,
    ) -> None:
        task = asyncio.create_task(
            self.guard.execute_with_resolver(context, state, resolver.config)
        )
        try:
            done, _ = await asyncio.wait({task}, timeout=self.timeout)
        except asyncio.CancelledError:
            task.cancel()
            raise

        if task not in done:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
            logger.warning(
                "%r did not resolve %s within %.3fs",
                self.guard,
                state.location,
                self.timeout,
            )
            if self.on_timeout:
                resolver.redirect(self.on_timeout)
            else:
                resolver.block()
            return

        resolver.resolve(task.result())

    def __repr__(self) -> str:
        return f"TimeoutGuard({self.guard!r}, {self.timeout})"


def with_timeout(
    guard: GuardInterface, timeout: float, on_timeout: str | None = None
) -> TimeoutGuard:
    """Bound ``guard`` to ``timeout`` seconds."""
    return TimeoutGuard(guard, timeout, on_timeout)

"""
RouteGuardUtils: adapters between guard expressions and host-router hooks.

This is the only seam between the engine and the host router's redirect
callback mechanism.
"""

import logging
from collections.abc import Awaitable, Callable

from routeguard.application.routes import GuardedRoute, UnguardedRoute
from routeguard.domain.interfaces import GuardInterface, RouterInterface
from routeguard.domain.models import GuardConfig, NavigationState

logger = logging.getLogger("routeguard.routing")

RedirectCallback = Callable[[RouterInterface, NavigationState], Awaitable[str | None]]


class RouteGuardUtils:
    """
    Utilities for attaching guards to host-router redirect hooks.

    Example usage:
        route = Route(
            path="/admin",
            redirect=RouteGuardUtils.create_guard_redirect(
                all_of([AuthGuard(), RoleGuard(["admin"])]),
            ),
        )
    """

    @staticmethod
    async def execute_guard(
        guard: GuardInterface,
        context: RouterInterface,
        state: NavigationState,
        config: GuardConfig | None = None,
    ) -> str | None:
        """
        Run a guard to resolution and map the outcome for the host router.

        Guard errors propagate to the caller unchanged.

        Returns:
            None for Allow, the redirect path for Redirect
        """
        outcome = await guard.execute_with_resolver(context, state, config)
        logger.debug("%s -> %s", state.location, outcome)
        return outcome.redirect_path

    @classmethod
    def create_guard_redirect(
        cls,
        guard: GuardInterface,
        config: GuardConfig | None = None,
    ) -> RedirectCallback:
        """
        Turn a guard expression into a redirect callback.

        Args:
            guard: A single guard or a composite expression
            config: Engine configuration for every evaluation

        Returns:
            ``async (context, state) -> path | None``
        """

        async def redirect(
            context: RouterInterface, state: NavigationState
        ) -> str | None:
            return await cls.execute_guard(guard, context, state, config)

        return redirect

    @classmethod
    def create_router_redirect(
        cls,
        router_guard: GuardInterface | None = None,
        config: GuardConfig | None = None,
    ) -> RedirectCallback:
        """
        Build the router-level redirect callback.

        The matched route (``state.route``) decides which guard runs:
        a GuardedRoute uses its own guards, an UnguardedRoute bypasses all
        guards, and any other route falls back to ``router_guard``.

        Args:
            router_guard: Guard applied to routes without their own guards
            config: Engine configuration for every evaluation
        """

        async def redirect(
            context: RouterInterface, state: NavigationState
        ) -> str | None:
            route = state.route
            if isinstance(route, GuardedRoute):
                return await route.execute_guards(context, state, config)
            if isinstance(route, UnguardedRoute):
                return None
            if router_guard is None:
                return None
            return await cls.execute_guard(router_guard, context, state, config)

        return redirect

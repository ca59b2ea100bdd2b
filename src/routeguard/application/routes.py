"""
Route-attachment protocol.

Routes declare a guard expression; the host router calls ``redirect`` and
receives either None (render the destination) or a path to navigate to.
"""

from routeguard.domain.interfaces import GuardInterface, RouterInterface
from routeguard.domain.models import GuardConfig, NavigationState
from routeguard.guards.base import allow


class GuardedRoute:
    """
    Base for routes protected by a guard expression.

    Override ``guards`` to define route protection. Set ``guard_config``
    (class or instance attribute) to control ``block()`` fallbacks.

    Example:
        class AdminRoute(GuardedRoute):
            path = "/admin"

            @property
            def guards(self):
                return all_of([AuthGuard(), RoleGuard(["admin"])])
    """

    path: str = ""
    guard_config: GuardConfig | None = None

    @property
    def guards(self) -> GuardInterface:
        """The guard expression for this route. Defaults to allowing all access."""
        return allow()

    async def execute_guards(
        self,
        context: RouterInterface,
        state: NavigationState,
        config: GuardConfig | None = None,
    ) -> str | None:
        """
        Run the route's guards to resolution.

        Returns:
            A redirect path if access is denied, None if access is granted
        """
        outcome = await self.guards.execute_with_resolver(
            context, state, config or self.guard_config
        )
        return outcome.redirect_path

    async def redirect(
        self, context: RouterInterface, state: NavigationState
    ) -> str | None:
        """Redirect hook called by the host router when the route is accessed."""
        return await self.execute_guards(context, state)


class GuardedShellRoute(GuardedRoute):
    """
    Base for shell routes (routes wrapping nested child routes).

    The guard runs for every navigation into the shell.
    """


class UnguardedRoute:
    """
    Base for routes that bypass router-level guards.

    Use it for routes such as a login page that must stay reachable when a
    router-wide guard is configured.
    """

    path: str = ""

    async def redirect(
        self, context: RouterInterface, state: NavigationState
    ) -> str | None:
        return None

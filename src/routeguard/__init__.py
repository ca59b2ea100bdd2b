"""
RouteGuard: composable asynchronous navigation guards.

Guards decide whether a navigation proceeds, is redirected or is blocked.
They compose with ALL / ANY OF / ONE OF operators in sequential-forward,
sequential-reverse or concurrent order, and every evaluation resolves
exactly once.

Example:
    from routeguard import GuardConfig, NavigationState, RouteGuardUtils, all_of
    from routeguard.guards import RouteGuard

    class AuthGuard(RouteGuard):
        async def on_navigation(self, resolver, context, state):
            if await session.is_authenticated():
                resolver.next()
            else:
                resolver.redirect("/login")

    redirect = RouteGuardUtils.create_guard_redirect(
        all_of([AuthGuard(), RoleGuard(["admin"])]),
        config=GuardConfig(fallback_path="/unauthorized"),
    )
    path = await redirect(router, NavigationState(location="/admin"))
"""

# Application layer (route attachment)
from routeguard.application import (
    GuardedRoute,
    GuardedShellRoute,
    RouteGuardUtils,
    UnguardedRoute,
)

# Domain exceptions
from routeguard.domain.exceptions import (
    GuardConfigurationError,
    RouteGuardsError,
    RouterNotMountedError,
)

# Domain interfaces (for type hints and custom implementations)
from routeguard.domain.interfaces import (
    GuardCacheInterface,
    GuardInterface,
    RouterInterface,
)

# Domain models
from routeguard.domain.models import (
    Allow,
    CompositeKind,
    ExecutionOrder,
    GuardConfig,
    GuardOutcome,
    NavigationState,
    Redirect,
)
from routeguard.domain.resolver import NavigationResolver

# Guards (commonly composed)
from routeguard.guards import (
    CachedGuard,
    CompositeGuard,
    ConditionalGuard,
    RouteGuard,
    TimeoutGuard,
    all_of,
    allow,
    any_of,
    from_callback,
    one_of,
    redirect_if,
    redirect_to,
    with_timeout,
)

# Infrastructure (explicit import encouraged for dependency injection)
from routeguard.infrastructure import InMemoryGuardCache, InMemoryRouter

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "Allow",
    "Redirect",
    "GuardOutcome",
    "CompositeKind",
    "ExecutionOrder",
    "GuardConfig",
    "NavigationState",
    "NavigationResolver",
    # Domain interfaces
    "GuardInterface",
    "RouterInterface",
    "GuardCacheInterface",
    # Domain exceptions
    "RouteGuardsError",
    "GuardConfigurationError",
    "RouterNotMountedError",
    # Application layer
    "GuardedRoute",
    "GuardedShellRoute",
    "UnguardedRoute",
    "RouteGuardUtils",
    # Guards
    "RouteGuard",
    "CompositeGuard",
    "ConditionalGuard",
    "TimeoutGuard",
    "CachedGuard",
    "all_of",
    "any_of",
    "one_of",
    "allow",
    "redirect_to",
    "from_callback",
    "redirect_if",
    "with_timeout",
    # Infrastructure
    "InMemoryGuardCache",
    "InMemoryRouter",
]

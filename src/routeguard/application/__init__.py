"""
Application layer: attaching guard expressions to routes.
"""

from routeguard.application.routes import GuardedRoute, GuardedShellRoute, UnguardedRoute
from routeguard.application.utils import RouteGuardUtils

__all__ = [
    "GuardedRoute",
    "GuardedShellRoute",
    "UnguardedRoute",
    "RouteGuardUtils",
]

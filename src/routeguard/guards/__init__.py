"""
Guards for navigation control.

Guards report allow, redirect or block through a NavigationResolver.
They can be composed with all_of/any_of/one_of (or ``&``, ``|``, ``^``).

Organization:
- base: RouteGuard and leaf factories (allow, redirect_to, from_callback)
- composite/: boolean composition patterns
- conditional: path-scoped activation
- timeout, cached: wrappers adding latency bounds and memoization
"""

from routeguard.guards.base import (
    AllowGuard,
    CallbackGuard,
    RedirectGuard,
    RedirectIfGuard,
    RouteGuard,
    allow,
    from_callback,
    redirect_if,
    redirect_to,
)
from routeguard.guards.cached import CachedGuard
from routeguard.guards.composite import CompositeGuard, all_of, any_of, one_of
from routeguard.guards.conditional import ConditionalGuard
from routeguard.guards.timeout import TimeoutGuard, with_timeout

__all__ = [
    # Base and leaf guards
    "RouteGuard",
    "AllowGuard",
    "RedirectGuard",
    "CallbackGuard",
    "RedirectIfGuard",
    "allow",
    "redirect_to",
    "from_callback",
    "redirect_if",
    # Composition patterns
    "CompositeGuard",
    "all_of",
    "any_of",
    "one_of",
    # Wrappers
    "ConditionalGuard",
    "TimeoutGuard",
    "with_timeout",
    "CachedGuard",
]

"""
Domain layer for route guard evaluation.

Contains the outcome model, the resolver contract and path matching,
with no external dependencies.
"""

from routeguard.domain.exceptions import (
    GuardConfigurationError,
    RouteGuardsError,
    RouterNotMountedError,
)
from routeguard.domain.interfaces import (
    GuardCacheInterface,
    GuardInterface,
    RouterInterface,
)
from routeguard.domain.matching import PathMatcher, glob_to_regex, split_rules
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

__all__ = [
    # Models
    "Allow",
    "Redirect",
    "GuardOutcome",
    "CompositeKind",
    "ExecutionOrder",
    "GuardConfig",
    "NavigationState",
    # Resolver
    "NavigationResolver",
    # Matching
    "PathMatcher",
    "glob_to_regex",
    "split_rules",
    # Interfaces
    "GuardInterface",
    "RouterInterface",
    "GuardCacheInterface",
    # Exceptions
    "RouteGuardsError",
    "GuardConfigurationError",
    "RouterNotMountedError",
]

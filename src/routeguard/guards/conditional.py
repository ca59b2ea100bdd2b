"""
Path-scoped guard activation.

ConditionalGuard runs its inner guard only where its rules say it applies.
Where it does not apply the navigation is allowed: the guard is bypassed,
not treated as passing or failing.
"""

import inspect
import logging
import re
from collections.abc import Iterable

from routeguard.domain.interfaces import GuardInterface, RouterInterface
from routeguard.domain.matching import PathMatcher, PathRule, split_rules
from routeguard.domain.models import NavigationState
from routeguard.domain.resolver import NavigationResolver
from routeguard.guards.base import RouteGuard

logger = logging.getLogger("routeguard.conditional")


class ConditionalGuard(RouteGuard):
    """
    Apply a guard using include and exclude rules on the target path.

    - Exclusion rules always skip the guard, regardless of inclusion.
    - Inclusion rules restrict where the guard runs.
    - With no inclusion rules the guard applies everywhere not excluded.

    Example:
        # Global protection with exceptions
        ConditionalGuard.excluding(AuthGuard(), ["/login", "/register"])

        # Targeted protection
        ConditionalGuard.including(AuthGuard(), [re.compile(r"^/user/")])
    """

    def __init__(
        self,
        guard: GuardInterface,
        included_paths: Iterable[str] = (),
        included_patterns: Iterable[re.Pattern[str]] = (),
        excluded_paths: Iterable[str] = (),
        excluded_patterns: Iterable[re.Pattern[str]] = (),
    ):
        """
        Args:
            guard: Guard to run where the rules apply
            included_paths: Exact paths where the guard applies
            included_patterns: Regexes for paths where the guard applies
            excluded_paths: Exact paths that bypass the guard
            excluded_patterns: Regexes for paths that bypass the guard
        """
        self.guard = guard
        self.matcher = PathMatcher(
            included_paths=frozenset(included_paths),
            included_patterns=tuple(included_patterns),
            excluded_paths=frozenset(excluded_paths),
            excluded_patterns=tuple(excluded_patterns),
        )

    @classmethod
    def including(
        cls, guard: GuardInterface, paths: Iterable[PathRule]
    ) -> "ConditionalGuard":
        """
        Apply ``guard`` only to the given paths.

        Paths may be exact strings, glob strings (``*``, ``**``, ``?``) or
        compiled regular expressions.
        """
        exact, patterns = split_rules(paths)
        return cls(guard, included_paths=exact, included_patterns=patterns)

    @classmethod
    def excluding(
        cls, guard: GuardInterface, paths: Iterable[PathRule]
    ) -> "ConditionalGuard":
        """
        Apply ``guard`` everywhere except the given paths.

        Paths may be exact strings, glob strings (``*``, ``**``, ``?``) or
        compiled regular expressions.
        """
        exact, patterns = split_rules(paths)
        return cls(guard, excluded_paths=exact, excluded_patterns=patterns)

    async def on_navigation(
        self,
        resolver: NavigationResolver,
        context: RouterInterface,
        state: NavigationState,
    ) -> None:
        path = state.path
        if not self.matcher.applies_to(path):
            logger.debug("%r does not apply to %s; allowing", self.guard, path)
            resolver.next()
            return

        pending = self.guard.on_navigation(resolver, context, state)
        if inspect.isawaitable(pending):
            await pending

    def __repr__(self) -> str:
        return f"ConditionalGuard({self.guard!r})"

"""
Base guard class and leaf guard factories.

RouteGuard adds operator composition on top of GuardInterface:
``a & b`` (all), ``a | b`` (any of) and ``a ^ b`` (one of).
Chains of ``&`` or ``|`` flatten into one composite; ``^`` always nests.
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from routeguard.domain.exceptions import GuardConfigurationError
from routeguard.domain.interfaces import GuardInterface, RouterInterface
from routeguard.domain.models import CompositeKind, NavigationState
from routeguard.domain.resolver import NavigationResolver

if TYPE_CHECKING:
    from routeguard.guards.composite import CompositeGuard

OnNavigation = Callable[
    [NavigationResolver, RouterInterface, NavigationState], Awaitable[None] | None
]
Condition = Callable[[RouterInterface, NavigationState], Awaitable[bool] | bool]


class RouteGuard(GuardInterface):
    """
    Base class for concrete guards.

    Subclasses implement ``on_navigation`` (sync or async).

    Example:
        class AuthGuard(RouteGuard):
            async def on_navigation(self, resolver, context, state):
                if await session.is_authenticated():
                    resolver.next()
                else:
                    resolver.redirect("/login")
    """

    def __and__(self, other: GuardInterface) -> "CompositeGuard":
        from routeguard.guards.composite import all_of

        return all_of(_flatten(self, other, CompositeKind.ALL))

    def __or__(self, other: GuardInterface) -> "CompositeGuard":
        from routeguard.guards.composite import any_of

        return any_of(_flatten(self, other, CompositeKind.ANY_OF))

    def __xor__(self, other: GuardInterface) -> "CompositeGuard":
        from routeguard.guards.composite import one_of

        # Not associative: (a ^ b) ^ c stays nested
        return one_of([self, other])

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _flatten(
    left: GuardInterface, right: GuardInterface, kind: CompositeKind
) -> list[GuardInterface]:
    """Merge operands that are plain composites of the same operator."""
    from routeguard.guards.composite import CompositeGuard

    guards: list[GuardInterface] = []
    for operand in (left, right):
        if isinstance(operand, CompositeGuard) and operand.is_plain(kind):
            guards.extend(operand.guards)
        else:
            guards.append(operand)
    return guards


class AllowGuard(RouteGuard):
    """Always allows navigation."""

    def on_navigation(self, resolver, context, state):
        resolver.next()


class RedirectGuard(RouteGuard):
    """Always redirects to a fixed path."""

    def __init__(self, path: str):
        if not path:
            raise GuardConfigurationError("redirect path cannot be empty")
        self.path = path

    def on_navigation(self, resolver, context, state):
        resolver.redirect(self.path)

    def __repr__(self) -> str:
        return f"RedirectGuard({self.path!r})"


class CallbackGuard(RouteGuard):
    """Delegates to an inline navigation callback."""

    def __init__(self, callback: OnNavigation):
        self.callback = callback

    async def on_navigation(self, resolver, context, state):
        result = self.callback(resolver, context, state)
        if inspect.isawaitable(result):
            await result

    def __repr__(self) -> str:
        name = getattr(self.callback, "__name__", type(self.callback).__name__)
        return f"CallbackGuard({name})"


class RedirectIfGuard(RouteGuard):
    """Redirects to ``path`` when ``condition`` holds, allows otherwise."""

    def __init__(self, condition: Condition, path: str):
        if not path:
            raise GuardConfigurationError("redirect path cannot be empty")
        self.condition = condition
        self.path = path

    async def on_navigation(self, resolver, context, state):
        should_redirect = self.condition(context, state)
        if inspect.isawaitable(should_redirect):
            should_redirect = await should_redirect
        if should_redirect:
            resolver.redirect(self.path)
        else:
            resolver.next()

    def __repr__(self) -> str:
        return f"RedirectIfGuard({self.path!r})"


def allow() -> RouteGuard:
    """Guard that always allows navigation."""
    return AllowGuard()


def redirect_to(path: str) -> RouteGuard:
    """Guard that always redirects to ``path``."""
    return RedirectGuard(path)


def from_callback(callback: OnNavigation) -> RouteGuard:
    """
    Wrap an inline ``(resolver, context, state)`` function as a guard.

    The callback may be a plain function or a coroutine function.
    """
    return CallbackGuard(callback)


def redirect_if(condition: Condition, path: str) -> RouteGuard:
    """
    Guard that redirects to ``path`` when ``condition(context, state)`` is true.

    The condition may be a plain function or a coroutine function.
    """
    return RedirectIfGuard(condition, path)

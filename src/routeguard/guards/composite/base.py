"""
Composite guards: boolean combinations of guards.

A single interpreter evaluates every operator (ALL, ANY_OF, ONE_OF) in
every execution order. Concurrent evaluation lets all children settle and
then reads their outcomes in list order, so the selected outcome is the one
sequential-forward evaluation would have produced.
"""

import asyncio
import logging
from collections.abc import Iterable
from typing import cast

from routeguard.domain.exceptions import GuardConfigurationError
from routeguard.domain.interfaces import GuardInterface, RouterInterface
from routeguard.domain.models import (
    CompositeKind,
    ExecutionOrder,
    GuardOutcome,
    NavigationState,
    Redirect,
)
from routeguard.domain.resolver import NavigationResolver
from routeguard.guards.base import RouteGuard

logger = logging.getLogger("routeguard.composite")


class _Tally:
    """Running count of child outcomes for one composite evaluation."""

    def __init__(self, kind: CompositeKind):
        self.kind = kind
        self.passed = 0
        self.failures: dict[int, Redirect] = {}

    def add(self, index: int, outcome: GuardOutcome) -> bool:
        """Record a child outcome; return True once the result is decided."""
        if outcome.continue_navigation:
            self.passed += 1
            if self.kind is CompositeKind.ANY_OF:
                return True
            return self.kind is CompositeKind.ONE_OF and self.passed > 1
        self.failures[index] = cast(Redirect, outcome)
        return self.kind is CompositeKind.ALL

    @property
    def first_failure(self) -> Redirect:
        return self.failures[min(self.failures)]


class CompositeGuard(RouteGuard):
    """
    Logical combination of child guards.

    - ALL allows iff every child allows; the first failure's redirect wins.
    - ANY_OF allows iff at least one child allows; on total failure it
      redirects to ``fallback_redirect`` or the first failure in list order.
    - ONE_OF allows iff exactly one child allows; a second success redirects
      to ``tie_redirect`` (then ``fallback_redirect``, then ``block()``), and
      zero successes behave like ANY_OF's total failure.

    Sequential orders stop evaluating as soon as the result is decided;
    later children never run. Concurrent order starts every child at once
    and waits for all of them, without cancelling any. When children raise,
    the first error in list order propagates once all have settled.

    The composite is immutable and keeps no per-navigation state, so one
    instance can serve concurrent navigations.
    """

    def __init__(
        self,
        kind: CompositeKind,
        guards: Iterable[GuardInterface],
        execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL_FORWARD,
        fallback_redirect: str | None = None,
        tie_redirect: str | None = None,
    ):
        """
        Args:
            kind: Operator to apply
            guards: Child guards, evaluated per ``execution_order``
            execution_order: Sequential-forward, sequential-reverse or concurrent
            fallback_redirect: Overrides the per-child redirect on failure
            tie_redirect: ONE_OF only; destination when several children allow
        """
        self.kind = kind
        self.guards: tuple[GuardInterface, ...] = tuple(guards)
        self.execution_order = execution_order
        self.fallback_redirect = fallback_redirect
        self.tie_redirect = tie_redirect

    def is_plain(self, kind: CompositeKind) -> bool:
        """Whether this is a default-configured composite of ``kind``."""
        return (
            self.kind is kind
            and self.execution_order is ExecutionOrder.SEQUENTIAL_FORWARD
            and self.fallback_redirect is None
            and self.tie_redirect is None
        )

    def validate(self) -> None:
        """
        Check the composite configuration.

        Raises:
            GuardConfigurationError: On an empty child list (except ALL) or
                an empty redirect path
        """
        if not self.guards and self.kind is not CompositeKind.ALL:
            raise GuardConfigurationError(
                f"{self.kind.value} guards list cannot be empty"
            )
        if self.fallback_redirect == "":
            raise GuardConfigurationError("fallback_redirect cannot be empty")
        if self.tie_redirect == "":
            raise GuardConfigurationError("tie_redirect cannot be empty")

    async def on_navigation(
        self,
        resolver: NavigationResolver,
        context: RouterInterface,
        state: NavigationState,
    ) -> None:
        self.validate()
        tally = _Tally(self.kind)

        if self.execution_order is ExecutionOrder.CONCURRENT:
            outcomes = await asyncio.gather(
                *(
                    guard.execute_with_resolver(context, state, resolver.config)
                    for guard in self.guards
                ),
                return_exceptions=True,
            )
            # Every child has settled; the earliest error in list order wins
            for outcome in outcomes:
                if isinstance(outcome, BaseException):
                    raise outcome
            for index, outcome in enumerate(outcomes):
                if tally.add(index, outcome):
                    break
        else:
            for index in self._indices():
                guard = self.guards[index]
                outcome = await guard.execute_with_resolver(
                    context, state, resolver.config
                )
                if tally.add(index, outcome):
                    logger.debug(
                        "%s short-circuited at %r (child %d of %d) for %s",
                        self.kind.value,
                        guard,
                        index + 1,
                        len(self.guards),
                        state.location,
                    )
                    break

        self._settle(tally, resolver)

    def _indices(self) -> Iterable[int]:
        indices = range(len(self.guards))
        if self.execution_order is ExecutionOrder.SEQUENTIAL_REVERSE:
            return reversed(indices)
        return indices

    def _settle(self, tally: _Tally, resolver: NavigationResolver) -> None:
        if self.kind is CompositeKind.ALL:
            if tally.failures:
                resolver.resolve(tally.first_failure)
            else:
                resolver.next()
            return

        if self.kind is CompositeKind.ONE_OF:
            if tally.passed == 1:
                resolver.next()
                return
            if tally.passed > 1:
                tie_path = self.tie_redirect or self.fallback_redirect
                if tie_path:
                    resolver.redirect(tie_path)
                else:
                    resolver.block()
                return
        elif tally.passed:
            resolver.next()
            return

        if self.fallback_redirect:
            resolver.redirect(self.fallback_redirect)
        else:
            resolver.resolve(tally.first_failure)

    def __repr__(self) -> str:
        inner = ", ".join(repr(guard) for guard in self.guards)
        return f"CompositeGuard({self.kind.value}, [{inner}])"


def all_of(
    guards: Iterable[GuardInterface],
    execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL_FORWARD,
) -> CompositeGuard:
    """
    Require every guard to allow.

    An empty list allows (vacuous truth).

    Example:
        all_of([AuthGuard(), RoleGuard(["admin"])])
    """
    return CompositeGuard(CompositeKind.ALL, guards, execution_order)


def any_of(
    guards: Iterable[GuardInterface],
    execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL_FORWARD,
    fallback_redirect: str | None = None,
) -> CompositeGuard:
    """
    Require at least one guard to allow.

    Example:
        any_of([AdminGuard(), ModeratorGuard()], fallback_redirect="/denied")
    """
    return CompositeGuard(
        CompositeKind.ANY_OF,
        guards,
        execution_order,
        fallback_redirect=fallback_redirect,
    )


def one_of(
    guards: Iterable[GuardInterface],
    tie_redirect: str | None = None,
    execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL_FORWARD,
    fallback_redirect: str | None = None,
) -> CompositeGuard:
    """
    Require exactly one guard to allow.

    Example:
        one_of([PremiumGuard(), TrialGuard()], tie_redirect="/ambiguous")
    """
    return CompositeGuard(
        CompositeKind.ONE_OF,
        guards,
        execution_order,
        fallback_redirect=fallback_redirect,
        tie_redirect=tie_redirect,
    )

"""
NavigationResolver: one-shot outcome carrier.

Each guard evaluation gets exactly one resolver. The guard reports its
decision through ``next()``, ``redirect(path)`` or ``block()``; only the
first call takes effect and every later call is a silent no-op.
"""

import asyncio
import logging
import threading
from typing import cast

from routeguard.domain.exceptions import GuardConfigurationError, RouterNotMountedError
from routeguard.domain.interfaces import RouterInterface
from routeguard.domain.models import (
    Allow,
    GuardConfig,
    GuardOutcome,
    NavigationState,
    Redirect,
)

logger = logging.getLogger("routeguard.resolver")


class NavigationResolver:
    """
    Single-resolution contract between a guard and the engine.

    The resolved flag is claimed with one check-and-set under a lock, so two
    guards racing to resolve the same resolver cannot both win. Any number
    of callers may await ``wait()`` and all observe the same outcome.
    """

    def __init__(
        self,
        context: RouterInterface,
        state: NavigationState,
        config: GuardConfig | None = None,
    ):
        """
        Args:
            context: The host router the navigation happens in
            state: The attempted destination
            config: Engine configuration (fallback path for ``block()``)
        """
        self._context = context
        self._state = state
        self._config = config or GuardConfig()
        self._lock = threading.Lock()
        self._outcome: GuardOutcome | None = None
        self._done = asyncio.Event()

    @property
    def context(self) -> RouterInterface:
        """The host router; raises when it has been detached."""
        if not self._context.is_mounted:
            raise RouterNotMountedError(
                f"Cannot resolve navigation to {self._state.location}: "
                "router is not mounted"
            )
        return self._context

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def config(self) -> GuardConfig:
        return self._config

    @property
    def current_path(self) -> str:
        """Location the user is at when the resolver reads it."""
        return self.context.get_current_location()

    @property
    def target_path(self) -> str:
        return self._state.location

    @property
    def is_resolved(self) -> bool:
        return self._outcome is not None

    @property
    def outcome(self) -> GuardOutcome | None:
        """The outcome, or None while unresolved."""
        return self._outcome

    async def wait(self) -> GuardOutcome:
        """Wait until a guard resolves this resolver and return the outcome."""
        await self._done.wait()
        return cast(GuardOutcome, self._outcome)

    # -------------------------------------------------------------------------
    # Resolution methods
    # -------------------------------------------------------------------------

    def next(self) -> None:
        """Allow the navigation to proceed unmodified."""
        self._complete(Allow(), "next")

    def redirect(self, path: str) -> None:
        """Send the navigation to ``path`` instead of the target."""
        if self.is_resolved:
            self._ignore("redirect")
            return
        if not path:
            raise GuardConfigurationError("redirect path cannot be empty")
        self._complete(Redirect(path), "redirect")

    def block(self) -> None:
        """
        Deny the navigation without an explicit destination.

        Goes to the configured fallback path when one is set. Otherwise the
        user stays where they are, unless they are already at the blocked
        target (a deep link), in which case they go to the root path.
        """
        if self.is_resolved:
            self._ignore("block")
            return
        self._complete(Redirect(self._block_path()), "block")

    def resolve(self, outcome: GuardOutcome) -> None:
        """Complete with an explicit outcome."""
        self._complete(outcome, "resolve")

    def next_or_block(self, allowed: bool) -> None:
        """Call ``next()`` when ``allowed`` is true, ``block()`` otherwise."""
        if allowed:
            self.next()
        else:
            self.block()

    def _block_path(self) -> str:
        if self._config.fallback_path:
            return self._config.fallback_path
        current = self.current_path
        if current == self.target_path:
            return self._config.root_path
        return current

    def _complete(self, outcome: GuardOutcome, method: str) -> None:
        with self._lock:
            if self._outcome is not None:
                won = False
            else:
                self._outcome = outcome
                won = True
        if not won:
            self._ignore(method)
            return
        logger.debug("%s(%s) -> %s", method, self._state.location, outcome)
        self._done.set()

    def _ignore(self, method: str) -> None:
        logger.debug(
            "Ignoring %s() for %s: already resolved to %s",
            method,
            self._state.location,
            self._outcome,
        )

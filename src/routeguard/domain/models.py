"""
Domain models for route guard evaluation.

These are pure data structures describing navigation outcomes, targets
and engine configuration. All models are immutable (frozen dataclasses)
so a produced outcome can be shared between awaiters without copying.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import urlsplit

# =============================================================================
# GUARD OUTCOME
# =============================================================================


@dataclass(frozen=True)
class GuardOutcome:
    """
    Final decision for one navigation attempt.

    Exactly two variants exist: ``Allow`` and ``Redirect``. A blocked
    navigation is expressed as a ``Redirect`` to the fallback location.
    """

    @property
    def continue_navigation(self) -> bool:
        return isinstance(self, Allow)

    @property
    def redirect_path(self) -> str | None:
        return None


@dataclass(frozen=True)
class Allow(GuardOutcome):
    """Navigation proceeds to the requested target."""


@dataclass(frozen=True)
class Redirect(GuardOutcome):
    """Navigation is re-run against ``path`` instead of the target."""

    path: str

    @property
    def redirect_path(self) -> str | None:
        return self.path


# =============================================================================
# COMPOSITION
# =============================================================================


class ExecutionOrder(Enum):
    """How a composite evaluates its children."""

    SEQUENTIAL_FORWARD = "sequential_forward"  # list order, short-circuits
    SEQUENTIAL_REVERSE = "sequential_reverse"  # back-to-front, short-circuits
    CONCURRENT = "concurrent"  # interleaved, all children settle


class CompositeKind(Enum):
    """Boolean operator applied by a composite guard."""

    ALL = "all"  # AND: every child allows
    ANY_OF = "any_of"  # OR: at least one child allows
    ONE_OF = "one_of"  # XOR: exactly one child allows


# =============================================================================
# NAVIGATION TARGET
# =============================================================================


@dataclass(frozen=True)
class NavigationState:
    """
    Immutable description of the attempted destination.

    ``location`` is the full target URI as the host router reports it
    (query string and fragment included). ``route`` is the matched route
    object, when the host router knows it.
    """

    location: str
    name: str | None = None
    params: Mapping[str, str] = field(default_factory=dict)
    route: Any = None

    @property
    def path(self) -> str:
        """Target path without query string or fragment."""
        return urlsplit(self.location).path or "/"


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class GuardConfig:
    """
    Engine configuration threaded through every resolver.

    ``fallback_path`` is where ``block()`` sends the user when set.
    Otherwise ``block()`` keeps the user at their current location, or at
    ``root_path`` when the current location is the blocked target itself.
    """

    fallback_path: str | None = None
    root_path: str = "/"

    @classmethod
    def from_env(cls) -> "GuardConfig":
        """Build a config from ``ROUTEGUARD_*`` environment variables."""
        fallback = os.getenv("ROUTEGUARD_FALLBACK_PATH", "").strip() or None
        root = os.getenv("ROUTEGUARD_ROOT_PATH", "").strip() or "/"
        return cls(fallback_path=fallback, root_path=root)

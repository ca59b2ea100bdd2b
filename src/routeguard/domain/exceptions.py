"""
Domain exceptions for route guard evaluation.

Guard evaluation errors raised by guard implementations are not wrapped;
these classes cover the engine's own failure modes.
"""


class RouteGuardsError(Exception):
    """Base exception for all route guard errors."""


class GuardConfigurationError(RouteGuardsError, ValueError):
    """
    Raised when a guard expression is set up incorrectly.

    Examples are an empty child list for ``any_of``/``one_of`` or an empty
    redirect path. These indicate a programming mistake in route setup and
    are never recovered by the engine.
    """


class RouterNotMountedError(RouteGuardsError):
    """
    Raised when a resolver needs a router that is no longer mounted.

    Any navigation action against a detached router is meaningless, so the
    resolver fails loudly instead of producing an outcome.
    """

    def __init__(self, message: str = "Router is not mounted"):
        super().__init__(message)

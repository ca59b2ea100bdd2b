"""
Infrastructure layer for route guard evaluation.

Contains adapters for external concerns (caching, host routers).
"""

from routeguard.infrastructure.cache import InMemoryGuardCache
from routeguard.infrastructure.router import InMemoryRouter

__all__ = [
    # Cache
    "InMemoryGuardCache",
    # Router
    "InMemoryRouter",
]

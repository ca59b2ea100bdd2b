"""
Router adapters implementing the host-router port.
"""

from routeguard.infrastructure.router.memory import InMemoryRouter

__all__ = [
    "InMemoryRouter",
]

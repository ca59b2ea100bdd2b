"""
Cache adapters for guards that memoize outcomes.
"""

from routeguard.infrastructure.cache.memory import InMemoryGuardCache

__all__ = [
    "InMemoryGuardCache",
]

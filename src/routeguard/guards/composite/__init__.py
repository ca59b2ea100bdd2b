"""
Composite guards - Guard composition patterns.

These guards combine multiple guards using logical operators.
"""

from routeguard.guards.composite.base import CompositeGuard, all_of, any_of, one_of

__all__ = [
    "CompositeGuard",
    "all_of",
    "any_of",
    "one_of",
]

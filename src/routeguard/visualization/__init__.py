"""
Visualization helpers for guard expressions.
"""

from routeguard.visualization.tree import print_guard_tree, render_guard_tree

__all__ = ["print_guard_tree", "render_guard_tree"]

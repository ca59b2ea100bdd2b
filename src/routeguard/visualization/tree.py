"""
Rich rendering of guard expressions.

Shows how a route's guard tree is put together: operators, execution
orders, redirect paths, path rules and leaf guards.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from routeguard.domain.interfaces import GuardInterface
from routeguard.guards.cached import CachedGuard
from routeguard.guards.composite import CompositeGuard
from routeguard.guards.conditional import ConditionalGuard
from routeguard.guards.timeout import TimeoutGuard

_KIND_LABELS = {
    "all": "ALL",
    "any_of": "ANY OF",
    "one_of": "ONE OF",
}


def _label(guard: GuardInterface) -> Text:
    if isinstance(guard, CompositeGuard):
        text = Text(_KIND_LABELS[guard.kind.value], style="bold blue")
        text.append(f"  {guard.execution_order.value}", style="dim")
        if guard.tie_redirect:
            text.append(f"  tie → {guard.tie_redirect}", style="yellow")
        if guard.fallback_redirect:
            text.append(f"  fallback → {guard.fallback_redirect}", style="yellow")
        return text
    if isinstance(guard, ConditionalGuard):
        matcher = guard.matcher
        text = Text("WHEN", style="bold magenta")
        included = sorted(matcher.included_paths) + [
            p.pattern for p in matcher.included_patterns
        ]
        excluded = sorted(matcher.excluded_paths) + [
            p.pattern for p in matcher.excluded_patterns
        ]
        if included:
            text.append(f"  include {', '.join(included)}", style="green")
        if excluded:
            text.append(f"  exclude {', '.join(excluded)}", style="red")
        return text
    if isinstance(guard, TimeoutGuard):
        text = Text("TIMEOUT", style="bold magenta")
        text.append(f"  {guard.timeout}s", style="dim")
        if guard.on_timeout:
            text.append(f"  → {guard.on_timeout}", style="yellow")
        return text
    if isinstance(guard, CachedGuard):
        text = Text("CACHED", style="bold magenta")
        if guard.ttl is not None:
            text.append(f"  ttl {guard.ttl}s", style="dim")
        return text
    return Text(repr(guard))


def _children(guard: GuardInterface) -> tuple[GuardInterface, ...]:
    if isinstance(guard, CompositeGuard):
        return guard.guards
    if isinstance(guard, (ConditionalGuard, TimeoutGuard, CachedGuard)):
        return (guard.guard,)
    return ()


def render_guard_tree(guard: GuardInterface, title: str | None = None) -> Tree:
    """Build a rich Tree describing a guard expression."""
    if title:
        root = Tree(Text(title, style="bold"))
        top = root.add(_label(guard))
    else:
        root = top = Tree(_label(guard))
    stack = [(top, guard)]
    while stack:
        node, current = stack.pop()
        for child in _children(current):
            stack.append((node.add(_label(child)), child))
    return root


def print_guard_tree(
    guard: GuardInterface,
    title: str | None = None,
    console: Console | None = None,
) -> None:
    """Print a guard expression to the console."""
    (console or Console()).print(render_guard_tree(guard, title))

"""
Path matching for path-scoped guards.

Rules are exact paths, glob strings or compiled regular expressions.
Exclusion always takes precedence over inclusion.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

PathRule = str | re.Pattern[str]


def is_glob(pattern: str) -> bool:
    """Whether a string rule should be treated as a glob."""
    return "*" in pattern or "?" in pattern


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """
    Convert a glob pattern to an anchored regular expression.

    Supported:
    - ``**`` matches any sequence, including ``/``
    - ``*`` matches any sequence within one path segment
    - ``?`` matches a single character other than ``/``

    Every other character is matched literally.
    """
    parts = ["^"]
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "*":
            if pattern[i + 1 : i + 2] == "*":
                parts.append(".*")
                i += 2
            else:
                parts.append("[^/]*")
                i += 1
            continue
        if char == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(char))
        i += 1
    parts.append("$")
    return re.compile("".join(parts))


def split_rules(
    rules: Iterable[PathRule],
) -> tuple[tuple[str, ...], tuple[re.Pattern[str], ...]]:
    """
    Split mixed rules into exact paths and regex patterns.

    Strings with glob wildcards are compiled; other strings stay exact.
    """
    exact: list[str] = []
    patterns: list[re.Pattern[str]] = []
    for rule in rules:
        if isinstance(rule, re.Pattern):
            patterns.append(rule)
        elif is_glob(rule):
            patterns.append(glob_to_regex(rule))
        else:
            exact.append(rule)
    return tuple(exact), tuple(patterns)


@dataclass(frozen=True)
class PathMatcher:
    """Inclusion and exclusion rules for a path-scoped guard."""

    included_paths: frozenset[str] = frozenset()
    included_patterns: tuple[re.Pattern[str], ...] = ()
    excluded_paths: frozenset[str] = frozenset()
    excluded_patterns: tuple[re.Pattern[str], ...] = ()

    @property
    def has_inclusion_rules(self) -> bool:
        return bool(self.included_paths or self.included_patterns)

    def is_excluded(self, path: str) -> bool:
        if path in self.excluded_paths:
            return True
        return any(p.search(path) for p in self.excluded_patterns)

    def is_included(self, path: str) -> bool:
        # No inclusion rules: the guard applies everywhere
        if not self.has_inclusion_rules:
            return True
        if path in self.included_paths:
            return True
        return any(p.search(path) for p in self.included_patterns)

    def applies_to(self, path: str) -> bool:
        """Whether the guard should run for ``path``."""
        if self.is_excluded(path):
            return False
        return self.is_included(path)

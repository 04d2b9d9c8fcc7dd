"""Glob matching and specificity ranking for ownership rules.

Patterns use shell-glob semantics over ``/``-separated repository paths:

    *     any run of characters inside one path segment
    ?     exactly one character inside a segment
    [..]  a character class (``[!..]`` negates)
    **    zero or more whole segments when it stands alone as a segment

A pattern with no wildcard characters only matches the exact path. Wildcards
never match a leading dot in a segment: ``*`` skips ``.env`` and
``docs/**`` skips ``docs/.cache/x``. Spell the dot out (``.*``,
``.github/*``) to cover dotfiles.

When several configured patterns match the same file, the most specific one
wins. Specificity favours literal paths, then deeper patterns, and penalises
every ``*`` plus any recursive ``**``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Optional, Sequence

WILDCARD_CHARS = ("*", "?")


def has_wildcard(pattern: str) -> bool:
    """Return True if the pattern contains ``*`` or ``?``."""
    return any(ch in pattern for ch in WILDCARD_CHARS)


# one path segment that does not start with a dot
_SEGMENT = r"(?!\.)[^/]*"


@lru_cache(maxsize=1024)
def _compile(pattern: str) -> re.Pattern[str]:
    parts: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        seg_start = i == 0 or pattern[i - 1] == "/"
        if ch == "*":
            if pattern.startswith("**", i):
                end = i + 2
                if seg_start and end < n and pattern[end] == "/":
                    # "**/" spans zero or more directories
                    parts.append(f"(?:{_SEGMENT}/)*")
                    i = end + 1
                    continue
                if seg_start and end == n:
                    parts.append(f"{_SEGMENT}(?:/{_SEGMENT})*")
                    i = end
                    continue
                # "**" glued to other characters behaves like "*"
                i = end - 1
            parts.append(_SEGMENT if seg_start else "[^/]*")
        elif ch == "?":
            parts.append("[^/.]" if seg_start else "[^/]")
        elif ch == "[":
            close = pattern.find("]", i + 1)
            if close == -1:
                parts.append(re.escape(ch))
            else:
                body = pattern[i + 1 : close]
                if body.startswith("!"):
                    body = "^" + body[1:]
                if seg_start:
                    parts.append(r"(?!\.)")
                parts.append("[" + body.replace("\\", "\\\\") + "]")
                i = close
        else:
            parts.append(re.escape(ch))
        i += 1
    return re.compile("".join(parts) + r"\Z")


def matches(path: str, pattern: str) -> bool:
    """Check whether ``path`` matches the glob ``pattern``.

    Example:
        >>> matches("src/app/main.py", "src/**/*.py")
        True
        >>> matches("src/app/main.py", "src/*.py")
        False
    """
    if not has_wildcard(pattern) and "[" not in pattern:
        return path == pattern
    return _compile(pattern).match(path) is not None


def normalize_directory_pattern(pattern: str) -> str:
    """Expand directory-like patterns to cover everything beneath them.

    ``docs/`` and ``docs`` both become ``docs/**/*``; wildcard patterns are
    returned unchanged.
    """
    if pattern.endswith("/"):
        return f"{pattern}**/*"
    if "*" in pattern:
        return pattern
    return f"{pattern}/**/*"


def matches_filter(path: str, pattern: str) -> bool:
    """Match used by include/exclude lists: directory form or literal form."""
    return matches(path, normalize_directory_pattern(pattern)) or matches(path, pattern)


def specificity(pattern: str) -> int:
    """Score a pattern; higher means more specific."""
    score = 0
    if not has_wildcard(pattern):
        score += 1000
    score += len(pattern.split("/")) * 10
    score -= pattern.count("*") * 5
    if "**" in pattern:
        score -= 50
    return score


def rank(patterns: Iterable[str]) -> list[str]:
    """Order patterns from most to least specific.

    The sort is stable, so patterns with equal scores keep their input order
    and ranking an already ranked list returns it unchanged.
    """
    return sorted(patterns, key=specificity, reverse=True)


def best_match(path: str, patterns: Sequence[str]) -> Optional[str]:
    """Return the most specific pattern that matches ``path``, if any."""
    for pattern in rank(patterns):
        if matches(path, pattern):
            return pattern
    return None

"""Glob-based include/exclude filter over tag names."""

import fnmatch
import logging
import re
from typing import Iterable, List, Optional, Pattern

from .exceptions import FilterConstructionError

logger = logging.getLogger(__name__)


def _has_unterminated_class(pattern: str) -> bool:
    """True if a '[' opens a character class that never closes."""
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            # A ']' right after the opening is a literal member of the class
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                return True
            i = close
        i += 1
    return False


def _compile(patterns: Optional[Iterable[str]], kind: str) -> Optional[List[Pattern]]:
    if not patterns:
        return None
    if isinstance(patterns, str):
        raise FilterConstructionError(
            f"tags_{kind} must be a list of patterns, got string '{patterns}'"
        )

    compiled = []
    for pattern in patterns:
        if not isinstance(pattern, str) or not pattern:
            raise FilterConstructionError(
                f"Invalid tags_{kind} pattern {pattern!r}: expected a non-empty string"
            )
        if _has_unterminated_class(pattern):
            raise FilterConstructionError(
                f"Invalid tags_{kind} pattern '{pattern}': unterminated '['"
            )
        try:
            compiled.append(re.compile(fnmatch.translate(pattern)))
        except re.error as e:
            raise FilterConstructionError(
                f"Invalid tags_{kind} pattern '{pattern}': {e}"
            ) from e
    return compiled


class IncludeExcludeFilter:
    """Matches names against include and exclude glob lists.

    An empty include list accepts every name; a name matching any exclude
    pattern is rejected even when it is also included.
    """

    def __init__(
        self,
        include: Optional[Iterable[str]] = None,
        exclude: Optional[Iterable[str]] = None,
    ) -> None:
        self._include = _compile(include, "include")
        self._exclude = _compile(exclude, "exclude")
        logger.debug(
            f"Tag filter built: include={list(include or [])} exclude={list(exclude or [])}"
        )

    def match(self, name: str) -> bool:
        if self._include is not None and not any(
            p.match(name) for p in self._include
        ):
            return False
        if self._exclude is not None and any(p.match(name) for p in self._exclude):
            return False
        return True

    def __bool__(self) -> bool:
        """True if the filter restricts anything."""
        return self._include is not None or self._exclude is not None

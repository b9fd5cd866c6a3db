"""Ignore policy deciding which files are left out of the snapshot."""

import logging
from typing import Iterable, Tuple

from wcmatch import glob

logger = logging.getLogger(__name__)

# ``*`` stays within one path segment; ``**`` spans any number of them.
GLOB_FLAGS = glob.GLOBSTAR


class IgnorePolicy:
    """
    Excludes paths matching any of a fixed set of glob patterns.

    Patterns are matched against the full path, segment by segment:
    ``/src/*.js`` ignores ``/src/a.js`` but not ``/src/lib/a.js``, while
    ``/src/**/*.js`` ignores both.
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self._patterns: Tuple[str, ...] = tuple(patterns)

    @property
    def patterns(self) -> Tuple[str, ...]:
        return self._patterns

    def should_ignore(self, path: str) -> bool:
        """Return True if ``path`` matches at least one ignore pattern."""
        ignored = bool(self._patterns) and glob.globmatch(path, self._patterns, flags=GLOB_FLAGS)
        logger.debug("Checking path: %s, ignored: %s", path, ignored)
        return ignored

    def __repr__(self) -> str:
        return f"IgnorePolicy(patterns={list(self._patterns)!r})"

"""Glob matching of package names against ignore patterns."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Sequence

from license_compliance.exceptions import ConfigurationError


@lru_cache(maxsize=256)
def compile_ignore_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a glob pattern into an anchored regular expression.

    ``*`` matches any run of characters and ``?`` a single character.
    ``[...]`` is passed through as a regex character class. There is no support
    for ``**``, braces or escaping, and other regex metacharacters are not
    escaped: ``.`` matches any character and ``+`` repeats, so patterns
    containing them have undefined results.

    Args:
        pattern: Glob pattern, e.g. ``"eslint-*"``.

    Returns:
        Compiled pattern, to be used with ``fullmatch``.

    Raises:
        ConfigurationError: If the translated pattern is not a valid regex.
    """
    # Bracket groups need no translation, they are already character classes
    translated = pattern.replace("*", ".*").replace("?", ".")
    try:
        return re.compile(translated)
    except re.error as e:
        raise ConfigurationError(f"Invalid ignore pattern '{pattern}': {e}") from e


def is_ignored(name: str, patterns: Sequence[str]) -> bool:
    """Check if a package name matches any ignore pattern.

    Matching is case-sensitive and covers the whole name.

    Args:
        name: Package name, e.g. ``"@types/node"``.
        patterns: Glob patterns to test.

    Returns:
        True if at least one pattern matches, False otherwise
        (including when ``patterns`` is empty).
    """
    return any(
        compile_ignore_pattern(pattern).fullmatch(name) is not None
        for pattern in patterns
    )

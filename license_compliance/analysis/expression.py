"""Parsing of flat OR license expressions."""

from __future__ import annotations

import re

_OR_SEPARATOR = re.compile(r"\s+OR\s+", re.IGNORECASE)


def parse_expression(raw: str) -> list[str]:
    """Split a license expression into candidate identifiers.

    Only ``OR`` disjunctions are recognized. ``AND``, ``WITH`` and
    parentheses are left inside the identifiers they appear in, and no
    SPDX normalization is applied.

    Args:
        raw: License field value, e.g. ``"MIT OR Apache-2.0"``.

    Returns:
        Trimmed, non-empty identifiers in their original order.
        Blank input yields an empty list.
    """
    segments = (segment.strip() for segment in _OR_SEPARATOR.split(raw))
    return [segment for segment in segments if segment]

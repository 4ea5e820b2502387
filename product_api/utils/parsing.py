"""
==============================================================================
Query Parsing Utilities
==============================================================================

Lenient integer parsing for query parameters.

Fallback Rules for ``parse_or_default``:
---------------------------------------
- ``None`` (parameter absent)            -> default
- no leading integer ("abc", "", " ")   -> default
- leading integer of zero               -> default
- leading integer < ``minimum``         -> default (no bound when None)
- otherwise the leading integer, ignoring surrounding whitespace and
  any trailing characters ("3", " 3 ", "3.7", "3abc" -> 3)

==============================================================================
"""

from __future__ import annotations

import re
from typing import Optional


LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_or_default(
    raw: Optional[str],
    default: int,
    minimum: Optional[int] = 1
) -> int:
    """
    Parse the leading integer of ``raw`` or fall back to ``default``.

    Args:
        raw: Raw query parameter value, or None when absent
        default: Value used when parsing fails
        minimum: Smallest accepted value, or None to accept any
            non-zero integer

    Returns:
        Parsed integer or the default

    Example:
        >>> parse_or_default("2", 1)
        2
        >>> parse_or_default("two", 1)
        1
        >>> parse_or_default("0", 10)
        10
        >>> parse_or_default("-1", 1, minimum=None)
        -1
    """
    if raw is None:
        return default

    match = LEADING_INT.match(raw)
    if not match:
        return default

    value = int(match.group(1))
    if value == 0:
        return default
    if minimum is not None and value < minimum:
        return default

    return value

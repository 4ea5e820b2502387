"""
==============================================================================
Utilities Package
==============================================================================

Modules:
--------
- parsing: Parse-or-default helper for query parameters

==============================================================================
"""

from .parsing import parse_or_default

__all__ = [
    "parse_or_default",
]

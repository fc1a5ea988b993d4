"""Shared character tables."""

from __future__ import annotations

import string

__all__ = [
    "DEFAULT_CHARSET",
    "REGEX_SPECIAL_CHARS",
    "REGEX_SPECIAL",
]

DEFAULT_CHARSET: str = string.ascii_uppercase + string.ascii_lowercase + string.digits
REGEX_SPECIAL_CHARS: str = ".*+?^${}()|[]\\"

REGEX_SPECIAL: frozenset[str] = frozenset(REGEX_SPECIAL_CHARS)

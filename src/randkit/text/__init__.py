"""Text normalization helpers."""

from .normalize import escape_regexp, get_initials, normalize_accents, slugify

__all__ = ["escape_regexp", "get_initials", "normalize_accents", "slugify"]

"""Accent stripping, slugs, initials and regular-expression escaping.

All helpers are pure and perform no I/O.

Slug rules
----------
:func:`slugify` applies the following transforms in order:

1. **Accent removal** – NFD decomposition followed by dropping the combining
   marks in ``U+0300``–``U+036F`` (``"Café"`` → ``"Cafe"``).
2. **Replacement** – every character outside ``[A-Za-z0-9-]`` becomes the
   ``replace`` string.
3. **De-duplication** – runs of ``replace`` collapse to a single occurrence.
4. **Lowercasing**.
5. **Trimming** – leading and trailing runs of ``replace`` are removed.

Steps 3–5 can each be switched off.

Example
-------

>>> slugify("Hello $ World!", lower=False, replace="_")
'Hello_World'
"""

from __future__ import annotations

import re
import unicodedata

from randkit.utils.constants import REGEX_SPECIAL

__all__ = ["normalize_accents", "slugify", "get_initials", "escape_regexp"]

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NON_SLUG = re.compile(r"[^A-Za-z0-9-]")


def normalize_accents(text: str) -> str:
    """Return ``text`` with accents and diacritics removed."""

    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def slugify(
    text: str,
    *,
    replace: str = "-",
    lower: bool = True,
    trim: bool = True,
    deduplicate: bool = True,
) -> str:
    """Return a URL-friendly slug for ``text``."""

    result = _NON_SLUG.sub(lambda _m: replace, normalize_accents(text))

    if replace:
        run = f"(?:{re.escape(replace)})+"
        if deduplicate:
            result = re.sub(run, lambda _m: replace, result)
        if trim:
            result = re.sub(f"^{run}|{run}$", "", result)

    if lower:
        result = result.lower()

    if trim:
        result = result.strip()

    return result


def get_initials(*words: str, limit: int = 3) -> str:
    """Return the first character of each word, at most ``limit`` of them.

    Each argument may hold several whitespace separated words.
    """

    initials = [token[0] for chunk in words for token in chunk.split()]
    return "".join(initials[:limit])


def escape_regexp(text: str) -> str:
    """Backslash-escape characters with special meaning in a regex.

    Unlike :func:`re.escape` whitespace and other punctuation are left alone.
    """

    return "".join("\\" + ch if ch in REGEX_SPECIAL else ch for ch in text)

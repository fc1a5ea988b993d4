"""Built-in placeholder vocabulary and word list loading."""

from __future__ import annotations

import os
from pathlib import Path

from randkit.utils.errors import EmptySequenceError

__all__ = ["DEFAULT_LEXICON", "load_lexicon"]

DEFAULT_LEXICON: tuple[str, ...] = (
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing",
    "elit", "sed", "do", "eiusmod", "tempor", "incididunt", "ut", "labore",
    "et", "dolore", "magna", "aliqua", "enim", "ad", "minim", "veniam",
    "quis", "nostrud", "exercitation", "ullamco", "laboris", "nisi",
    "aliquip", "ex", "ea", "commodo", "consequat", "duis", "aute", "irure",
    "in", "reprehenderit", "voluptate", "velit", "esse", "cillum", "fugiat",
    "nulla", "pariatur", "excepteur", "sint", "occaecat", "cupidatat", "non",
    "proident", "sunt", "culpa", "qui", "officia", "deserunt", "mollit",
    "anim", "id", "est", "laborum",
)  # fmt: skip


def load_lexicon(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> tuple[str, ...]:
    """Read a newline-separated word list from ``path``.

    Surrounding whitespace is stripped; blank lines and lines starting with
    ``#`` are ignored.  Raises :class:`EmptySequenceError` if no word remains.
    """

    words = tuple(
        stripped
        for line in Path(path).read_text(encoding=encoding).splitlines()
        if (stripped := line.strip()) and not stripped.startswith("#")
    )
    if not words:
        raise EmptySequenceError(f"lexicon file contains no words: {path}")
    return words

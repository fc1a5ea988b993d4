"""Random selection from sequences and character sets."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from randkit.utils.constants import DEFAULT_CHARSET
from randkit.utils.errors import EmptySequenceError, InvalidRangeError

from .source import RandomnessSource, _as_bound, next_int, source_for

__all__ = [
    "DEFAULT_CHARSET",
    "pick_one",
    "random_string",
    "random_hex",
    "random_digits",
]

T = TypeVar("T")


def pick_one(
    sequence: Sequence[T],
    secure: bool = False,
    *,
    source: RandomnessSource | None = None,
) -> T:
    """Return one element of ``sequence``, each with probability ``1/len``.

    Raises :class:`EmptySequenceError` when ``sequence`` is empty.
    """

    if len(sequence) == 0:
        raise EmptySequenceError("cannot pick from an empty sequence")
    return sequence[next_int(0, len(sequence), secure, source=source)]


def random_string(
    length: int,
    charset: str | None = None,
    secure: bool = False,
    *,
    source: RandomnessSource | None = None,
) -> str:
    """Return ``length`` characters drawn independently from ``charset``.

    An omitted or empty ``charset`` falls back to :data:`DEFAULT_CHARSET`
    (``A-Z``, ``a-z``, ``0-9``).
    """

    count = _as_bound("length", length)
    if count < 0:
        raise InvalidRangeError(f"length must be non-negative, got {length}")
    chars = charset or DEFAULT_CHARSET
    src = source if source is not None else source_for(secure)
    return "".join(pick_one(chars, source=src) for _ in range(count))


def _random_bytes(nbytes: int, secure: bool) -> bytes:
    if nbytes < 0:
        raise InvalidRangeError(f"nbytes must be non-negative, got {nbytes}")
    return source_for(secure).randbytes(nbytes)


def random_hex(nbytes: int, secure: bool = True) -> str:
    """Return ``nbytes`` random bytes rendered as ``2 * nbytes`` hex digits."""

    return _random_bytes(nbytes, secure).hex()


def random_digits(nbytes: int, secure: bool = True) -> str:
    """Return the decimal values of ``nbytes`` random bytes concatenated.

    The result length varies between ``nbytes`` and ``3 * nbytes`` digits.
    """

    return "".join(str(byte) for byte in _random_bytes(nbytes, secure))

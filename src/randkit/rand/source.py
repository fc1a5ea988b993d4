"""Pluggable sources of uniformly distributed integers.

Two implementations satisfy :class:`RandomnessSource`:

- :class:`FastSource` wraps a private :class:`random.Random`.  It is cheap and
  statistically adequate, and accepts a seed so that tests can replay an exact
  stream.  It is not suitable where predictability matters.
- :class:`SecureSource` draws every value from :mod:`secrets`, consuming fresh
  operating-system entropy on each call.

The variant is chosen per call through a ``secure`` flag or by passing an
explicit ``source``.  There is no module-level generator: :func:`source_for`
returns a fresh object every time, so concurrent callers never share state.
"""

from __future__ import annotations

import math
import random
import secrets
from numbers import Integral, Real
from typing import Protocol, runtime_checkable

from randkit.utils.errors import InvalidRangeError

__all__ = [
    "RandomnessSource",
    "FastSource",
    "SecureSource",
    "source_for",
    "next_int",
]


@runtime_checkable
class RandomnessSource(Protocol):
    """Capability producing integers uniformly drawn from ``[0, bound)``."""

    def randbelow(self, bound: int) -> int:
        """Return a uniform integer ``0 <= n < bound`` for ``bound >= 1``."""
        ...


def _check_bound(bound: int) -> None:
    if bound < 1:
        raise InvalidRangeError(f"bound must be at least 1, got {bound}")


class FastSource:
    """Non-secure source backed by :class:`random.Random`."""

    secure = False

    def __init__(self, seed: int | str | bytes | None = None) -> None:
        self._rng = random.Random(seed)

    def randbelow(self, bound: int) -> int:
        _check_bound(bound)
        return self._rng.randrange(bound)

    def randbytes(self, n: int) -> bytes:
        return self._rng.randbytes(n)


class SecureSource:
    """Cryptographically strong source backed by :mod:`secrets`."""

    secure = True

    def randbelow(self, bound: int) -> int:
        _check_bound(bound)
        return secrets.randbelow(bound)

    def randbytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


def source_for(secure: bool) -> FastSource | SecureSource:
    """Return a fresh source of the requested variant."""

    return SecureSource() if secure else FastSource()


def _as_bound(name: str, value: object) -> int:
    """Coerce ``value`` to an integer bound or raise :class:`InvalidRangeError`."""

    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidRangeError(f"{name} must be a number, got {type(value).__name__}")
    if isinstance(value, Integral):
        return int(value)
    as_float = float(value)
    if not math.isfinite(as_float):
        raise InvalidRangeError(f"{name} must be finite, got {value!r}")
    if not as_float.is_integer():
        raise InvalidRangeError(f"{name} must be integral, got {value!r}")
    return int(as_float)


def next_int(
    minimum: int,
    maximum: int | bool | None = None,
    secure: bool = False,
    *,
    source: RandomnessSource | None = None,
) -> int:
    """Return an integer uniformly drawn from ``[minimum, maximum)``.

    Parameters
    ----------
    minimum:
        Inclusive lower bound.  When ``maximum`` is omitted this value is the
        exclusive upper bound instead and the lower bound is ``0``.
    maximum:
        Exclusive upper bound.  ``maximum == minimum`` returns ``minimum``
        without drawing.  A ``bool`` here is the ``secure`` flag of the
        one-bound form, so ``next_int(10, True)`` draws securely from
        ``[0, 10)``.
    secure:
        Use :class:`SecureSource` instead of :class:`FastSource`.  Ignored when
        ``source`` is given.
    source:
        Explicit randomness source, e.g. a seeded :class:`FastSource`.

    Raises
    ------
    InvalidRangeError
        If a bound is not a finite integral number or ``maximum < minimum``.
    """

    if isinstance(maximum, bool):
        maximum, secure = None, maximum
    if maximum is None:
        low, high = 0, _as_bound("maximum", minimum)
    else:
        low, high = _as_bound("minimum", minimum), _as_bound("maximum", maximum)

    if high == low:
        return low
    if high < low:
        raise InvalidRangeError(f"maximum ({high}) must not be below minimum ({low})")

    src = source if source is not None else source_for(secure)
    return low + src.randbelow(high - low)

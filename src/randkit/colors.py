"""Conversion between hexadecimal color strings and RGB tuples."""

from __future__ import annotations

import re

from randkit.utils.errors import InvalidColorError

__all__ = ["hex_to_rgb", "rgb_to_hex"]

_RX_HEX = re.compile(r"^#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Return the ``(red, green, blue)`` channels of a hex color.

    Accepts ``#rrggbb``, ``rrggbb`` and the shorthand ``#rgb`` forms; an
    alpha channel (``#rgba``, ``#rrggbbaa``) is ignored.

    >>> hex_to_rgb("#093")
    (0, 153, 51)
    """

    m = _RX_HEX.fullmatch(value.strip())
    if not m:
        raise InvalidColorError(f"invalid hex color: {value!r}")
    digits = m.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    """Return ``rgb`` as a lowercase ``#rrggbb`` string."""

    if len(rgb) != 3:
        raise InvalidColorError(f"expected three channels, got {len(rgb)}")
    for channel in rgb:
        if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
            raise InvalidColorError(f"channel out of range 0..255: {channel!r}")
    red, green, blue = rgb
    return f"#{red:02x}{green:02x}{blue:02x}"

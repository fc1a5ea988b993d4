"""Numeric helpers: linear range mapping and human-readable byte sizes."""

from __future__ import annotations

from randkit.utils.errors import InvalidRangeError

__all__ = ["map_range", "human_file_size"]

_IEC_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")
_SI_UNITS = ("kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def map_range(
    value: float, start1: float, stop1: float, start2: float, stop2: float
) -> float:
    """Map ``value`` from ``[start1, stop1]`` onto ``[start2, stop2]``.

    Values outside the source range are extrapolated linearly.
    """

    if stop1 == start1:
        raise InvalidRangeError("source range must not be empty")
    return start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))


def human_file_size(num_bytes: int, si: bool = False, dp: int = 1) -> str:
    """Format ``num_bytes`` as e.g. ``"1.0 KiB"`` (``si=True``: ``"1.0 kB"``).

    Negative sizes keep their sign.  Values below one unit are printed as
    whole bytes.
    """

    thresh = 1000 if si else 1024
    if abs(num_bytes) < thresh:
        return f"{num_bytes} B"

    units = _SI_UNITS if si else _IEC_UNITS
    value = float(num_bytes)
    idx = -1
    while True:
        value /= thresh
        idx += 1
        if round(abs(value), dp) < thresh or idx == len(units) - 1:
            break
    return f"{value:.{dp}f} {units[idx]}"

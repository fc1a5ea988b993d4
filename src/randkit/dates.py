"""Lightweight helpers for formatting and comparing dates.

Formatting is driven by a pattern of day.js style tokens or by one of the
named presets in :data:`FORMATS`.  Locale, time zone handling and list joining
come from an explicit :class:`~randkit.config.DateFormatConfig` passed per
call; nothing is configured process-wide.

Supported tokens
----------------
``YYYY`` ``YY`` year, ``MMMM`` ``MMM`` month name, ``MM`` ``M`` month number,
``DD`` ``D`` day of month, ``dddd`` ``ddd`` weekday name, ``HH`` ``H`` hour,
``mm`` minutes, ``ss`` seconds.  Text inside ``[...]`` is copied verbatim.

Time zones
----------
With ``utc=True`` aware values are converted to UTC and naive values are taken
to already be UTC.  Otherwise aware values are converted to local time and
naive values are used as-is.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Union

from randkit.config.schema import DateFormatConfig
from randkit.utils.errors import InvalidDateError

__all__ = [
    "FORMATS",
    "DateValue",
    "DateFormatter",
    "format_date",
    "is_date_between",
    "date_formatter",
    "to_datetime",
]

DateValue = Union[date, datetime, str, None]

FORMATS: dict[str, str] = {
    "shortText": "ddd DD/MM",
    "longText": "ddd DD MMM YYYY",
    "input": "YYYY-MM-DD",
    "full-input": "YYYY-MM-DD H:mm:ss",
    "default": "DD/MM/YYYY",
}

# Weekday tables start on Sunday.
_NAMES: dict[str, dict[str, tuple[str, ...]]] = {
    "en": {
        "months": (
            "January", "February", "March", "April", "May", "June", "July",
            "August", "September", "October", "November", "December",
        ),
        "months_short": (
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ),
        "weekdays": (
            "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
        ),
        "weekdays_short": ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    },
    "fr": {
        "months": (
            "janvier", "février", "mars", "avril", "mai", "juin", "juillet",
            "août", "septembre", "octobre", "novembre", "décembre",
        ),
        "months_short": (
            "janv.", "févr.", "mars", "avr.", "mai", "juin",
            "juil.", "août", "sept.", "oct.", "nov.", "déc.",
        ),
        "weekdays": (
            "dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi",
        ),
        "weekdays_short": ("dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."),
    },
}  # fmt: skip

_RX_TOKEN = re.compile(r"\[([^\]]*)\]|YYYY|YY|MMMM|MMM|MM|M|dddd|ddd|DD|D|HH|H|mm|ss")


def to_datetime(value: date | datetime | str, *, utc: bool = False) -> datetime:
    """Return ``value`` as a :class:`datetime` normalized for ``utc``.

    Strings are parsed with :meth:`datetime.fromisoformat`; failures raise
    :class:`InvalidDateError`.
    """

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise InvalidDateError(f"unparseable date: {value!r}") from exc
    else:
        raise InvalidDateError(f"unsupported date value: {type(value).__name__}")

    if utc:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    if dt.tzinfo is not None:
        return dt.astimezone().replace(tzinfo=None)
    return dt


def _render(dt: datetime, pattern: str, locale: str) -> str:
    names = _NAMES[locale]
    weekday = (dt.weekday() + 1) % 7

    def sub(m: re.Match[str]) -> str:
        if m.group(1) is not None:
            return m.group(1)
        token = m.group(0)
        if token == "YYYY":
            return f"{dt.year:04d}"
        if token == "YY":
            return f"{dt.year % 100:02d}"
        if token == "MMMM":
            return names["months"][dt.month - 1]
        if token == "MMM":
            return names["months_short"][dt.month - 1]
        if token == "MM":
            return f"{dt.month:02d}"
        if token == "M":
            return str(dt.month)
        if token == "dddd":
            return names["weekdays"][weekday]
        if token == "ddd":
            return names["weekdays_short"][weekday]
        if token == "DD":
            return f"{dt.day:02d}"
        if token == "D":
            return str(dt.day)
        if token == "HH":
            return f"{dt.hour:02d}"
        if token == "H":
            return str(dt.hour)
        if token == "mm":
            return f"{dt.minute:02d}"
        return f"{dt.second:02d}"

    return _RX_TOKEN.sub(sub, pattern)


def format_date(
    value: DateValue | Sequence[DateValue],
    fmt: str = "default",
    config: DateFormatConfig | None = None,
) -> str:
    """Format one date, or a list of dates joined by ``config.separator``.

    ``fmt`` is a preset name from :data:`FORMATS` or a token pattern.  Empty
    values format to ``""`` and are skipped inside lists; ``config.unique``
    drops repeated renderings while keeping first-seen order.
    """

    cfg = config if config is not None else DateFormatConfig()

    if isinstance(value, (list, tuple)):
        rendered = [format_date(item, fmt, cfg) for item in value if item]
        if cfg.unique:
            rendered = list(dict.fromkeys(rendered))
        return cfg.separator.join(rendered)

    if not value:
        return ""

    pattern = FORMATS.get(fmt, fmt)
    return _render(to_datetime(value, utc=cfg.utc), pattern, cfg.locale)


def is_date_between(
    value: date | datetime | str,
    start: DateValue,
    end: DateValue,
    utc: bool = False,
) -> bool:
    """Return ``True`` if ``value`` is strictly after ``start`` and before ``end``.

    A missing bound leaves that side open.
    """

    dt = to_datetime(value, utc=utc)
    after = dt > to_datetime(start, utc=utc) if start else True
    before = dt < to_datetime(end, utc=utc) if end else True
    return after and before


@dataclass(slots=True, frozen=True)
class DateFormatter:
    """Preset formatters bound to one :class:`DateFormatConfig`."""

    config: DateFormatConfig

    def default_format(self, value: DateValue | Sequence[DateValue]) -> str:
        return format_date(value, "default", self.config)

    def short_text_format(self, value: DateValue | Sequence[DateValue]) -> str:
        return format_date(value, "shortText", self.config)

    def input_format(self, value: DateValue | Sequence[DateValue]) -> str:
        return format_date(value, "input", self.config)

    def input_full_format(self, value: DateValue | Sequence[DateValue]) -> str:
        return format_date(value, "full-input", self.config)


def date_formatter(config: DateFormatConfig | None = None) -> DateFormatter:
    """Return a :class:`DateFormatter` for ``config`` (defaults when omitted)."""

    return DateFormatter(config if config is not None else DateFormatConfig())

"""Form validation rule factories.

A rule is a callable taking the value under validation and returning ``True``
when it is valid or a human-readable error message otherwise.  Messages are in
French.  Empty optional values (``None``, ``""``) pass the format rules
(:func:`email`, :func:`phone`, :func:`is_number`); combine them with
:func:`required` to make a field mandatory.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Sized
from typing import Any, Literal, TypeVar, Union

__all__ = [
    "Rule",
    "Comparator",
    "required",
    "non_zero",
    "compare_number",
    "min_value",
    "max_value",
    "min_length",
    "max_length",
    "email",
    "is_number",
    "phone",
]

T = TypeVar("T")
Rule = Callable[[T], Union[bool, str]]
Comparator = Literal["lt", "gt", "gte", "lte", "eq", "neq"]

REQUIRED_MESSAGE = "Champ requis"

_COMPARATORS: dict[str, tuple[Callable[[Any, Any], bool], str]] = {
    "eq": (operator.eq, "La valeur doit être égale à {nb}."),
    "neq": (operator.ne, "La valeur ne doit pas être égale à {nb}."),
    "gt": (operator.gt, "La valeur doit être supérieure à {nb}."),
    "gte": (operator.ge, "La valeur doit être supérieure ou égale à {nb}."),
    "lt": (operator.lt, "La valeur doit être inferieure à {nb}."),
    "lte": (operator.le, "La valeur doit être inferieure ou égale à {nb}."),
}

_RX_EMAIL = re.compile(
    r"^(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))@"
    r"((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)
_RX_PHONE = re.compile(r"^(\+?33 ?|0)[1-9]([-. ]?\d{2}){4}$")


def required(value: Any = None) -> bool | str:
    """Reject ``None``, empty strings and empty collections; numbers always pass."""

    if value is None:
        return REQUIRED_MESSAGE
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return True
    if isinstance(value, Sized):
        return len(value) > 0 or REQUIRED_MESSAGE
    return bool(value) or REQUIRED_MESSAGE


def non_zero(value: float | None = None) -> bool | str:
    """Reject ``0`` and missing values."""

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 or REQUIRED_MESSAGE
    return bool(value) or REQUIRED_MESSAGE


def compare_number(comparator: Comparator, nb: float) -> Rule[float | None]:
    """Return a rule comparing its value (``None`` counts as ``0``) with ``nb``."""

    try:
        op, template = _COMPARATORS[comparator]
    except KeyError:
        raise ValueError(f"unknown comparator: {comparator!r}") from None
    message = template.format(nb=nb)

    def rule(value: float | None = None) -> bool | str:
        return op(0 if value is None else value, nb) or message

    return rule


def min_value(nb: float, eq: bool = True) -> Rule[float | None]:
    """Value must be ``>= nb`` (``> nb`` when ``eq`` is false)."""

    return compare_number("gte" if eq else "gt", nb)


def max_value(nb: float, eq: bool = True) -> Rule[float | None]:
    """Value must be ``<= nb`` (``< nb`` when ``eq`` is false)."""

    return compare_number("lte" if eq else "lt", nb)


def min_length(length: int) -> Rule[Sized | None]:
    message = f"Valeur trop courte : {length} caractères requis."

    def rule(value: Sized | None = None) -> bool | str:
        return len(value or ()) >= length or message

    return rule


def max_length(length: int) -> Rule[Sized | None]:
    message = f"Valeur trop longue : {length} caractères maximum."

    def rule(value: Sized | None = None) -> bool | str:
        return len(value or ()) <= length or message

    return rule


def email(value: str | None = None) -> bool | str:
    if not value:
        return True
    return bool(_RX_EMAIL.match(value)) or "Email invalide"


def is_number(value: str | float | None = None) -> bool | str:
    """Accept anything :class:`float` can parse; ``None`` passes."""

    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    try:
        float(value)
    except (TypeError, ValueError):
        return "Nombre invalide"
    return True


def phone(value: str | int | None = None) -> bool | str:
    """Validate a French phone number (``0612345678``, ``+33 6 12 34 56 78``)."""

    if not value:
        return True
    return bool(_RX_PHONE.match(str(value))) or "Numéro invalide"

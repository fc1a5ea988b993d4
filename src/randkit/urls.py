"""Query string building and endpoint path templating."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote, urlencode

from randkit.utils.errors import UnknownEndpointError

__all__ = ["build_query", "declare_get_endpoint"]

EndpointResolver = Callable[..., str]


def build_query(query: Mapping[str, Any] | None = None) -> str:
    """Return ``"?k=v&..."`` for the truthy entries of ``query``.

    ``None`` yields ``""``.  Keys and values are percent-encoded.
    """

    if query is None:
        return ""
    pairs = [(key, str(value)) for key, value in query.items() if value]
    return "?" + urlencode(pairs, quote_via=quote)


def declare_get_endpoint(endpoints: Mapping[str, str]) -> EndpointResolver:
    """Return a resolver filling ``{name}`` placeholders of ``endpoints``.

    >>> resolve = declare_get_endpoint({"user": "/users/{id}"})
    >>> resolve("user", {"id": 7})
    '/users/7'
    """

    table = dict(endpoints)

    def resolve(name: str, args: Mapping[str, Any] | None = None) -> str:
        try:
            path = table[name]
        except KeyError:
            raise UnknownEndpointError(name) from None
        for key, value in (args or {}).items():
            path = path.replace(f"{{{key}}}", str(value))
        return path

    return resolve

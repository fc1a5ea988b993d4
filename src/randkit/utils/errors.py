"""Typed exceptions raised by the randkit helpers."""


class RandkitError(Exception):
    """Base class for all randkit errors."""


class InvalidRangeError(RandkitError, ValueError):
    """Raised when numeric bounds are malformed or inverted."""


class EmptySequenceError(RandkitError, ValueError):
    """Raised when selecting from a zero-length sequence or lexicon."""


class InvalidColorError(RandkitError, ValueError):
    """Raised when a color string or RGB tuple cannot be converted."""


class InvalidDateError(RandkitError, ValueError):
    """Raised when a date value cannot be parsed."""


class UnknownEndpointError(RandkitError, KeyError):
    """Raised when resolving an endpoint name that was never declared."""

"""Exception types raised by mathinterval.

Every failure surfaces to the immediate caller as one of these; nothing is
retried. Each class also derives from the matching built-in exception so
callers can keep catching ``ValueError``/``TypeError``.
"""

from typing import Any


class IntervalError(Exception):
    """Base class for all mathinterval errors."""


class FormatError(IntervalError, ValueError):
    """Text is not bracket notation, or a format specifier is invalid."""


class ConversionError(IntervalError, ValueError):
    """An endpoint substring could not be converted to the target type."""

    def __init__(self, text: str, cast: type[Any], reason: str = ""):
        self.text: str = text
        self.cast: type[Any] = cast
        message = f"Cannot convert endpoint {text!r} to {cast.__name__}."
        if reason:
            message += f"\nReason: {reason}"
        super().__init__(message)


class UnsupportedTypeError(IntervalError, TypeError):
    """The endpoint type lacks a capability the operation needs."""

    def __init__(self, cast: type[Any], capability: str, hint: str = ""):
        self.cast: type[Any] = cast
        self.capability: str = capability
        message = f"Type {cast.__name__!r} does not support {capability!r}."
        if hint:
            message += f"\nHint: {hint}"
        super().__init__(message)

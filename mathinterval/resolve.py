"""Endpoint resolution: text conversion and minimum/maximum sentinels.

Parsing bracket notation needs two things from the endpoint type ``T``:

- a converter turning endpoint text into ``T`` (invariant locale), and
- for an empty endpoint, the smallest (left) or largest (right) value of ``T``.

Types can provide sentinels themselves by implementing :class:`Bounded`.
Built-in and numpy types are covered by explicit registries instead, since
they cannot grow new methods.
"""

import logging
import sys
from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from fractions import Fraction
from typing import Any, Protocol, TypeVar, runtime_checkable

import numpy as np

from mathinterval.errors import ConversionError, UnsupportedTypeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Converter = Callable[[str], Any]


@runtime_checkable
class Bounded(Protocol):
    """Capability of a type that knows its own smallest and largest values."""

    @classmethod
    def minimum(cls) -> Any: ...

    @classmethod
    def maximum(cls) -> Any: ...


class EndpointResolver:
    """Converts endpoint text to values and supplies sentinel values.

    Lookups walk the type's MRO, so a subclass of a registered type uses
    the registration of its nearest registered base.
    """

    def __init__(self) -> None:
        self._converters: dict[type, Converter] = {}
        self._sentinels: dict[type, tuple[Any, Any]] = {}

    def register_converter(
        self, cls: type[T], converter: Callable[[str], T]
    ) -> None:
        self._converters[cls] = converter
        logger.debug("Registered converter for %s", cls.__name__)

    def register_bounds(self, cls: type[T], minimum: T, maximum: T) -> None:
        self._sentinels[cls] = (minimum, maximum)
        logger.debug(
            "Registered bounds for %s: [%r, %r]", cls.__name__, minimum, maximum
        )

    def copy(self) -> "EndpointResolver":
        """Independent resolver starting from this one's registrations."""
        clone = EndpointResolver()
        clone._converters = dict(self._converters)
        clone._sentinels = dict(self._sentinels)
        return clone

    def convert(self, text: str, cast: type[T]) -> T:
        """Convert endpoint text to ``cast``.

        Raises:
            UnsupportedTypeError: If no converter is registered for ``cast``
            ConversionError: If the converter rejects ``text``
        """
        converter = self._lookup(self._converters, cast)
        if converter is None:
            raise UnsupportedTypeError(
                cast,
                "converter",
                hint=(
                    "Register one before parsing:\n"
                    f"  register_converter({cast.__name__}, "
                    f"lambda text: {cast.__name__}(text))"
                ),
            )
        try:
            return converter(text)
        except (ValueError, ArithmeticError, TypeError) as exc:
            raise ConversionError(text, cast, str(exc)) from exc

    def minimum(self, cast: type[T]) -> T:
        """Smallest value of ``cast``, substituted for an empty left endpoint."""
        value = self._sentinel(cast, "minimum")
        logger.debug("Resolved minimum of %s to %r", cast.__name__, value)
        return value

    def maximum(self, cast: type[T]) -> T:
        """Largest value of ``cast``, substituted for an empty right endpoint."""
        value = self._sentinel(cast, "maximum")
        logger.debug("Resolved maximum of %s to %r", cast.__name__, value)
        return value

    def _sentinel(self, cast: type[T], edge: str) -> T:
        if issubclass(cast, Bounded):
            return cast.minimum() if edge == "minimum" else cast.maximum()

        sentinels = self._lookup(self._sentinels, cast)
        if sentinels is None:
            raise UnsupportedTypeError(
                cast,
                edge,
                hint=(
                    f"An empty endpoint needs the {edge} value of the type.\n"
                    "Either write the endpoint explicitly, implement the Bounded\n"
                    "protocol (classmethods minimum() and maximum()), or call\n"
                    f"  register_bounds({cast.__name__}, lowest, highest)"
                ),
            )
        minimum, maximum = sentinels
        return minimum if edge == "minimum" else maximum

    @staticmethod
    def _lookup(registry: dict[type, Any], cast: type) -> Any:
        for klass in cast.__mro__:
            if klass in registry:
                return registry[klass]
        return None


def _numeral(cast: Callable[[str], T]) -> Callable[[str], T]:
    """Wrap a numeric constructor to accept invariant-culture numerals only.

    Python's constructors also take digit separators (``1_000``) and
    non-ASCII digits, which are not part of the invariant notation.
    """

    def convert(text: str) -> T:
        if "_" in text or not text.isascii():
            raise ValueError(
                f"{text!r} is not an invariant-culture numeral "
                "(ASCII digits, no '_' separators)"
            )
        return cast(text)

    return convert


_NUMPY_INTEGERS = (
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
)
_NUMPY_FLOATS = (np.float16, np.float32, np.float64)


def _default_resolver() -> EndpointResolver:
    resolver = EndpointResolver()

    resolver.register_converter(int, _numeral(int))
    resolver.register_converter(float, _numeral(float))
    resolver.register_converter(Decimal, _numeral(Decimal))
    resolver.register_converter(Fraction, _numeral(Fraction))
    resolver.register_converter(str, str)
    resolver.register_converter(datetime, datetime.fromisoformat)
    resolver.register_converter(date, date.fromisoformat)
    resolver.register_converter(time, time.fromisoformat)

    resolver.register_bounds(float, -sys.float_info.max, sys.float_info.max)
    resolver.register_bounds(datetime, datetime.min, datetime.max)
    resolver.register_bounds(date, date.min, date.max)
    resolver.register_bounds(time, time.min, time.max)
    resolver.register_bounds(timedelta, timedelta.min, timedelta.max)

    for cls in _NUMPY_INTEGERS:
        info = np.iinfo(cls)
        resolver.register_converter(cls, _numeral(cls))
        resolver.register_bounds(cls, cls(info.min), cls(info.max))
    for cls in _NUMPY_FLOATS:
        info = np.finfo(cls)
        resolver.register_converter(cls, _numeral(cls))
        resolver.register_bounds(cls, cls(info.min), cls(info.max))

    return resolver


default_resolver: EndpointResolver = _default_resolver()


def register_converter(cls: type[T], converter: Callable[[str], T]) -> None:
    """Register ``converter`` for ``cls`` on the default resolver."""
    default_resolver.register_converter(cls, converter)


def register_bounds(cls: type[T], minimum: T, maximum: T) -> None:
    """Register sentinel values for ``cls`` on the default resolver."""
    default_resolver.register_bounds(cls, minimum, maximum)

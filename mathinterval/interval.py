import logging
import re
from dataclasses import InitVar, dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from mathinterval.bounds import BoundKind
from mathinterval.errors import FormatError
from mathinterval.resolve import EndpointResolver, default_resolver
from mathinterval.util import DEFAULT_TEMPLATE, INTERVAL_PATTERN

if TYPE_CHECKING:
    from mathinterval.formatting import IntervalFormatter

logger = logging.getLogger(__name__)

T = TypeVar("T")

_PATTERN = re.compile(INTERVAL_PATTERN)


@dataclass(frozen=True)
class Interval(Generic[T]):
    """An interval between two endpoints of an ordered type.

    ``a_open``/``b_open`` exclude the corresponding endpoint. The endpoints
    are stored as given; an interval with ``a > b`` is allowed and simply
    contains nothing under the usual orderings.
    """

    a: T
    b: T
    a_open: InitVar[bool] = False
    b_open: InitVar[bool] = False
    bound: BoundKind = field(init=False)

    def __post_init__(self, a_open: bool, b_open: bool) -> None:
        object.__setattr__(self, "bound", BoundKind.of(a_open, b_open))

    @classmethod
    def closed(cls, a: T, b: T) -> "Interval[T]":
        """``[a, b]``"""
        return cls(a, b, False, False)

    @classmethod
    def left_open(cls, a: T, b: T) -> "Interval[T]":
        """``(a, b]``"""
        return cls(a, b, True, False)

    @classmethod
    def right_open(cls, a: T, b: T) -> "Interval[T]":
        """``[a, b)``"""
        return cls(a, b, False, True)

    @classmethod
    def open(cls, a: T, b: T) -> "Interval[T]":
        """``(a, b)``"""
        return cls(a, b, True, True)

    def contains(self, value: T) -> bool:
        """Return True if ``value`` lies inside this interval."""
        # (a < x) when a is excluded, else (a <= x)
        if self.bound.left_open:
            after_a = self.a < value  # type: ignore[operator]
        else:
            after_a = self.a <= value  # type: ignore[operator]

        # (x < b) when b is excluded, else (x <= b)
        if self.bound.right_open:
            before_b = self.b > value  # type: ignore[operator]
        else:
            before_b = self.b >= value  # type: ignore[operator]

        return after_a and before_b

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    @classmethod
    def parse(
        cls,
        text: str,
        cast: type[T] = float,  # type: ignore
        *,
        resolver: EndpointResolver | None = None,
    ) -> "Interval[T]":
        """Parse bracket notation such as ``"[0.1, 0.2)"`` or ``"(1, 10]"``.

        An empty left endpoint becomes the minimum value of ``cast`` and an
        empty right endpoint its maximum, so ``"[, 5]"`` reads as "up to 5".

        Args:
            text: Bracket notation; endpoints may not contain commas
            cast: Endpoint type
            resolver: Converter/sentinel registry (default: the package-wide one)

        Raises:
            FormatError: If ``text`` is not bracket notation
            ConversionError: If an endpoint cannot be converted to ``cast``
            UnsupportedTypeError: If ``cast`` has no converter, or no
                minimum/maximum for an empty endpoint
        """
        match = _PATTERN.match(text)
        if match is None:
            raise FormatError(
                f"Cannot parse {text!r} as an interval.\n"
                "Expected '[' or '(', two endpoints separated by one comma, "
                "then ']' or ')'.\n"
                "Examples:\n"
                "  [0.1, 0.2)\n"
                "  (1, 10]\n"
                "  [, 5]  # empty endpoint = minimum/maximum of the type"
            )

        if resolver is None:
            resolver = default_resolver

        left, a_text, b_text, right = match.groups()
        a_text, b_text = a_text.strip(), b_text.strip()

        a = resolver.convert(a_text, cast) if a_text else resolver.minimum(cast)
        b = resolver.convert(b_text, cast) if b_text else resolver.maximum(cast)

        interval = cls(a, b, left == "(", right == ")")
        logger.debug("Parsed %r as %r", text, interval)
        return interval

    def to_string(
        self,
        template: str | None = None,
        formatter: "IntervalFormatter | None" = None,
    ) -> str:
        """Render this interval through ``formatter``.

        ``template`` is a ``str.format`` template whose placeholders all
        receive this interval, e.g. ``"{0:P} to {0:Q}"``. ``None`` selects
        the natural-language default ``"{0:A} {0:B}"``; an empty string
        selects bracket notation.
        """
        # Import at runtime to avoid circular dependency
        from mathinterval.formatting import default_formatter

        if formatter is None:
            formatter = default_formatter
        if template is None:
            template = DEFAULT_TEMPLATE
        elif template == "":
            return formatter.format_interval(self, "")
        return formatter.format(template, self)

    def __str__(self) -> str:
        """Natural-language form, e.g. ``0.1 or more under 0.2``."""
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        from mathinterval.formatting import default_formatter

        return default_formatter.format_interval(self, format_spec)

"""Natural-language rendering of intervals.

IntervalFormatter is a :class:`string.Formatter` whose placeholders accept
an :class:`Interval` and a single-letter specifier:

- ``A`` / ``B``: endpoint a / b as a plain numeral with its phrase
- ``P`` / ``Q``: endpoint a / b as a percentage with its phrase
- empty: bracket notation, e.g. ``[0.1, 0.2)``

Specifiers are case-insensitive. Numerals always carry exactly one
fractional digit. Exact numbers (int, Fraction, Decimal) round half away
from zero; floats keep Python's correctly rounded float formatting.
"""

import numbers
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum
from string import Formatter
from typing import Any

from typing_extensions import override

from mathinterval.errors import FormatError
from mathinterval.interval import Interval
from mathinterval.util import DEFAULT_LOCALE, PRECISION

_QUANTUM = Decimal(1).scaleb(-PRECISION)


class Specifier(Enum):
    ENDPOINT_A = "A"
    ENDPOINT_B = "B"
    PERCENT_A = "P"
    PERCENT_B = "Q"
    CANONICAL = ""

    @classmethod
    def of(cls, text: str) -> "Specifier":
        """Look up a specifier case-insensitively.

        Raises:
            FormatError: If ``text`` is not one of A, B, P, Q or empty
        """
        try:
            return cls(text.upper())
        except ValueError:
            raise FormatError(
                f"{text!r} is not a valid interval format specifier.\n"
                "Use one of A, B, P, Q (case-insensitive).\n"
                "Examples:\n"
                "  f'{interval:A}'  # endpoint a, e.g. '0.1 or more'\n"
                "  f'{interval:Q}'  # endpoint b as percentage, e.g. 'under 20.0%'\n"
                "  f'{interval}'    # bracket notation, e.g. '[0.1, 0.2)'"
            ) from None

    @property
    def on_a(self) -> bool:
        return self in (Specifier.ENDPOINT_A, Specifier.PERCENT_A)

    @property
    def percent(self) -> bool:
        return self in (Specifier.PERCENT_A, Specifier.PERCENT_B)


@dataclass(frozen=True)
class Phrasing:
    """Phrase templates for one locale; ``{value}`` receives the numeral."""

    at_least: str
    exceeds: str
    at_most: str
    under: str


PHRASINGS: dict[str, Phrasing] = {
    "en": Phrasing(
        at_least="{value} or more",
        exceeds="over {value}",
        at_most="{value} or less",
        under="under {value}",
    ),
    "ja": Phrasing(
        at_least="{value}以上",
        exceeds="{value}超",
        at_most="{value}以下",
        under="{value}未満",
    ),
}


class IntervalFormatter(Formatter):
    """Formatter that renders Interval placeholders in natural language.

    Non-interval values are formatted with their own ``__format__`` when
    they define one, and with ``str()`` otherwise.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        super().__init__()
        if locale not in PHRASINGS:
            valid = ", ".join(sorted(PHRASINGS))
            raise ValueError(f"Invalid locale '{locale}'. Valid locales: {valid}")
        self.locale: str = locale
        self.phrasing: Phrasing = PHRASINGS[locale]

    @override
    def format_field(self, value: Any, format_spec: str) -> str:
        if isinstance(value, Interval):
            return self.format_interval(value, format_spec)
        if type(value).__format__ is object.__format__:
            return str(value)
        return format(value, format_spec)

    def format_interval(self, interval: Interval[Any], format_spec: str) -> str:
        """Render ``interval`` for a single specifier (``"A"``, ``"q"``, ``""``...)."""
        specifier = Specifier.of(format_spec)

        if specifier is Specifier.CANONICAL:
            left, right = interval.bound.brackets
            a = self._text(interval.a)
            b = self._text(interval.b)
            return f"{left}{a}, {b}{right}"

        if specifier.on_a:
            value = interval.a
            phrase = (
                self.phrasing.exceeds
                if interval.bound.left_open
                else self.phrasing.at_least
            )
        else:
            value = interval.b
            phrase = (
                self.phrasing.under if interval.bound.right_open else self.phrasing.at_most
            )

        if value is None:
            return ""
        return phrase.format(value=self._numeral(value, specifier.percent))

    def _text(self, value: Any) -> str:
        if value is None:
            return ""
        return self.format_field(value, "")

    def _numeral(self, value: Any, percent: bool) -> str:
        if isinstance(value, (Decimal, numbers.Rational)):
            return self._exact_numeral(value, percent)
        if isinstance(value, numbers.Real):
            spec = f".{PRECISION}%" if percent else f".{PRECISION}f"
            return format(float(value), spec)
        # Not a number; use its own text
        return self._text(value) + ("%" if percent else "")

    def _exact_numeral(
        self, value: Decimal | numbers.Rational, percent: bool
    ) -> str:
        """Render exactly, rounding half away from zero."""
        with localcontext() as ctx:
            if isinstance(value, Decimal):
                number = value
            elif isinstance(value, numbers.Integral):
                number = Decimal(int(value))
            else:
                numerator = int(value.numerator)
                denominator = int(value.denominator)
                # bit_length // 3 over-counts decimal digits
                digits = numerator.bit_length() // 3 + 1
                ctx.prec = max(ctx.prec, digits + PRECISION + 3)
                number = Decimal(numerator) / Decimal(denominator)

            if number.is_finite():
                # Enough digits for the integer part plus the kept fraction
                ctx.prec = max(ctx.prec, number.adjusted() + PRECISION + 5)
                if percent:
                    number = number.scaleb(2)
                number = number.quantize(_QUANTUM, rounding=ROUND_HALF_UP)

        text = format(number, "f")
        return text + "%" if percent else text


default_formatter: IntervalFormatter = IntervalFormatter()

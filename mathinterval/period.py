"""Year/month/day periods.

A Period counts calendar units rather than seconds: one month after
January 31st is the end of February, not 31 days later. Periods are
ordered by their length in months, then by days, and implement the
Bounded protocol so they can be used as interval endpoints with empty
bounds (``Interval.parse("[, P1Y)", Period)``).
"""

import re
from dataclasses import dataclass
from datetime import MAXYEAR, date
from functools import total_ordering
from typing import ClassVar, TypeVar

from dateutil.relativedelta import relativedelta

from mathinterval.resolve import register_converter

D = TypeVar("D", bound=date)

_ISO_PATTERN = re.compile(
    r"^P(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<days>\d+)D)?$",
    re.IGNORECASE,
)


@total_ordering
@dataclass(frozen=True)
class Period:
    years: int = 0
    months: int = 0
    days: int = 0

    ZERO: ClassVar["Period"]
    MAX: ClassVar["Period"]

    def __post_init__(self) -> None:
        if self.years < 0:
            raise ValueError(f"years must be >= 0, got {self.years}")
        if not 0 <= self.months <= 11:
            raise ValueError(
                f"months must be 0-11, got {self.months}\n"
                f"Hint: Carry whole years into years, e.g. "
                f"Period(years={self.years + self.months // 12}, "
                f"months={self.months % 12})"
            )
        if not 0 <= self.days <= 31:
            raise ValueError(f"days must be 0-31, got {self.days}")

    @property
    def duration_in_months(self) -> int:
        return self.years * 12 + self.months

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return (self.duration_in_months, self.days) < (
            other.duration_in_months,
            other.days,
        )

    @classmethod
    def minimum(cls) -> "Period":
        return cls.ZERO

    @classmethod
    def maximum(cls) -> "Period":
        return cls.MAX

    @classmethod
    def parse(cls, text: str) -> "Period":
        """Parse the date part of an ISO-8601 duration, e.g. ``P1Y2M3D``."""
        match = _ISO_PATTERN.match(text.strip())
        if match is None or not any(match.groups()):
            raise ValueError(
                f"Invalid period {text!r}. Expected ISO-8601 form like "
                "'P1Y', 'P6M', 'P1Y2M3D' or 'P0D'"
            )
        parts = {k: int(v) for k, v in match.groupdict().items() if v is not None}
        return cls(**parts)

    def to_relativedelta(self) -> relativedelta:
        return relativedelta(years=self.years, months=self.months, days=self.days)

    def add_to(self, moment: D) -> D:
        """Move ``moment`` forward by this period, clamping to month ends."""
        return moment + self.to_relativedelta()

    def __str__(self) -> str:
        if self == Period.ZERO:
            return "P0D"
        text = "P"
        if self.years:
            text += f"{self.years}Y"
        if self.months:
            text += f"{self.months}M"
        if self.days:
            text += f"{self.days}D"
        return text


Period.ZERO = Period()
Period.MAX = Period(MAXYEAR, 11, 31)

register_converter(Period, Period.parse)

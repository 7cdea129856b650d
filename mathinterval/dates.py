"""Calendar rounding helpers for datetimes.

Every helper returns a new datetime with the same tzinfo as its input, so
naive and timezone-aware values are both supported. Unless stated
otherwise, results fall at 00:00:00 on the day they name.
"""

from datetime import datetime

from dateutil.relativedelta import MO, SU, relativedelta


def drop_time(moment: datetime) -> datetime:
    """Midnight at the start of ``moment``'s day."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def fill_time(moment: datetime) -> datetime:
    """23:59:59.999 on ``moment``'s day."""
    return moment.replace(hour=23, minute=59, second=59, microsecond=999000)


def first_day_of_month(moment: datetime) -> datetime:
    return drop_time(moment).replace(day=1)


def last_day_of_month(moment: datetime) -> datetime:
    """Last day of ``moment``'s month (at midnight, not 23:59)."""
    # day=31 clamps to the month's length
    return drop_time(moment) + relativedelta(day=31)


def sunday(moment: datetime) -> datetime:
    """Most recent Sunday on or before ``moment``."""
    return drop_time(moment) + relativedelta(weekday=SU(-1))


def monday(moment: datetime) -> datetime:
    """Most recent Monday on or before ``moment``."""
    return drop_time(moment) + relativedelta(weekday=MO(-1))


def next_sunday(moment: datetime) -> datetime:
    """First Sunday strictly after ``moment``; a Sunday maps to the next week's."""
    return drop_time(moment) + relativedelta(days=+1, weekday=SU(+1))

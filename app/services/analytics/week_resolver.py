"""ISO-8601 week bucketing for daily revenue records."""
import math
from datetime import date, datetime, timedelta
from typing import NamedTuple, Tuple, Union

DAY_CODES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Used when stepping back from week 1. Years with 53 ISO weeks are not consulted.
LAST_WEEK_OF_PREVIOUS_YEAR = 52


class WeekInfo(NamedTuple):
    year: int
    week_number: int
    day_of_week: str


def resolve_week(value: Union[date, datetime]) -> WeekInfo:
    """Resolve the ISO week-numbering year, ISO week and weekday code of a date.

    A datetime is reduced to its calendar date first, so the time of day never
    moves a record into a neighbouring week.

    Args:
        value: The date (or datetime) to resolve

    Returns:
        WeekInfo with the ISO year (which can differ from ``value.year`` in the
        first and last days of a year), the week number (1-53) and the
        three-letter day code of ``value``
    """
    day = value.date() if isinstance(value, datetime) else value

    # ISO weeks are identified by their Thursday
    thursday = day + timedelta(days=4 - day.isoweekday())
    year = thursday.year
    year_start = date(year, 1, 1)
    week_number = math.ceil(((thursday - year_start).days + 1) / 7)

    return WeekInfo(year=year, week_number=week_number, day_of_week=DAY_CODES[day.weekday()])


def previous_week(year: int, week_number: int) -> Tuple[int, int]:
    """Return the (year, week_number) bucket preceding the given one.

    Week 1 always steps back to week 52 of the previous year.
    """
    week_number -= 1
    if week_number == 0:
        return year - 1, LAST_WEEK_OF_PREVIOUS_YEAR
    return year, week_number

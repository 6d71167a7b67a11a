"""Calendar dates as used by tudu.

A TuduDate names the day a task list belongs to. Dates are written by users
as DD-MM, DD-MM-YYYY or one of the relative words today/tomorrow/yesterday,
and are stored on disk as YYYY-MM-DD.txt files.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional

from tudu.errors import InvalidDate

# Returns the current local date. Injected wherever "today" matters.
Clock = Callable[[], date]

RELATIVE_DAYS = {
    "yesterday": -1,
    "today": 0,
    "tomorrow": 1,
}

_LONG_MONTHS = {1, 3, 5, 7, 8, 10, 12}
_SHORT_MONTHS = {4, 6, 9, 11}


def max_day(month: int) -> Optional[int]:
    """Return the last valid day of a month, or None for an unknown month.

    February always allows the 29th; leap years are not checked.
    """
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    if month == 2:
        return 29
    return None


def is_valid_day(day: int, month: int) -> bool:
    last = max_day(month)
    return last is not None and 1 <= day <= last


def _parse_section(section: str) -> int:
    if not (section.isascii() and section.isdigit()):
        raise InvalidDate(f"'{section}' is not a number")
    return int(section)


@dataclass(frozen=True)
class TuduDate:
    """A calendar day.

    Attributes:
        day: Day of the month (1-31)
        month: Month of the year (1-12)
        year: Four digit year
    """

    day: int
    month: int
    year: int

    @classmethod
    def today(cls, clock: Clock = date.today) -> "TuduDate":
        """Return the current local date as reported by the clock."""
        return cls.from_date(clock())

    @classmethod
    def from_date(cls, value: date) -> "TuduDate":
        return cls(day=value.day, month=value.month, year=value.year)

    @classmethod
    def parse(cls, text: str, clock: Clock = date.today) -> "TuduDate":
        """Parse a date written on the command line.

        Accepted forms are ``today``, ``tomorrow``, ``yesterday``, ``DD-MM``
        (current year), ``DD-MM-YYYY`` and the filename form ``YYYY-MM-DD``.

        Args:
            text: The date as typed by the user
            clock: Source of the current date for relative and partial dates

        Returns:
            The parsed TuduDate

        Raises:
            InvalidDate: If the text is not a date or names an impossible day
        """
        if text in RELATIVE_DAYS:
            return cls.today(clock).shifted(RELATIVE_DAYS[text])

        sections = text.split("-")
        if len(sections) == 2:
            day, month = (_parse_section(s) for s in sections)
            year = clock().year
        elif len(sections) == 3:
            if len(sections[0]) == 4:
                year, month, day = (_parse_section(s) for s in sections)
            else:
                day, month, year = (_parse_section(s) for s in sections)
        else:
            raise InvalidDate(f"'{text}' has {len(sections)} sections")

        if not is_valid_day(day, month):
            raise InvalidDate(f"day {day} is not valid in month {month}")

        return cls(day=day, month=month, year=year)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def shifted(self, days: int) -> "TuduDate":
        """Return the date a number of days before or after this one."""
        return TuduDate.from_date(self.to_date() + timedelta(days=days))

    def to_filename(self) -> str:
        """Return the name of the file holding this date's tasks."""
        return f"{self.year:04}-{self.month:02}-{self.day:02}.txt"

    def __str__(self) -> str:
        return f"{self.day}-{self.month}-{self.year}"

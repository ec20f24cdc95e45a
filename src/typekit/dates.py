"""
Date and DateTime value wrappers.

Thin, comparable wrappers over the standard library's date and datetime with
the parsing rules and calendar helpers the rest of the library relies on.

    Date      calendar date, no time part
    DateTime  date with time, second precision

Parsing tries the formats configured in Settings (date_formats /
datetime_formats) in order unless an explicit format is given.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from abc import abstractmethod
from typing import Any, Optional, Tuple, Union

from .collection import StringCollection
from .config import get_settings
from .errors import InvalidArgumentError
from .interfaces import Comparable


class _CalendarValue(Comparable):
    """Shared behaviour of Date and DateTime."""

    ISO_FORMAT = ""
    SHORT_FORMAT = "%d/%m/%Y"
    LONG_FORMAT = "%d of %B %Y"

    _value: Union[date, datetime]

    @classmethod
    @abstractmethod
    def _formats(cls) -> Tuple[str, ...]:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def _from_parsed(cls, parsed: datetime):
        raise NotImplementedError

    @classmethod
    def parse(cls, value: Any, fmt: Optional[str] = None):
        """
        Build an instance from a loosely typed value.

        Args:
            value: None, an instance, a date/datetime, or a string
            fmt: strptime format; when omitted the configured formats are tried

        Returns:
            New instance, or None when value is None

        Raises:
            InvalidArgumentError: unparseable string or unsupported type
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return cls(value._value)
        if isinstance(value, (date, datetime)):
            return cls(value)
        if isinstance(value, str):
            formats = (fmt,) if fmt else cls._formats()
            for candidate in formats:
                try:
                    parsed = datetime.strptime(value, candidate)
                except ValueError:
                    continue
                return cls._from_parsed(parsed)
            raise InvalidArgumentError(f"Value {value!r} does not represent a valid {cls.__name__.lower()}")
        raise InvalidArgumentError(
            f"Value should be None, string, date/datetime or {cls.__name__}, got {type(value).__name__}"
        )

    @property
    def day(self) -> int:
        return self._value.day

    @property
    def month(self) -> int:
        """Month number, 1 for January."""
        return self._value.month

    @property
    def year(self) -> int:
        return self._value.year

    def set_day(self, day: int) -> None:
        if day < 1 or day > 31:
            raise InvalidArgumentError(f"Day should be between 1 and 31, {day} provided")
        try:
            self._value = self._value.replace(day=day)
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e

    def format(self, fmt: str) -> str:
        return self._value.strftime(fmt)

    def to_iso_string(self) -> str:
        return self.format(self.ISO_FORMAT)

    def to_short_string(self) -> str:
        """Day/month/year, e.g. 05/03/2024."""
        return self.format(self.SHORT_FORMAT)

    def to_long_string(self) -> str:
        """Day and month name, e.g. 05 of March 2024."""
        return self.format(self.LONG_FORMAT)

    def __str__(self) -> str:
        return self.to_iso_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_iso_string()!r})"

    def compare_to(self, other: Any) -> int:
        mine, theirs = self._value, other._value
        return (mine > theirs) - (mine < theirs)


class Date(_CalendarValue):
    """
    Calendar date without a time part.

    Example:
        >>> d = Date.parse("2024-02-28")
        >>> str(d.add_days(1))
        '2024-02-29'
    """

    ISO_FORMAT = "%Y-%m-%d"

    WEEK_DAYS_SHORT = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
    WEEK_DAYS_LONG = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
    MONTHS_SHORT = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
    MONTHS_LONG = (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    )
    MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

    def __init__(self, value: Optional[date] = None):
        if value is None:
            value = date.today()
        elif isinstance(value, datetime):
            value = value.date()
        self._value: date = value

    @classmethod
    def _formats(cls) -> Tuple[str, ...]:
        return get_settings().date_formats

    @classmethod
    def _from_parsed(cls, parsed: datetime) -> "Date":
        return cls(parsed.date())

    def to_date(self) -> date:
        return self._value

    @property
    def week_day(self) -> int:
        """0 for Monday through 6 for Sunday."""
        return self._value.weekday()

    def is_weekend(self) -> bool:
        return self.week_day >= 5

    def add(self, delta: timedelta) -> "Date":
        # only whole days count
        return Date(self._value + timedelta(days=delta.days))

    def sub(self, delta: timedelta) -> "Date":
        return Date(self._value - timedelta(days=delta.days))

    def add_days(self, days: int) -> "Date":
        return self.add(timedelta(days=days))

    def sub_days(self, days: int) -> "Date":
        return self.sub(timedelta(days=days))

    def add_months(self, months: int) -> "Date":
        """Shift by whole months. The day is clamped to the target month's length."""
        index = self._value.year * 12 + (self._value.month - 1) + months
        year, month = divmod(index, 12)
        month += 1
        day = min(self._value.day, self.get_month_length(month, year))
        return Date(date(year, month, day))

    def sub_months(self, months: int) -> "Date":
        return self.add_months(-months)

    def diff(self, other: "Date", absolute: bool = False) -> timedelta:
        """Time from self to other (negative when other is earlier unless absolute)."""
        delta = other.to_date() - self._value
        return abs(delta) if absolute else delta

    def timestamp(self) -> int:
        """Unix timestamp of local midnight."""
        return int(datetime.combine(self._value, time()).timestamp())

    @classmethod
    def get_week_days(cls, long: bool = False) -> StringCollection:
        return StringCollection(cls.WEEK_DAYS_LONG if long else cls.WEEK_DAYS_SHORT)

    @classmethod
    def get_month_names(cls, long: bool = False) -> StringCollection:
        return StringCollection(cls.MONTHS_LONG if long else cls.MONTHS_SHORT)

    @classmethod
    def get_month_name(cls, month_number: int, long: bool = False) -> str:
        cls._check_month(month_number)
        names = cls.MONTHS_LONG if long else cls.MONTHS_SHORT
        return names[month_number - 1]

    @classmethod
    def get_month_length(cls, month_number: int, year: int) -> int:
        """Number of days in a month (1-12), leap-year aware."""
        cls._check_month(month_number)
        if month_number == 2 and calendar.isleap(year):
            return 29
        return cls.MONTH_LENGTHS[month_number - 1]

    @staticmethod
    def _check_month(month_number: int) -> None:
        if month_number < 1 or month_number > 12:
            raise InvalidArgumentError(f"Month number must be between 1 and 12. {month_number} provided")

    @staticmethod
    def mysql_to_human(mysql_date: str) -> str:
        """Convert 'YYYY-MM-DD' to 'DD/MM/YYYY'."""
        bits = mysql_date.split("-")
        if len(bits) != 3:
            raise InvalidArgumentError(f"Expected a YYYY-MM-DD date, got {mysql_date!r}")
        return f"{bits[2]}/{bits[1]}/{bits[0]}"


class DateTime(_CalendarValue):
    """Date and time with second precision."""

    ISO_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self, value: Optional[date] = None):
        if value is None:
            value = datetime.now()
        elif not isinstance(value, datetime):
            value = datetime.combine(value, time())
        self._value: datetime = value.replace(microsecond=0)

    @classmethod
    def _formats(cls) -> Tuple[str, ...]:
        return get_settings().datetime_formats

    @classmethod
    def _from_parsed(cls, parsed: datetime) -> "DateTime":
        return cls(parsed)

    def to_datetime(self) -> datetime:
        return self._value

    @property
    def hour(self) -> int:
        return self._value.hour

    @property
    def minute(self) -> int:
        return self._value.minute

    @property
    def second(self) -> int:
        return self._value.second

    def add(self, delta: timedelta) -> "DateTime":
        return DateTime(self._value + delta)

    def sub(self, delta: timedelta) -> "DateTime":
        return DateTime(self._value - delta)

    def diff(self, other: Any, absolute: bool = False) -> timedelta:
        """Time from self to other. `other` may be anything DateTime.parse accepts."""
        other = DateTime.parse(other)
        if other is None:
            raise InvalidArgumentError("Cannot diff against None")
        delta = other.to_datetime() - self._value
        return abs(delta) if absolute else delta

    def timestamp(self) -> int:
        return int(self._value.timestamp())

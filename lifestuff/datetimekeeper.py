"""A UTC date-time value with calendar-aware arithmetic and date parsing."""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U8_MAX = 0xFF
_U32_MAX = 0xFFFF_FFFF


class DateError(ValueError):
    """Raised when a date cannot be parsed, built or adjusted."""


def _parse_unsigned(text: str, limit: int, message: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise DateError(message)
    value = int(text)
    if value > limit:
        raise DateError(message)
    return value


def _days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def parse_yyyymmdd(text: str, verbose: bool = False) -> tuple[int, int, int]:
    """Split an eight-digit ``yyyymmdd`` string into ``(year, month, day)``."""
    number = _parse_unsigned(text, _U32_MAX, f"Unable to parse '{text}' into a valid number")
    if verbose:
        print(f"String parsed date is: {number}")
    if not 10_000_000 < number < 100_000_000:
        raise DateError(
            "Error parsing `yyyymmdd` date format. "
            f"Invalid number of digits found:{len(str(number))}"
        )
    return number // 10_000, (number // 100) % 100, number % 100


def parse_dmy(text: str, verbose: bool = False) -> tuple[int, int, int]:
    """Split a ``dd/mm/yy[yy]`` or ``dd-mm-yy[yy]`` string into ``(year, month, day)``.

    Two-digit years are taken to be in the 2000s.
    """
    has_slash, has_dash = "/" in text, "-" in text
    if not (has_slash or has_dash) or (has_slash and has_dash):
        raise DateError(
            "Error handling date parsing. Expected delimiter format `-` or `/`. "
            "e.g dd/mm/yy or dd-mm-yyyy"
        )

    tokens = [token.strip() for token in re.split(r"[/-]", text)]
    if verbose:
        print(f"The tokens were {tokens!r}")
    if len(tokens) != 3:
        raise DateError("Error handling date parsing. Found less than 3 tokens to parse")
    day_text, month_text, year_text = tokens

    year = _parse_unsigned(
        year_text,
        _U32_MAX,
        f"Error handling year parsing. Could not convert '{year_text}' to a number",
    )
    if verbose:
        print(f"Year is {year}")

    month = _parse_unsigned(
        month_text,
        _U8_MAX,
        f"Error handling month parsing. Could not convert '{month_text}' to a valid number",
    )
    if not 1 <= month <= 12:
        raise DateError(f"Invalid Month passed {month}. Must be between 0 and 12")
    if verbose:
        print(f"Month is {month}")

    day = _parse_unsigned(day_text, _U8_MAX, f"Unable to convert {day_text} to a valid number")
    if verbose:
        print(f"Date is {day}")

    return (year + 2000 if year < 100 else year), month, day


@dataclass(frozen=True)
class DateTimeKeeper:
    """An immutable UTC moment; every adjustment returns a new keeper."""

    moment: datetime

    def __post_init__(self) -> None:
        if self.moment.tzinfo is None:
            object.__setattr__(self, "moment", self.moment.replace(tzinfo=timezone.utc))
        else:
            object.__setattr__(self, "moment", self.moment.astimezone(timezone.utc))

    # Construction

    @classmethod
    def now(cls) -> DateTimeKeeper:
        """The current moment in UTC."""
        return cls(datetime.now(timezone.utc))

    @classmethod
    def at_midnight(cls) -> DateTimeKeeper:
        """Midnight UTC at the start of today."""
        today = datetime.now(timezone.utc).date()
        return cls(datetime.combine(today, time(), tzinfo=timezone.utc))

    @classmethod
    def from_dmy(cls, day: int, month: int, year: int) -> DateTimeKeeper:
        """Midnight UTC on the given calendar day."""
        try:
            the_date = date(year, month, day)
        except (ValueError, OverflowError) as exc:
            raise DateError(f"Invalid date {year:04}-{month:02}-{day:02}: {exc}") from exc
        return cls(datetime.combine(the_date, time(), tzinfo=timezone.utc))

    @classmethod
    def from_dmy_str(cls, text: str, verbose: bool = False) -> DateTimeKeeper:
        """Build from a ``dd/mm/yyyy`` or ``dd-mm-yyyy`` string."""
        year, month, day = parse_dmy(text, verbose)
        return cls.from_dmy(day, month, year)

    @classmethod
    def from_yyyymmdd_str(cls, text: str, verbose: bool = False) -> DateTimeKeeper:
        """Build from a ``yyyymmdd`` string."""
        year, month, day = parse_yyyymmdd(text, verbose)
        return cls.from_dmy(day, month, year)

    # Access

    @property
    def date(self) -> date:
        return self.moment.date()

    @property
    def time(self) -> time:
        return self.moment.time()

    def __str__(self) -> str:
        d = self.date
        return f"({d.year}, {_MONTH_NAMES[d.month - 1]}, {d.day})"

    # Adjustment

    def _replace(self, failure: str, **fields: int) -> DateTimeKeeper:
        try:
            return DateTimeKeeper(self.moment.replace(**fields))
        except (ValueError, OverflowError) as exc:
            raise DateError(f"{failure}. Err: {exc}") from exc

    def with_date(self, year: int, month: int, day: int) -> DateTimeKeeper:
        """Keep the time of day, move to the given calendar date."""
        return self._replace("Unable to update date", year=year, month=month, day=day)

    def with_year(self, year: int) -> DateTimeKeeper:
        if year <= 0:
            raise DateError(
                "Attempted to set year to a negative value. Hint: Use apply year delta instead"
            )
        return self._replace("Unable to update year", year=year)

    def with_month(self, month: int) -> DateTimeKeeper:
        if not 1 <= month <= 12:
            raise DateError("Invalid month passed. Must be between 1 and 12")
        return self._replace("Unable to update month", month=month)

    def with_day(self, day: int) -> DateTimeKeeper:
        return self._replace("Unable to update day", day=day)

    def with_time(
        self,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
    ) -> DateTimeKeeper:
        """Set the time of day; components that are not given become zero."""
        if hour is None and minute is None and second is None:
            raise DateError(
                "Invalid options passed for update time. "
                "Specify at least one of hour, minute or second"
            )
        return self._replace(
            "Unable to update time", hour=hour or 0, minute=minute or 0, second=second or 0
        )

    def apply_year_delta(self, years_delta: int) -> DateTimeKeeper:
        """Move by whole years, keeping a last-day-of-month date at the month's end."""
        if years_delta > 0:
            if self.date == date.max:
                raise DateError("Cannot increment year on Max Date")
        elif years_delta < 0:
            if self.date == date.min:
                raise DateError("Cannot decrement year on Min Date")
        else:
            return self

        current = self.date
        target_year = current.year + years_delta
        on_last_day = current.day >= 28 and self.is_last_day_of_month()

        if on_last_day:
            try:
                last_day = _days_in_month(target_year, current.month)
            except (ValueError, IndexError) as exc:
                raise DateError(f"Unable to update year. Err: {exc}") from exc
            return self._replace(
                "Unable to update year", year=target_year, month=current.month, day=last_day
            )
        return self._replace("Unable to update year", year=target_year)

    def apply_month_delta(self, months_delta: int) -> DateTimeKeeper:
        """Move by whole months, clamping a month-end date to the target month's end."""
        if months_delta > 0:
            if self.date == date.max:
                raise DateError("Cannot increment month on Max Date")
        elif self.date == date.min:
            raise DateError("Cannot decrement month on Min Date")

        current = self.date
        on_last_day = current.day >= 28 and self.is_last_day_of_month()

        sign = -1 if months_delta < 0 else 1
        whole_years = sign * (abs(months_delta) // 12)
        leftovers = abs(months_delta) % 12
        month = current.month

        if months_delta > 0:
            if month + leftovers > 12:
                whole_years += 1
                new_month = leftovers - (12 - month)
            else:
                new_month = month + leftovers
        elif month - leftovers < 1:
            whole_years -= 1
            new_month = 12 - (leftovers - month)
        else:
            new_month = month - leftovers

        # The month length is judged in the current year, not the target one.
        last_day_of_new_month = _days_in_month(current.year, new_month)

        shifted = self.apply_year_delta(whole_years)
        if on_last_day and current.day > last_day_of_new_month:
            shifted = shifted.with_day(last_day_of_new_month)
        return shifted._replace("Unable to update month", month=new_month)

    def next_year(self) -> DateTimeKeeper:
        """1 January of the following year, same time of day."""
        if self.date == date.max:
            raise DateError("Cannot increment year on Max Date")
        return self._replace("Unable to update year", year=self.date.year + 1, month=1, day=1)

    def next_month(self) -> DateTimeKeeper:
        """The first day of the following month, same time of day."""
        if self.date == date.max:
            raise DateError("Cannot increment Month on Max Date")
        current = self.date
        if current.month == 12:
            return self._replace(
                "Unable to update month", year=current.year + 1, month=1, day=1
            )
        return self._replace("Unable to update month", month=current.month + 1, day=1)

    # Arithmetic

    def __sub__(self, other: DateTimeKeeper) -> timedelta:
        if not isinstance(other, DateTimeKeeper):
            return NotImplemented
        return self.moment - other.moment

    def __add__(self, delta: timedelta) -> DateTimeKeeper:
        if not isinstance(delta, timedelta):
            return NotImplemented
        return DateTimeKeeper(self.moment + delta)

    __radd__ = __add__

    # Queries

    def is_last_day_of_month(self) -> bool:
        d = self.date
        return d.day == _days_in_month(d.year, d.month)

    def days_left_in_year(self) -> int:
        d = self.date
        days_in_year = 366 if calendar.isleap(d.year) else 365
        return days_in_year - d.timetuple().tm_yday

    def days_passed_in_year(self) -> int:
        return self.date.timetuple().tm_yday - 1

    def iso_week(self) -> int:
        return self.date.isocalendar()[1]


def date_from_arg(text: str | None, verbose: bool = False) -> DateTimeKeeper:
    """Parse a command-line date; ``None`` means midnight today."""
    if text is None:
        return DateTimeKeeper.at_midnight()
    if "/" in text or "-" in text:
        return DateTimeKeeper.from_dmy_str(text, verbose)
    return DateTimeKeeper.from_yyyymmdd_str(text, verbose)
"""Date arithmetic: adding periods, diffing dates and ordinal information."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta
from enum import Enum

from lifestuff.datetimekeeper import DateError, DateTimeKeeper, date_from_arg


class TimePeriod(Enum):
    """A period of time that can be added to a date."""

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"

    @classmethod
    def parse(cls, text: str) -> TimePeriod:
        """Look up a period by its name or one of its aliases."""
        try:
            return _PERIOD_NAMES[text]
        except KeyError:
            choices = ", ".join(sorted(_PERIOD_NAMES))
            raise ValueError(
                f"Invalid time period {text!r}; expected one of: {choices}"
            ) from None


class DateDuration(Enum):
    """A unit in which the distance between two dates is reported."""

    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    YEARS = "years"

    def __str__(self) -> str:
        return self.value.capitalize()


_PERIOD_NAMES: dict[str, TimePeriod] = {
    "years": TimePeriod.YEARS,
    "y": TimePeriod.YEARS,
    "yr": TimePeriod.YEARS,
    "yrs": TimePeriod.YEARS,
    "months": TimePeriod.MONTHS,
    "m": TimePeriod.MONTHS,
    "mon": TimePeriod.MONTHS,
    "weeks": TimePeriod.WEEKS,
    "w": TimePeriod.WEEKS,
    "wk": TimePeriod.WEEKS,
    "wks": TimePeriod.WEEKS,
    "days": TimePeriod.DAYS,
    "d": TimePeriod.DAYS,
    "hours": TimePeriod.HOURS,
    "h": TimePeriod.HOURS,
    "hr": TimePeriod.HOURS,
    "hrs": TimePeriod.HOURS,
    "minutes": TimePeriod.MINUTES,
    "min": TimePeriod.MINUTES,
    "mins": TimePeriod.MINUTES,
    "seconds": TimePeriod.SECONDS,
    "s": TimePeriod.SECONDS,
    "secs": TimePeriod.SECONDS,
}

_FIXED_PERIODS: dict[TimePeriod, str] = {
    TimePeriod.WEEKS: "weeks",
    TimePeriod.DAYS: "days",
    TimePeriod.HOURS: "hours",
    TimePeriod.MINUTES: "minutes",
    TimePeriod.SECONDS: "seconds",
}


def add_to_date(
    date_text: str | None,
    value: int,
    period: TimePeriod,
    verbose: bool = False,
) -> DateTimeKeeper:
    """Add ``value`` periods to a date given on the command line (``None`` is today)."""
    if verbose:
        print(f"Args were: date={date_text!r}, val={value}, period={period.name}")

    start = date_from_arg(date_text, verbose)
    if period is TimePeriod.YEARS:
        return start.apply_year_delta(value)
    if period is TimePeriod.MONTHS:
        return start.apply_month_delta(value)
    try:
        return start + timedelta(**{_FIXED_PERIODS[period]: value})
    except OverflowError as exc:
        raise DateError(f"Adding {value} {period.value} is out of range") from exc


def format_added(result: DateTimeKeeper) -> str:
    """Render a date together with its time of day."""
    moment = result.time
    return f"{result} ({moment.hour:02}:{moment.minute:02}:{moment.second:02})"


def format_breakdown(count: int, duration: DateDuration | str) -> str:
    """Describe a count of whole durations, singular when the count is one."""
    label = str(duration)
    if count == 1 and label.endswith("s"):
        label = label[:-1]
    return f"{count} full {label}"


def diff_dates(
    first_text: str,
    second_text: str | None,
    durations: Iterable[DateDuration],
    verbose: bool = False,
) -> list[str]:
    """Describe the distance between two dates in each requested unit."""
    first = date_from_arg(first_text, verbose)
    second = date_from_arg(second_text, verbose)
    if verbose:
        print(f"Doing a date diff with {first} and {second}")

    gap = abs(first - second)
    whole_days = gap.days
    counts = {
        DateDuration.DAYS: whole_days,
        DateDuration.HOURS: gap // timedelta(hours=1),
        DateDuration.WEEKS: gap // timedelta(weeks=1),
        DateDuration.YEARS: whole_days // 365,
    }
    return [format_breakdown(counts[duration], duration) for duration in durations]


def ordinal_report(today: DateTimeKeeper | None = None) -> list[str]:
    """Lines describing where a date (by default now) sits within its year."""
    if today is None:
        today = DateTimeKeeper.now()
    return [
        f"Today is {today}",
        f"{today.days_passed_in_year()} days passed in the year",
        f"{today.days_left_in_year()} days remaining in the year",
        f"This is week {today.iso_week()} of the year ",
    ]
"""Mortgage interest projection with daily accrual and annual overpayments."""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from datetime import date, timedelta

from lifestuff.datetimekeeper import DateTimeKeeper, date_from_arg


def _format_amount(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def _calendar_date(day: date) -> str:
    return f"({day.year}, {calendar.month_name[day.month]}, {day.day})"


@dataclass(frozen=True)
class InterestSummary:
    """The state of the mortgage at the end of a projected period."""

    end_date: date
    principal: float
    total_paid: float
    interest_paid: float

    def describe(self) -> str:
        return (
            f"Current date is {self.end_date.isoformat()}, "
            f"Principal is now : {_format_amount(self.principal)}, "
            f"Total paid is {_format_amount(self.total_paid)}. "
            f"{self.interest_paid:.2f} paid in interest"
        )


def calculate_interest_for_period(
    start: DateTimeKeeper,
    end: DateTimeKeeper,
    monthly_payment: float,
    interest_rate: float,
    principal: float,
    max_repayment_pct: int | None,
    annual_downpayment: float | None,
    verbose: bool = False,
) -> InterestSummary:
    """Project the mortgage day by day from ``start`` for as many days as lie before ``end``.

    ``interest_rate`` is a fraction (0.05 for 5%). On the first of each month the
    monthly payment is made; on 1 January an annual overpayment is made as well,
    either the fixed ``annual_downpayment`` or ``max_repayment_pct`` percent of the
    outstanding principal. Every other day accrues simple daily interest.
    """
    using_percentage = annual_downpayment is None
    if using_percentage and max_repayment_pct is None:
        raise ValueError("Either a maximum repayment percentage or an annual downpayment is required")

    current = start.date
    total_days = abs(end - start).days
    accrued = 0.0
    is_leap = calendar.isleap(current.year)
    total_paid = 0.0
    original_principal = principal

    for _ in range(total_days):
        if current.day == 1:
            if verbose:
                print(
                    f"Beginning of the month: {_calendar_date(current)}. "
                    f"Accrued interest last month was {accrued:.2f}"
                )
            accrued = 0.0
            if current.month == 1:
                is_leap = calendar.isleap(current.year)
                if verbose:
                    print(f"Beginning of the year: {_calendar_date(current)} ")
                if using_percentage:
                    repayment = principal * (max_repayment_pct / 100.0)
                else:
                    repayment = annual_downpayment
                total_paid += repayment
                principal -= repayment
                if verbose:
                    print(f"The max repayment number is {_format_amount(repayment)}")
                    print(f"After yearly payment the principal is now {_format_amount(principal)}")
            total_paid += monthly_payment
            principal -= monthly_payment
        else:
            daily_interest = interest_rate * principal / (366.0 if is_leap else 365.0)
            accrued += daily_interest
            principal += daily_interest
        current += timedelta(days=1)

    return InterestSummary(
        end_date=current,
        principal=principal,
        total_paid=total_paid,
        interest_paid=total_paid - (original_principal - principal),
    )


def handle_interest(
    principal: float,
    interest_rate: float,
    repayment: float,
    max_repayment_pct: int | None,
    annual_downpayment: float | None,
    end_date: str,
    verbose: bool = False,
) -> InterestSummary:
    """Project a mortgage from today until ``end_date``; ``interest_rate`` is in percent."""
    if verbose:
        print(
            f"Interest Args: principal={principal}, interest_rate={interest_rate}, "
            f"repayment={repayment}, max_repayment_pct={max_repayment_pct}, "
            f"annual_downpayment={annual_downpayment}, end_date={end_date!r}"
        )
    if not principal > 0:
        raise ValueError(
            f"Can only calculate interest on a positive principal. {principal} was passed in"
        )

    mortgage_end = date_from_arg(end_date, verbose)
    mortgage_start = date_from_arg(None, verbose)

    return calculate_interest_for_period(
        mortgage_start,
        mortgage_end,
        repayment,
        interest_rate / 100.0,
        principal,
        max_repayment_pct,
        annual_downpayment,
        verbose,
    )
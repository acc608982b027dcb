"""Vehicle mileage tracking against a fixed yearly allowance."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal

from termcolor import colored

from lifestuff.datetimekeeper import DateTimeKeeper

_ALLOWANCE_START = (23, 3, 2024)
_YEARLY_ALLOWANCE = 8000.0
_DAYS_PER_YEAR = 365.0
_INITIAL_MILEAGE = 8300.0
_COST_PER_MILE = 0.0678


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _f32_display(value: float) -> str:
    """Render a single-precision value with the fewest digits that identify it."""
    value = _f32(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = f"{value:.8e}"
    for precision in range(9):
        candidate = f"{value:.{precision}e}"
        if _f32(float(candidate)) == value:
            text = candidate
            break
    rendered = format(Decimal(text), "f")
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return rendered


@dataclass(frozen=True)
class MileageReport:
    """How a vehicle's mileage compares with the mileage projected for today."""

    mileage: int
    projected_mileage: float
    under_allowance: bool
    mileage_delta: float
    daily_delta: float
    cost: float

    def lines(self) -> list[str]:
        """Human-readable lines describing the report."""
        status = (
            colored("under", "green", attrs=["italic"])
            if self.under_allowance
            else colored("over", "red", attrs=["bold"])
        )
        result = [
            f"Current mileage is {self.mileage}, projected mileage is "
            f"{_f32_display(self.projected_mileage)}. Current mileage is {status} by "
            f"{_f32_display(self.daily_delta)} days or "
            f"{_f32_display(self.mileage_delta)} miles"
        ]
        if not self.under_allowance:
            result.append(f"Cost of going over is £{self.cost:.2f}")
        return result


def mileage_report(mileage: int, today: DateTimeKeeper | None = None) -> MileageReport:
    """Compare ``mileage`` with the allowance accrued up to ``today`` (midnight today by default)."""
    if mileage < 0:
        raise ValueError(f"Mileage must not be negative, got {mileage}")
    if today is None:
        today = DateTimeKeeper.at_midnight()
    start = DateTimeKeeper.from_dmy(*_ALLOWANCE_START)

    days_since_start = _f32(float(math.trunc((today - start) / timedelta(days=1))))
    per_day = _f32(_YEARLY_ALLOWANCE / _DAYS_PER_YEAR)
    projected = _f32(_INITIAL_MILEAGE + math.ceil(_f32(days_since_start * per_day)))
    current = _f32(float(mileage))

    under = current < projected
    delta = _f32(abs(projected - current))
    daily_delta = _f32(abs(float(math.ceil(_f32(delta / per_day)))))
    cost = _f32(delta * _f32(_COST_PER_MILE))

    return MileageReport(
        mileage=mileage,
        projected_mileage=projected,
        under_allowance=under,
        mileage_delta=delta,
        daily_delta=daily_delta,
        cost=cost,
    )
import re

import pytest

from lifestuff.datetimekeeper import DateTimeKeeper
from lifestuff.mileage import mileage_report

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(lines):
    return [_ANSI.sub("", line) for line in lines]


@pytest.fixture
def start_day():
    return DateTimeKeeper.from_dmy(23, 3, 2024)


def test_under_allowance(start_day):
    report = mileage_report(7000, start_day)
    assert report.under_allowance is True
    assert report.projected_mileage == 8300
    assert report.mileage_delta == 1300
    assert report.daily_delta == 60
    assert _plain(report.lines()) == [
        "Current mileage is 7000, projected mileage is 8300. "
        "Current mileage is under by 60 days or 1300 miles"
    ]


def test_over_allowance(start_day):
    report = mileage_report(9000, start_day)
    assert report.under_allowance is False
    assert report.mileage_delta == 700
    lines = _plain(report.lines())
    assert len(lines) == 2
    assert "over by" in lines[0]


def test_zero_mileage(start_day):
    report = mileage_report(0, start_day)
    assert report.under_allowance is True
    assert report.mileage_delta == 8300
    assert report.daily_delta == 379
    assert len(report.lines()) == 1


def test_very_large_mileage(start_day):
    report = mileage_report(2**32 - 1, start_day)
    assert report.under_allowance is False
    lines = _plain(report.lines())
    assert lines[0].startswith("Current mileage is 4294967295, projected mileage is 8300.")
    assert lines[1].startswith("Cost of going over is £")


def test_cost_small_overage(start_day):
    report = mileage_report(8400, start_day)
    assert _plain(report.lines()) == [
        "Current mileage is 8400, projected mileage is 8300. "
        "Current mileage is over by 5 days or 100 miles",
        "Cost of going over is £6.78",
    ]


def test_cost_large_overage(start_day):
    report = mileage_report(9300, start_day)
    assert _plain(report.lines())[1] == "Cost of going over is £67.80"


def test_no_cost_when_under(start_day):
    report = mileage_report(8000, start_day)
    lines = report.lines()
    assert len(lines) == 1
    assert "Cost" not in lines[0]


def test_projection_grows_with_days():
    report = mileage_report(8520, DateTimeKeeper.from_dmy(2, 4, 2024))
    assert report.projected_mileage == 8520
    assert report.mileage_delta == 0
    assert report.under_allowance is False


def test_default_today_is_after_start():
    report = mileage_report(8000)
    assert report.under_allowance is True
    assert report.projected_mileage >= 8300


def test_negative_mileage_rejected(start_day):
    with pytest.raises(ValueError):
        mileage_report(-1, start_day)
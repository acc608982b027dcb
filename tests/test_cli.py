import pytest
import responses

from lifestuff.cli import build_parser, main
from lifestuff.currency import CURRENCY_URL
from lifestuff.dates import DateDuration, TimePeriod
from lifestuff.ddg import DDG_ADDRESSES_URL
from lifestuff.units import AreaUnit, DistanceUnit


def _output_lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_parser_resolves_unit_aliases():
    args = build_parser().parse_args(["convert", "area", "--from", "a", "2", "--to", "sqm"])
    assert args.from_unit is AreaUnit.ACRES
    assert args.to == [AreaUnit.SQUARE_METRES]
    assert args.value == 2.0
    assert args.verbose is False


def test_parser_verbose_after_subcommand():
    args = build_parser().parse_args(["mileage", "-m", "5", "-v"])
    assert args.verbose is True
    assert args.mileage == 5


def test_parser_add_period_alias_and_negative_value():
    args = build_parser().parse_args(["dates", "add", "--date", "31/01/2023", "-3", "mon"])
    assert args.period is TimePeriod.MONTHS
    assert args.val == -3
    assert args.date == "31/01/2023"


def test_parser_diff_durations_collected():
    args = build_parser().parse_args(["dates", "diff", "01/01/2023", "--to", "days", "--to", "years"])
    assert args.to == [DateDuration.DAYS, DateDuration.YEARS]
    assert args.date2 is None


def test_convert_area_output(capsys):
    assert main(["convert", "area", "--from", "acres", "1", "--to", "metres"]) == 0
    assert _output_lines(capsys) == ["1 Acres = 4046.856422 SquareMetres"]


def test_convert_distance_one_line_per_target(capsys):
    main(["convert", "distance", "--from", "miles", "1", "--to", "yards", "--to", "feet"])
    lines = _output_lines(capsys)
    assert len(lines) == 2
    assert lines[0].startswith("1 Miles = ")
    assert lines[0].endswith(" Yards")
    assert lines[1].endswith(" Feet")


def test_convert_identity_keeps_value(capsys):
    main(["convert", "distance", "--from", "m", "2.5", "--to", "metres"])
    assert _output_lines(capsys) == ["2.5 Metres = 2.5 Metres"]


def test_invalid_unit_is_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["convert", "area", "--from", "parsecs", "1", "--to", "metres"])
    assert info.value.code == 2


def test_missing_subcommand_is_usage_error():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "0.2.0" in capsys.readouterr().out


def test_dates_add_months(capsys):
    main(["dates", "add", "--date", "31/01/2023", "6", "months"])
    assert _output_lines(capsys) == ["(2023, July, 31) (00:00:00)"]


def test_dates_diff_output(capsys):
    main(["dates", "diff", "01/01/2023", "08/01/2023", "--to", "days", "--to", "weeks"])
    assert _output_lines(capsys) == ["7 full Days", "1 full Week"]


def test_dates_diff_requires_to():
    with pytest.raises(SystemExit) as info:
        main(["dates", "diff", "01/01/2023"])
    assert info.value.code == 2


def test_dates_bad_date_reports_error(capsys):
    assert main(["dates", "add", "--date", "32/01/2023", "1", "days"]) == 0
    out = capsys.readouterr().out
    assert "Invalid date" in out


def test_ordinal_prints_four_lines(capsys):
    main(["dates", "ordinal"])
    lines = _output_lines(capsys)
    assert len(lines) == 4
    assert lines[0].startswith("Today is (")
    assert lines[3].startswith("This is week ")


def test_interest_zero_principal_reports_error(capsys):
    main(["interest", "-p", "0", "-i", "5", "--repayment", "2000", "-m", "10", "-e", "31/12/2025"])
    assert "Can only calculate interest on a positive principal" in capsys.readouterr().out


def test_interest_invalid_end_date_reports_error(capsys):
    main(["interest", "-p", "100000", "-i", "5", "--repayment", "2000", "-m", "10",
          "-e", "invalid_date"])
    assert "Unable to parse 'invalid_date'" in capsys.readouterr().out


def test_interest_overpayment_options_conflict():
    with pytest.raises(SystemExit) as info:
        main(["interest", "-p", "1000", "-i", "5", "--repayment", "20", "-m", "10",
              "-a", "5000", "-e", "31/12/2025"])
    assert info.value.code == 2


def test_interest_requires_an_overpayment_option():
    with pytest.raises(SystemExit) as info:
        main(["interest", "-p", "1000", "-i", "5", "--repayment", "20", "-e", "31/12/2025"])
    assert info.value.code == 2


def test_interest_percentage_out_of_range():
    with pytest.raises(SystemExit) as info:
        main(["interest", "-p", "1000", "-i", "5", "--repayment", "20", "-m", "300",
              "-e", "31/12/2025"])
    assert info.value.code == 2


def test_interest_projection_line(capsys):
    main(["interest", "-p", "100000", "-i", "5", "--repayment", "2000",
          "--annual-limit", "10", "-e", "31/12/2099"])
    out = capsys.readouterr().out
    assert out.startswith("Current date is ")
    assert "paid in interest" in out


def test_currency_invalid_source_reports_error(capsys):
    main(["currency", "-f", "INVALID", "-a", "100", "-t", "EUR"])
    assert 'Invalid currency "INVALID" passed you Jabroni!' in capsys.readouterr().out


def test_currency_invalid_target_reports_error(capsys):
    main(["currency", "-f", "USD", "-a", "100", "-t", "INVALID"])
    assert "Invalid destination currency passed" in capsys.readouterr().out


def test_currency_success(capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.POST,
            CURRENCY_URL,
            json={"success": {"message": "ok", "rate": 0.5}},
            status=200,
        )
        main(["currency", "-f", "USD", "-a", "100", "-t", "EUR", "-t", "GBP"])
    lines = _output_lines(capsys)
    assert lines == ['"ok" at a rate of 1 USD = 0.5 EUR', '"ok" at a rate of 1 USD = 0.5 GBP']


def test_currency_bad_status_reports_error(capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, CURRENCY_URL, json={}, status=500)
        main(["currency", "-f", "USD", "-a", "100", "-t", "EUR"])
    assert "Got a bad response code from currency API: 500" in capsys.readouterr().out


@pytest.mark.parametrize("value", ["0", "7000", "9000", "4294967295"])
def test_mileage_reports(capsys, value):
    assert main(["mileage", "-m", value]) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"Current mileage is {value}, projected mileage is ")


def test_mileage_rejects_negative():
    with pytest.raises(SystemExit) as info:
        main(["mileage", "-m", "-5"])
    assert info.value.code == 2


def test_verbose_prints_arguments(capsys):
    main(["-v", "convert", "area", "--from", "sqft", "1", "--to", "inches"])
    lines = _output_lines(capsys)
    assert lines[0].startswith("CLI Args: Namespace(")
    assert lines[-1] == "1 SquareFeet = 144 SqInches"


def test_ddg_convert_with_sender(capsys, monkeypatch):
    monkeypatch.setenv("DDG_BEARER", "token")
    main(["ddg", "convert", "-r", "test@example.com", "-s", "alias@example.com"])
    out = capsys.readouterr().out
    assert "test_at_example.com_alias@example.com" in out


def test_ddg_convert_needs_bearer(capsys, monkeypatch):
    monkeypatch.delenv("DDG_BEARER", raising=False)
    main(["ddg", "convert", "-r", "test@example.com", "-d"])
    assert "Unable to get `DDG_BEARER` environment variable" in capsys.readouterr().out


def test_ddg_convert_requires_sender_option():
    with pytest.raises(SystemExit) as info:
        main(["ddg", "convert", "-r", "test@example.com"])
    assert info.value.code == 2


def test_ddg_convert_rejects_invalid_recipient():
    with pytest.raises(SystemExit) as info:
        main(["ddg", "convert", "-r", "invalid-email", "-d"])
    assert info.value.code == 2


def test_ddg_convert_sender_options_conflict():
    with pytest.raises(SystemExit) as info:
        main(["ddg", "convert", "-r", "test@example.com", "-d", "-g"])
    assert info.value.code == 2


def test_ddg_generate(capsys, monkeypatch):
    monkeypatch.setenv("DDG_BEARER", "token")
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, DDG_ADDRESSES_URL, json={"address": "fresh"}, status=201)
        main(["ddg", "generate"])
        auth_header = rsps.calls[0].request.headers["Authorization"]
    assert _output_lines(capsys) == ['New address to use is "fresh"']
    assert auth_header == "Bearer token"


def test_ddg_convert_generate(capsys, monkeypatch):
    monkeypatch.setenv("DDG_BEARER", "token")
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, DDG_ADDRESSES_URL, json={"address": "fresh"}, status=201)
        main(["ddg", "convert", "-r", "test@example.com", "-g"])
        call_count = len(rsps.calls)
    assert "test_at_example.com_fresh" in capsys.readouterr().out
    assert call_count == 1


def test_distance_parser_rejects_area_only_alias():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["convert", "distance", "--from", "sqft", "1", "--to", "m"])
    args = build_parser().parse_args(["convert", "distance", "--from", "ft", "1", "--to", "m"])
    assert args.from_unit is DistanceUnit.FEET
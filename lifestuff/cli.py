"""Command-line entry point for the lifestyle toolkit."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from lifestuff import currency, ddg, dates, interest, mileage, units
from lifestuff.dates import DateDuration, TimePeriod

_VERSION = "0.2.0"
_U8_MAX = 0xFF
_U32_MAX = 0xFFFF_FFFF


def _wrap(parse: Callable[[str], Any], name: str) -> Callable[[str], Any]:
    def convert(text: str) -> Any:
        try:
            return parse(text)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None

    convert.__name__ = name
    return convert


def _non_negative_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"negative values are not allowed: {text!r}")
    return value


def _bounded_int(limit: int, name: str) -> Callable[[str], int]:
    def convert(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
        if not 0 <= value <= limit:
            raise argparse.ArgumentTypeError(f"{value} is not in 0..={limit}")
        return value

    convert.__name__ = name
    return convert


def _duration(text: str) -> DateDuration:
    try:
        return DateDuration(text)
    except ValueError:
        choices = ", ".join(member.value for member in DateDuration)
        raise argparse.ArgumentTypeError(
            f"Invalid duration {text!r}; expected one of: {choices}"
        ) from None


_area_unit = _wrap(units.AreaUnit.parse, "area unit")
_distance_unit = _wrap(units.DistanceUnit.parse, "distance unit")
_time_period = _wrap(TimePeriod.parse, "time period")
_email = _wrap(ddg.validate_email, "email")
_u8 = _bounded_int(_U8_MAX, "percentage")
_u32 = _bounded_int(_U32_MAX, "mileage")


# Handlers: each returns the lines to print.


def _run_conversion(args: argparse.Namespace) -> Iterable[str]:
    return units.perform_conversion(args.from_unit, args.value, args.to)


def _run_add(args: argparse.Namespace) -> Iterable[str]:
    result = dates.add_to_date(args.date, args.val, args.period, args.verbose)
    return [dates.format_added(result)]


def _run_diff(args: argparse.Namespace) -> Iterable[str]:
    return dates.diff_dates(args.date1, args.date2, args.to, args.verbose)


def _run_ordinal(args: argparse.Namespace) -> Iterable[str]:
    return dates.ordinal_report()


def _run_interest(args: argparse.Namespace) -> Iterable[str]:
    summary = interest.handle_interest(
        args.principal,
        args.interest_rate,
        args.repayment,
        args.max_repayment_pct,
        args.annual_downpayment,
        args.end_date,
        args.verbose,
    )
    return [summary.describe()]


def _run_currency(args: argparse.Namespace) -> Iterable[str]:
    return currency.convert_currency(args.source, args.amt, args.to, args.verbose)


def _run_mileage(args: argparse.Namespace) -> Iterable[str]:
    return mileage.mileage_report(args.mileage).lines()


def _run_ddg_generate(args: argparse.Namespace) -> Iterable[str]:
    address = ddg.generate_ddg_address(ddg.create_session(), ddg.DDG_ADDRESSES_URL, args.verbose)
    return [f'New address to use is "{address}"']


def _run_ddg_convert(args: argparse.Namespace) -> Iterable[str]:
    session = ddg.create_session()
    ddg.perform_address_conversion(
        args.recipient,
        args.sender,
        args.use_default,
        args.generate,
        session,
        ddg.DDG_ADDRESSES_URL,
        args.verbose,
    )
    return []


def build_parser() -> argparse.ArgumentParser:
    """The full command-line parser with every subcommand."""
    verbose_flag = argparse.ArgumentParser(add_help=False)
    verbose_flag.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable verbose output",
    )

    parser = argparse.ArgumentParser(
        prog="lifestuff",
        description="Lifestyle library!",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    # convert
    convert = commands.add_parser("convert", parents=[verbose_flag], help="Unit conversions")
    convert_types = convert.add_subparsers(dest="convert_type", required=True)

    area = convert_types.add_parser("area", parents=[verbose_flag], help="Area Conversions")
    area.add_argument("--from", dest="from_unit", type=_area_unit, required=True,
                      help="Unit to convert from")
    area.add_argument("value", type=float, help="Value to convert")
    area.add_argument("--to", type=_area_unit, action="append", required=True,
                      help="Unit to convert to")
    area.set_defaults(handler=_run_conversion)

    distance = convert_types.add_parser(
        "distance", parents=[verbose_flag], help="Distance Conversions"
    )
    distance.add_argument("--from", dest="from_unit", type=_distance_unit, required=True,
                          help="Unit to convert from")
    distance.add_argument("value", type=float, help="Value to convert")
    distance.add_argument("--to", type=_distance_unit, action="append", required=True,
                          help="Unit to convert to")
    distance.set_defaults(handler=_run_conversion)

    # dates
    date_ops = commands.add_parser("dates", parents=[verbose_flag], help="Date Operations")
    date_options = date_ops.add_subparsers(dest="operation_type", required=True)

    add = date_options.add_parser(
        "add", parents=[verbose_flag], help="Add a time period to a given date"
    )
    add.add_argument("--date", help="Date to add time period to")
    add.add_argument("val", type=int, help="Amount of time period to add to date")
    add.add_argument("period", type=_time_period, help="Time period to add to date")
    add.set_defaults(handler=_run_add)

    diff = date_options.add_parser("diff", parents=[verbose_flag], help="Diff Two Dates")
    diff.add_argument("date1", help="Date to perform diff operations on")
    diff.add_argument("date2", nargs="?", default=None,
                      help="Optional date to diff with. Defaults to current date.")
    diff.add_argument("--to", type=_duration, action="append", required=True,
                      help="Time duration to use for diff output")
    diff.set_defaults(handler=_run_diff)

    ordinal = date_options.add_parser(
        "ordinal", parents=[verbose_flag], help="Information about the ordinal date"
    )
    ordinal.set_defaults(handler=_run_ordinal)

    # interest
    interest_cmd = commands.add_parser(
        "interest", parents=[verbose_flag], help="Interest Calculations"
    )
    interest_cmd.add_argument("-p", "--principal", type=_non_negative_float, required=True,
                              help="Principal left on mortgage")
    interest_cmd.add_argument("-i", "--interest-rate", type=_non_negative_float, required=True,
                              help="Interest rate (%%)")
    interest_cmd.add_argument("--repayment", type=_non_negative_float, required=True,
                              help="Monthly payment amount")
    overpayment = interest_cmd.add_mutually_exclusive_group(required=True)
    overpayment.add_argument("-m", "--max-repayment-pct", "--annual-limit",
                             dest="max_repayment_pct", type=_u8, default=None,
                             help="Max annual repayment percentage (%%)")
    overpayment.add_argument("-a", "--annual-downpayment", dest="annual_downpayment",
                             type=_non_negative_float, default=None,
                             help="Max annual supplementary downpayment")
    interest_cmd.add_argument("-e", "--end-date", required=True,
                              help="Mortgage calculation end date (dd/mm/yyyy)")
    interest_cmd.set_defaults(handler=_run_interest)

    # currency
    currency_cmd = commands.add_parser(
        "currency", parents=[verbose_flag], help="Currency Conversion Operations"
    )
    currency_cmd.add_argument("-f", "--from", dest="source", required=True,
                              help="Currency to convert from")
    currency_cmd.add_argument("-a", "--amt", type=_non_negative_float, required=True,
                              help="Amount to convert")
    currency_cmd.add_argument("-t", "--to", action="append", required=True,
                              help="Currency to convert to")
    currency_cmd.set_defaults(handler=_run_currency)

    # mileage
    mileage_cmd = commands.add_parser(
        "mileage", parents=[verbose_flag], help="Mileage Calculations"
    )
    mileage_cmd.add_argument("-m", "--mileage", type=_u32, required=True,
                             help="Current mileage of the vehicle")
    mileage_cmd.set_defaults(handler=_run_mileage)

    # ddg
    ddg_cmd = commands.add_parser("ddg", parents=[verbose_flag], help="DuckDuckGo Address")
    ddg_options = ddg_cmd.add_subparsers(dest="operation_type", required=True)

    generate = ddg_options.add_parser(
        "generate", parents=[verbose_flag], help="Generates a Duckduckgo email alias address"
    )
    generate.set_defaults(handler=_run_ddg_generate)

    ddg_convert = ddg_options.add_parser(
        "convert",
        parents=[verbose_flag],
        help="Converts a regular email address to be used by Duckduckgo as a recipient",
    )
    ddg_convert.add_argument("-r", "--recipient", type=_email, required=True,
                             help="Original recipient email address")
    sender = ddg_convert.add_mutually_exclusive_group(required=True)
    sender.add_argument("-d", "--use-default", action="store_true",
                        help="Use the default DDG address as a sender")
    sender.add_argument("-g", "--generate", action="store_true",
                        help="Generate a new DDG address to use as sender")
    sender.add_argument("-s", "--sender", type=_email, default=None,
                        help="Provide a DDG address to use as sender")
    ddg_convert.set_defaults(handler=_run_ddg_convert)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; failures of a command are reported, not raised."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        print(f"CLI Args: {args}")

    try:
        for line in args.handler(args):
            print(line)
    except (ValueError, RuntimeError, OSError) as exc:
        print(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
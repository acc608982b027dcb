# lifestuff

A small command-line toolbox for everyday sums: unit conversions, date
arithmetic, mortgage interest projections, car mileage allowance checks,
currency conversion and DuckDuckGo e-mail aliases.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Using the command

Everything runs through one command, `lifestuff`. Add `-v` / `--verbose`
(before or after a subcommand) for extra diagnostic output. When a command
fails, for example on a bad date or a network error, the error message is
printed instead of a result.

### Unit conversions

    lifestuff convert area --from acres 2 --to metres --to sqft
    lifestuff convert distance --from miles 26.2 --to km

`--to` may be repeated; one line is printed per target unit.

Area units: `acres` (`a`), `inches` (`i`, `in`), `km` (`sqkm`),
`metres` (`sqm`, `m`), `miles` (`sqmi`, `mi`), `sqft` (`squarefeet`, `s`).

Distance units: `feet` (`ft`, `f`), `inches` (`i`, `in`), `kilometres` (`km`),
`metres` (`m`), `miles` (`mi`), `yards` (`y`).

### Dates

Dates are given as `dd/mm/yyyy`, `dd-mm-yy` or `yyyymmdd`; two-digit years are
taken as 20xx. A missing date means midnight (UTC) today.

    lifestuff dates add --date 31/01/2023 5 months
    lifestuff dates diff 01/01/2020 31/12/2023 --to days --to weeks
    lifestuff dates ordinal

Periods for `add`: `years` (`y`, `yr`, `yrs`), `months` (`m`, `mon`),
`weeks` (`w`, `wk`, `wks`), `days` (`d`), `hours` (`h`, `hr`, `hrs`),
`minutes` (`min`, `mins`), `seconds` (`s`, `secs`). When adding months or
years from the last day of a month, the result is kept on the last day of the
target month where that month is shorter.

`diff` reports the gap in whole `weeks`, `days`, `hours` or `years`
(a year counted as 365 days); the second date defaults to today.

`ordinal` shows how many days of the current year have passed, how many
remain, and the ISO week number.

### Mortgage interest

    lifestuff interest --principal 100000 --interest-rate 5 --repayment 2000 \
        --max-repayment-pct 10 --end-date 31/12/2030

The projection runs day by day from today until the end date. Every other day
accrues simple daily interest; on the first of each month the `--repayment`
amount is paid, and on 1 January an annual overpayment is made as well: either
`--max-repayment-pct` (alias `--annual-limit`) percent of the outstanding
principal, or the fixed amount given with `--annual-downpayment`. Exactly one
of those two must be given. The principal must be positive.

### Mileage

    lifestuff mileage --mileage 9000

Compares the current mileage with the mileage projected for today and, when
over, reports the cost of the overage. The allowance is fixed: 8300 miles on
23 March 2024, accruing 8000 miles a year, at 0.0678 per excess mile.

### Currency

    lifestuff currency --from usd --amt 100 --to eur

Currency codes must be three characters. The rate is fetched from the
package's exchange-rate backend for the first `--to` currency; a line is
printed for each `--to` given.

### DuckDuckGo e-mail aliases

These need a `DDG_BEARER` environment variable holding your DuckDuckGo e-mail
protection token.

    lifestuff ddg generate
    lifestuff ddg convert --recipient someone@example.com --generate
    lifestuff ddg convert --recipient someone@example.com --sender alias@example.com
    lifestuff ddg convert --recipient someone@example.com -d

Exactly one of `-g/--generate`, `-s/--sender` or `-d/--use-default` must be
given. The printed address is the recipient with `@` replaced by `_at_`,
followed by `_` and the sender alias.

## Using it as a library

The pieces are importable too, for example:

    from lifestuff.units import AreaUnit, convert_area
    from lifestuff.datetimekeeper import DateTimeKeeper

    convert_area(AreaUnit.ACRES, AreaUnit.SQUARE_METRES, 1.0)
    DateTimeKeeper.from_dmy_str("31/1/2023", False).apply_month_delta(5)

Modules: `lifestuff.units`, `lifestuff.datetimekeeper`, `lifestuff.dates`,
`lifestuff.interest`, `lifestuff.mileage`, `lifestuff.currency`,
`lifestuff.ddg` and `lifestuff.cli` (with `build_parser()` and `main()`).

## What it does not do

No shell completion scripts are shipped, the mileage allowance cannot be
configured, and currency rates come only from the one built-in backend.
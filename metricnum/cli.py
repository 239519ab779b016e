"""
Metricnum CLI

    metricnum to 1500 --name --space     ->  1.5 kilo
    metricnum to 0.000123 --decimals 1   ->  123μ
    metricnum from "2.2 M"               ->  2200000.0
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .metric import MetricFormat, MetricNumeralError, UnitText, from_metric, to_metric

PROG = "metricnum"


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser with 'to' and 'from' subcommands."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Convert numbers to and from Metric prefix notation (1000 <-> 1k).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    to_cmd = commands.add_parser("to", help="Format a number as a Metric numeral.")
    to_cmd.add_argument("value", type=_real_number, help="Number to format, e.g. 1500 or 2.5e-6.")
    unit_text = to_cmd.add_mutually_exclusive_group()
    unit_text.add_argument("--name", dest="unit_text", action="store_const", const=UnitText.NAME,
                           help="Use the prefix name (kilo).")
    unit_text.add_argument("--short-scale", dest="unit_text", action="store_const",
                           const=UnitText.SHORT_SCALE_WORD, help="Use the short-scale word (billion).")
    unit_text.add_argument("--long-scale", dest="unit_text", action="store_const",
                           const=UnitText.LONG_SCALE_WORD, help="Use the long-scale word (milliard).")
    to_cmd.set_defaults(unit_text=UnitText.SYMBOL)
    to_cmd.add_argument("--space", action="store_true", help="Separate number and unit text by a space.")
    to_cmd.add_argument("--decimals", type=int, default=None, help="Round to this many decimal places.")

    from_cmd = commands.add_parser("from", help="Parse a Metric numeral into a number.")
    from_cmd.add_argument("text", help="Metric numeral, e.g. 1k, '2.2 M' or 3kilo.")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "to":
            fmt = MetricFormat(unit_text=args.unit_text, with_space=args.space)
            print(to_metric(args.value, fmt, decimals=args.decimals))
        else:
            print(from_metric(args.text))
    except (MetricNumeralError, TypeError, ValueError) as e:
        parser.error(str(e))

    return 0


# Private Methods ------------------------------------------------------------------------------------------------------

def _real_number(text: str) -> Decimal:
    try:
        return Decimal(text.strip())
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None


if __name__ == "__main__":
    sys.exit(main())

"""Command line front end for the annual leave calculator."""

from __future__ import annotations

import argparse
from datetime import date

from .form import LeaveForm
from .leave import WorkType, Workplace

_WORK_TYPES = {"regular": WorkType.REGULAR, "non-regular": WorkType.NON_REGULAR}
_WORKPLACES = {"agency": Workplace.DIRECT_AGENCY, "school": Workplace.SCHOOL}


def _parse_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date: {text!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="annualleave", description="Calculate annual leave days."
    )
    parser.add_argument("--start-date", type=_parse_date, default=None,
                        help="first working day, YYYY-MM-DD (default: today)")
    parser.add_argument("--today", type=_parse_date, default=None,
                        help="date to calculate for, YYYY-MM-DD (default: today)")
    parser.add_argument("--work-type", choices=sorted(_WORK_TYPES), default="regular")
    parser.add_argument("--workplace", choices=sorted(_WORKPLACES), default="agency")
    parser.add_argument("--select", type=_parse_date, action="append", default=[],
                        metavar="DATE", help="toggle a chosen day; may be repeated")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the calculator and print the result and the chosen days."""
    args = _build_parser().parse_args(argv)
    form = LeaveForm()
    form.select_work_type(_WORK_TYPES[args.work_type])
    form.select_workplace(_WORKPLACES[args.workplace])
    if args.start_date is not None:
        form.set_start_date(args.start_date)
    for day in args.select:
        form.toggle_date(day)

    print(form.calculate(args.today))
    lines = form.selected_date_lines()
    if lines:
        print()
        print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
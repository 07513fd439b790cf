"""Command line interface for simpledate."""

import argparse
import pathlib
import sys
from typing import Optional

import rich

from simpledate import config, logs
from simpledate.features import validators
from simpledate.model import dates
from simpledate.model.date_field import SimpleDateField
from simpledate.model.subfields import Slot


def build_parser() -> argparse.ArgumentParser:
    """Define command line arguments."""
    parser = argparse.ArgumentParser(prog="simpledate")
    parser.add_argument(
        "-c", "--config_path",
        help="Path to config file",
        type=pathlib.Path,
        default=None
    )
    parser.add_argument(
        "-o", "--order",
        help="Display order of the date parts: dmy, ymd, or mdy",
        default=None
    )
    parser.set_defaults(func=None)
    subparsers = parser.add_subparsers()

    app_parser = subparsers.add_parser(
        "app",
        help="Run the date entry form."
    )
    app_parser.set_defaults(func=run_app)
    app_parser.add_argument(
        "-v", "--value",
        help="Initial date value",
        default=None
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Validate a day, month, and year as if typed into the form."
    )
    check_parser.set_defaults(func=check_date)
    check_parser.add_argument("day", help="Day of month")
    check_parser.add_argument("month", help="Month number")
    check_parser.add_argument("year", help="Year")

    parse_parser = subparsers.add_parser(
        "parse",
        help="Convert free-form text such as 'tomorrow' to YYYY-MM-DD."
    )
    parse_parser.set_defaults(func=parse_text)
    parse_parser.add_argument("text", help="Date text to interpret")
    return parser


def run_app(args: argparse.Namespace) -> int:
    """Run the date entry TUI application."""
    # Imported here so the check and parse commands do not load textual widgets.
    from simpledate.view import main_app

    app = main_app.DateFormApp(initial_value=args.value)
    app.run()
    return 0


def check_date(args: argparse.Namespace) -> int:
    """Validate a submitted day, month, and year."""
    field = SimpleDateField("date", order=config.settings.order)
    field.set_submitted_value(
        {Slot.DAY: args.day, Slot.MONTH: args.month, Slot.YEAR: args.year}
    )
    form_validator = validators.FormValidator()
    valid = form_validator.validate([field])
    displays = " ".join(f"{sub.title}={sub.value}" for sub in field.children)
    rich.print(f"[bold]{displays}[/bold]")
    if valid:
        rich.print(f"[green]Valid date: {field.value}[/green]")
        return 0
    for sub_field in field.children:
        if sub_field.message:
            rich.print(f"[red]{sub_field.title}: {sub_field.message}[/red]")
    if field.message:
        rich.print(f"[bold red]{field.message}[/bold red]")
    return 1


def parse_text(args: argparse.Namespace) -> int:
    """Interpret free-form text as a date."""
    parsed = dates.parse_date(args.text)
    if parsed is None:
        rich.print(f"[bold red]Unable to interpret {args.text!r} as a date.[/]")
        return 1
    rich.print(dates.to_iso(parsed))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Function to run the CLI, used for the console script entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config.settings.update_from_args(args)
    except config.ConfigError as err:
        rich.print(f"[bold red]{err}[/]")
        return 2
    logs.configure_logging(level=config.settings.log_level)
    if args.func is None:
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

"""CLI entry point: list restaurants open at a given date and time."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from restaurant_hours import config
from restaurant_hours.query import DATE_FORMAT, check_input
from restaurant_hours.render import (
    render_error_html,
    render_error_text,
    render_results_html,
    render_results_text,
)
from restaurant_hours.restaurant_loader import LoadError
from restaurant_hours.session import RestaurantSession

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2

INVALID_FIELD_HELP = {
    "date": "Invalid date. Use the format YYYY-MM-DD.",
    "time": "Invalid time. Use the format HH:MM or h:mm am/pm.",
}


def build_parser() -> argparse.ArgumentParser:
    now = datetime.now()
    parser = argparse.ArgumentParser(
        description="Find restaurants open at a given date and time",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                    # Open right now
  python main.py --date 2025-11-19 --time 15:00     # Wednesday afternoon
  python main.py --time "1:00 am" --html out.html   # Also write an HTML list
        """,
    )
    parser.add_argument(
        "--date",
        default=now.strftime(DATE_FORMAT),
        help="Date to check, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--time",
        default=now.strftime("%H:%M"),
        help="Time to check, HH:MM or h:mm am/pm (default: now)",
    )
    parser.add_argument(
        "--source",
        default=config.RESTAURANT_HOURS_SOURCE,
        help="Restaurant hours JSON file or URL",
    )
    parser.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Also write the result as an HTML fragment to this file",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Load the session, validate input, query and display the result."""
    try:
        session = RestaurantSession.from_source(args.source)
    except LoadError as e:
        logger.error("Failed to load restaurant hours: %s", e)
        _show_failure(args.html)
        return EXIT_FAILURE

    invalid = check_input(args.date, args.time)
    if invalid:
        for field in invalid:
            logger.error(INVALID_FIELD_HELP[field])
        return EXIT_INVALID_INPUT

    matches = session.find_open(args.date, args.time)
    print(render_results_text(matches))

    if args.html:
        _write_html(args.html, render_results_html(matches))

    return EXIT_OK


def _show_failure(html_path: Path | None):
    print(render_error_text())
    if html_path:
        _write_html(html_path, render_error_html())


def _write_html(html_path: Path, html: str):
    html_path.parent.mkdir(parents=True, exist_ok=True)
    with open(html_path, "w", encoding="utf-8") as f:
        f.write(html)
    logger.info("Wrote results to %s", html_path)


def main(argv: list[str] | None = None) -> int:
    """Main CLI function."""
    # Configure logging
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.FileHandler(config.LOG_FILE, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )

    args = build_parser().parse_args(argv)

    try:
        return run(args)
    except Exception:
        # Details go to the log only
        logger.exception("Unexpected error")
        _show_failure(args.html)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())

"""Command line interface to scrape and print a court docket."""

import argparse
import datetime
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .docket.core import DATE_FORMAT, DocketScraper, today
from .exceptions import DocketError
from .output import OutputFormat, render


def valid_date(value: str) -> str:
    """Check that the input date is in YYYY-MM-DD format."""
    try:
        datetime.datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date '{value}', expected YYYY-MM-DD"
        )
    return value


def get_parser() -> argparse.ArgumentParser:
    """Return the argument parser."""
    ap = argparse.ArgumentParser(
        "nl-court-docket",
        description="Print the court docket for an office on a given date",
    )
    ap.add_argument("--office", help="Office ID")
    ap.add_argument(
        "--date",
        type=valid_date,
        default=today(),
        help="Date in YYYY-MM-DD format (default: today)",
    )
    ap.add_argument(
        "--format",
        dest="fmt",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.JSON.value,
        help="Output format (default: json)",
    )
    ap.add_argument(
        "--compact",
        action="store_true",
        help="Print JSON on a single line instead of indented",
    )
    ap.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Parse a saved docket page instead of fetching it",
    )
    ap.add_argument(
        "--errors",
        choices=["raise", "ignore"],
        default="raise",
        help="How to handle malformed charge rows (default: raise)",
    )
    ap.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging"
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface."""
    ap = get_parser()
    args = ap.parse_args(argv)

    # Log to stderr so stdout only holds the docket
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    if args.html is None and not args.office:
        ap.error("--office is required unless --html is specified")

    scraper = DocketScraper(
        office=args.office or "", date=args.date, errors=args.errors
    )
    try:
        if args.html is not None:
            logger.info(f"Parsing docket from '{args.html}'")
            docket = scraper.parse(args.html.read_bytes())
        else:
            docket = scraper()
        out = render(docket, args.fmt, pretty=not args.compact)
    except (DocketError, OSError) as e:
        logger.exception(f"Error getting docket: {str(e)}")
        return 1

    sys.stdout.write(out)
    if out and not out.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

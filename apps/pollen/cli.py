"""
Pollen Report Entry Point

Runs the whole pipeline once: fetch the page, extract the records, print
the report and exit.

Exit codes:
- 0: report printed with at least one record
- 1: invalid POLLEN_* setting, fetch failed, or the page held no relevant records

Usage:
    python -m apps.pollen
    pollen-report
"""

import logging
import sys
from datetime import datetime

import httpx
from pydantic import ValidationError
from rich.console import Console

from apps.pollen.fetcher import FetchError, fetch_page
from apps.pollen.parser import parse_pollen_data
from apps.pollen.report import render_error, render_header, render_records, render_warning
from utils.config import Settings, get_settings
from utils.logging import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def run(
    settings: Settings,
    console: Console,
    client: httpx.Client | None = None,
    now: datetime | None = None,
) -> int:
    """
    Fetch, extract and print the report.

    Args:
        settings: Application settings
        console: Console the report is printed to
        client: Optional httpx client passed to the fetcher
        now: Timestamp shown in the header, defaults to the current time

    Returns:
        Process exit code
    """
    render_header(console, settings.REPORT_TITLE, settings.LOCATION_LABEL, now=now)

    try:
        html = fetch_page(settings, client=client)
    except FetchError as e:
        logger.error(
            "Fetch failed",
            extra={"operation": e.operation, "error": str(e.cause)},
        )
        render_error(console, str(e.cause))
        return EXIT_FAILURE

    records = parse_pollen_data(html, settings.RELEVANCE_KEYWORDS)

    if not records:
        logger.warning("No relevant records extracted", extra={"url": settings.PAGE_URL})
        render_warning(console, "No pollen data found")
        return EXIT_FAILURE

    render_records(console, records)
    return EXIT_OK


def main() -> int:
    """Main entry point for the pollen report."""
    console = Console()

    try:
        settings = get_settings()
    except ValidationError as e:
        render_error(console, f"invalid configuration: {e}")
        return EXIT_FAILURE

    setup_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)

    return run(settings, console)


if __name__ == "__main__":
    sys.exit(main())

"""
Pollen Card Parser

Extracts pollen category records from the raw page markup with regular
expressions. The markup is treated as text, not parsed as a document:
unexpected markup yields fewer records, never an error.

Each category on the page is an anchor with the 'index-list-card' class
holding an 'index-name' div and an 'index-status-text' div.
"""

import logging
import re
from collections.abc import Iterable

from utils.schemas import PollenRecord

logger = logging.getLogger(__name__)

DEFAULT_KEYWORDS = ("pollen", "mold", "dust")

CARD_RE = re.compile(r'<a[^>]*class="[^"]*index-list-card[^"]*"[^>]*>(.*?)</a>', re.DOTALL)
NAME_RE = re.compile(r'<div class="index-name"[^>]*>([^<]+)</div>')
STATUS_RE = re.compile(r'<div class="index-status-text">([^<]+)</div>')


def is_relevant(name: str, keywords: Iterable[str] = DEFAULT_KEYWORDS) -> bool:
    """Check whether a category name contains any relevance keyword (case-insensitive)."""
    lower_name = name.lower()
    return any(keyword.lower() in lower_name for keyword in keywords)


def parse_pollen_data(html: str, keywords: Iterable[str] | None = None) -> list[PollenRecord]:
    """
    Extract relevant pollen records from page markup.

    Args:
        html: Raw page text
        keywords: Relevance keywords, defaults to pollen/mold/dust

    Returns:
        Records in the order their cards appear in the markup
    """
    keywords = tuple(keywords) if keywords is not None else DEFAULT_KEYWORDS
    records: list[PollenRecord] = []

    cards = CARD_RE.findall(html)
    logger.debug("Found card fragments", extra={"card_count": len(cards)})

    for card in cards:
        name_match = NAME_RE.search(card)
        status_match = STATUS_RE.search(card)

        if not name_match or not status_match:
            logger.debug(
                "Skipping card without name or status",
                extra={"has_name": bool(name_match), "has_status": bool(status_match)},
            )
            continue

        name = name_match.group(1).strip().replace("&amp;", "&")
        status = status_match.group(1).strip()

        if not is_relevant(name, keywords):
            logger.debug("Skipping irrelevant category", extra={"category": name})
            continue

        records.append(PollenRecord(name=name, status=status))

    logger.info(
        "Parsed pollen data",
        extra={"card_count": len(cards), "record_count": len(records)},
    )

    return records

"""
Tests for terminal report rendering.
"""

from datetime import datetime

import pytest

from apps.pollen.report import (
    HIGH_BADGE,
    LOW_BADGE,
    MODERATE_BADGE,
    format_record,
    get_badge,
    get_emoji,
    render_error,
    render_header,
    render_records,
    render_warning,
)
from utils.schemas import PollenRecord


class TestGetBadge:
    """Status to badge mapping."""

    @pytest.mark.parametrize(
        "status,label,style",
        [
            ("Low", "LOW", LOW_BADGE),
            ("MODERATE", "MOD", MODERATE_BADGE),
            ("high", "HIGH", HIGH_BADGE),
            ("Very High", "HIGH", HIGH_BADGE),
        ],
    )
    def test_known_statuses(self, status, label, style):
        badge = get_badge(status)

        assert badge.plain.strip() == label
        assert len(badge.plain) == 6
        assert badge.style == style

    def test_unknown_status_is_plain_text(self):
        badge = get_badge("Extreme")

        assert badge.plain == "Extreme"
        assert not badge.style

    def test_status_is_not_trimmed_for_lookup(self):
        assert get_badge(" low").plain == " low"


class TestGetEmoji:
    """Category name to emoji mapping."""

    @pytest.mark.parametrize(
        "name,emoji",
        [
            ("Tree Pollen", "🌳"),
            ("Grass Pollen", "🌱"),
            ("Ragweed Pollen", "🌾"),
            ("Mold", "🍄"),
            ("Dust & Dander", "💨"),
            ("Pet Dander", "💨"),
            ("Pollen", "🌿"),
        ],
    )
    def test_emojis(self, name, emoji):
        assert get_emoji(name) == emoji

    def test_first_match_wins(self):
        assert get_emoji("Tree and Grass Pollen") == "🌳"


class TestRendering:
    """Printed report output."""

    def test_format_record_pads_name(self):
        line = format_record(PollenRecord(name="Mold", status="Low"))

        assert line.plain == "🍄 " + "Mold".ljust(20) + " LOW  "

    def test_header(self, console):
        render_header(console, "Pollen Levels - Leiden", "Leiden, Netherlands", now=datetime(2026, 4, 1, 9, 5))

        output = console.file.getvalue()
        assert "🌿 Pollen Levels - Leiden" in output
        assert "📍 Leiden, Netherlands" in output
        assert "🕐 2026-04-01 09:05" in output
        assert "─" in output

    def test_records_in_order(self, console):
        render_records(
            console,
            [PollenRecord(name="Tree Pollen", status="Low"), PollenRecord(name="Mold", status="High")],
        )

        lines = [line for line in console.file.getvalue().splitlines() if line.strip()]
        assert len(lines) == 2
        assert "Tree Pollen" in lines[0] and "LOW" in lines[0]
        assert "Mold" in lines[1] and "HIGH" in lines[1]
        assert lines[0].startswith(" 🌳")

    def test_unknown_status_printed_verbatim(self, console):
        render_records(console, [PollenRecord(name="Tree Pollen", status="[bold]N/A")])

        assert "[bold]N/A" in console.file.getvalue()

    def test_error(self, console):
        render_error(console, "status code error: 500 Internal Server Error")

        assert "❌ Error: status code error: 500" in console.file.getvalue()

    def test_warning(self, console):
        render_warning(console, "No pollen data found")

        output = console.file.getvalue()
        assert "⚠" in output
        assert "No pollen data found" in output

"""
Terminal Report Rendering

Prints the pollen report with rich: title, location and time header,
one line per category with an emoji and a colored severity badge.
"""

from collections.abc import Iterable
from datetime import datetime

from rich.console import Console
from rich.padding import Padding
from rich.rule import Rule
from rich.style import Style
from rich.text import Text

from utils.schemas import PollenRecord

BADGE_WIDTH = 6
NAME_WIDTH = 20

TITLE_STYLE = Style(bold=True, color="bright_green")
RULE_STYLE = Style(color="white")
ERROR_STYLE = Style(bold=True, color="bright_red")
WARNING_STYLE = Style(bold=True, color="bright_yellow")

LOW_BADGE = Style(bold=True, color="black", bgcolor="bright_green")
MODERATE_BADGE = Style(bold=True, color="black", bgcolor="bright_yellow")
HIGH_BADGE = Style(bold=True, color="black", bgcolor="bright_red")

# status (lowercase) -> (label, style)
BADGES: dict[str, tuple[str, Style]] = {
    "low": ("LOW", LOW_BADGE),
    "moderate": ("MOD", MODERATE_BADGE),
    "high": ("HIGH", HIGH_BADGE),
    "very high": ("HIGH", HIGH_BADGE),
}

# First matching keyword wins
EMOJIS: list[tuple[tuple[str, ...], str]] = [
    (("tree",), "🌳"),
    (("grass",), "🌱"),
    (("ragweed",), "🌾"),
    (("mold",), "🍄"),
    (("dust", "dander"), "💨"),
]
DEFAULT_EMOJI = "🌿"


def get_badge(status: str) -> Text:
    """Map a status label to a fixed-width colored badge.

    Unknown statuses are returned as plain, unstyled text.
    """
    badge = BADGES.get(status.lower())
    if badge is None:
        return Text(status)

    label, style = badge
    return Text(label.center(BADGE_WIDTH), style=style)


def get_emoji(name: str) -> str:
    lower = name.lower()
    for keywords, emoji in EMOJIS:
        if any(keyword in lower for keyword in keywords):
            return emoji
    return DEFAULT_EMOJI


def format_record(record: PollenRecord) -> Text:
    """Build the report line for one record."""
    return Text.assemble(
        f"{get_emoji(record.name)} {record.name:<{NAME_WIDTH}}",
        get_badge(record.status),
    )


def render_header(
    console: Console,
    title: str,
    location: str,
    now: datetime | None = None,
) -> None:
    now = now or datetime.now()

    console.print(Text(f" 🌿 {title} ", style=TITLE_STYLE))
    console.print(f"📍 {location}", markup=False)
    console.print(f"🕐 {now.strftime('%Y-%m-%d %H:%M')}", markup=False)
    console.print(Rule(style=RULE_STYLE))
    console.print()


def render_records(console: Console, records: Iterable[PollenRecord]) -> None:
    console.print()
    for record in records:
        console.print(Padding(format_record(record), (0, 1), expand=False))


def render_error(console: Console, message: str) -> None:
    console.print(Text(f"❌ Error: {message}", style=ERROR_STYLE))


def render_warning(console: Console, message: str) -> None:
    console.print(Text(f"⚠️  {message}", style=WARNING_STYLE))

"""CLI UI components (Rich).

Keeps the command functions free of layout details; the same card the bot
sends as an embed is printed here as a panel.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Card


def print_banner(console: Console) -> None:
    title = Text("GAMESTATUS", style="bold cyan")
    subtitle = Text("Live server & game status • Discord refresh cards", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_card_panel(card: Card) -> Panel:
    """Panel rendering of a `Card` (fields as a two-column table)."""

    color = f"#{card.color:06x}"
    parts: list[object] = []
    if card.description:
        parts.append(Text(card.description))

    if card.fields:
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Field", style="bold", no_wrap=True)
        table.add_column("Value", style="white")
        for field in card.fields:
            table.add_row(field.name, field.value)
        parts.append(Text(""))
        parts.append(table)

    links = []
    if card.image_url:
        links.append(f"Image: {card.image_url}")
    if card.thumbnail_url:
        links.append(f"Icon: {card.thumbnail_url}")
    if links:
        parts.append(Text("\n" + "\n".join(links), style="dim"))

    subtitle = card.footer
    if card.timestamp is not None:
        stamp = card.timestamp.strftime("%Y-%m-%d %H:%M:%S UTC")
        subtitle = f"{subtitle} • {stamp}" if subtitle else stamp

    return Panel(
        Group(*parts),
        title=Text(card.title, style=f"bold {color}"),
        subtitle=subtitle,
        border_style=color,
    )


def build_alias_table(aliases: dict[str, str]) -> Table:
    table = Table(title="Saved Games")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Game ID", style="white")
    for name in sorted(aliases, key=str.lower):
        table.add_row(name, aliases[name])
    return table

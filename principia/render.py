"""Terminal rendering of catalog entries using rich."""
from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from .catalog.library import PrincipleCatalog
from .catalog.models import PrincipleEntry


def _numbered_list(items: Iterable[str], style: str) -> Text:
    text = Text()
    for i, item in enumerate(items, 1):
        if i > 1:
            text.append("\n")
        text.append(f"  {i}. ", style=style)
        text.append(item)
    return text


def _example_panel(title: str, language: str, code: str, list_title: str,
                   items: Iterable[str], style: str) -> Panel:
    body = Group(
        Syntax(code, language or "text", theme="ansi_dark", word_wrap=True),
        Text(""),
        Text(list_title, style=f"bold {style}"),
        _numbered_list(items, style),
    )
    return Panel(body, title=escape(title), title_align="left", border_style=style)


def render_entry(entry: PrincipleEntry, console: Optional[Console] = None) -> None:
    """Print one entry: definition, then the bad and good examples."""
    console = console or Console()
    bad, good = entry.bad_example, entry.good_example

    console.print(Panel(
        Group(
            Text(entry.definition),
            _example_panel(f"Bad: {bad.title}", bad.language, bad.code,
                           "Issues", bad.issues, "red"),
            _example_panel(f"Good: {good.title}", good.language, good.code,
                           "Benefits", good.benefits, "green"),
        ),
        title=f"[bold]{escape(entry.heading)}[/bold]",
        border_style="blue",
    ))


def render_index(entries: Iterable[PrincipleEntry], console: Optional[Console] = None,
                 title: str = "Design Principles") -> None:
    """Print a table of ordinal, name and abbreviation."""
    console = console or Console()
    table = Table(title=escape(title))
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Principle", style="bold")
    table.add_column("Abbr.", style="magenta")
    for entry in entries:
        table.add_row(str(entry.ordinal), escape(entry.name), escape(entry.abbreviation or ""))
    console.print(table)


def render_catalog(catalog: PrincipleCatalog, console: Optional[Console] = None) -> None:
    """Print the whole catalog: intro text, index, then every entry."""
    console = console or Console()
    inner = catalog.catalog

    console.rule(f"[bold]{escape(inner.title)}[/bold]")
    if inner.preamble:
        console.print(Text(inner.preamble))
    if inner.rationale_heading:
        console.print(Text(f"\n{inner.rationale_heading}", style="bold yellow"))
        if inner.rationale:
            console.print(Text(inner.rationale))
    console.print()
    render_index(catalog.list_all(), console, title=inner.title)
    for entry in catalog.list_all():
        render_entry(entry, console)

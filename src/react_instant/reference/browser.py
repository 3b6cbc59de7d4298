"""
Terminal rendering and the interactive topic picker for reference catalogs.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from .catalog import ReferenceCatalog, ReferenceTable

logger = logging.getLogger(__name__)

EXIT_CHOICE = "q"

AskFn = Callable[[str, Sequence[str]], str]
ConfirmFn = Callable[[str], bool]


def build_table(table: ReferenceTable, *, numbered: bool = False) -> Table:
    """
    Convert a reference table into a rich Table.

    Cell text is wrapped in Text so brackets in examples are never parsed as markup.
    """
    title = Text(table.title, style="bold magenta") if table.title else None
    rendered = Table(title=title, title_justify="left", show_lines=True)
    if numbered:
        rendered.add_column("No", justify="right")
    for column in table.columns:
        rendered.add_column(Text(column), overflow="fold")
    for index, row in enumerate(table.rows, start=1):
        cells = [Text(cell) for cell in row]
        if numbered:
            cells.insert(0, Text(str(index)))
        rendered.add_row(*cells)
    return rendered


def render_topic(console: Console, catalog: ReferenceCatalog, topic: str) -> bool:
    """
    Print every table registered for ``topic`` in registration order.

    Returns:
        False when the topic has no tables (a notice is printed instead).
    """
    tables = catalog.tables_for(topic)
    if not tables:
        logger.debug("No tables registered for %r", topic)
        console.print(
            f"\n[red]{catalog.item_label.capitalize()} data not found.[/] "
            "(Add it to the catalog file to see it here.)\n"
        )
        return False

    console.print()
    console.print(Text(topic, style="yellow"))
    for table in tables:
        console.print(build_table(table, numbered=catalog.numbered))
    return True


def render_catalog(console: Console, catalog: ReferenceCatalog) -> None:
    """Print every topic of the catalog under a ``=== name ===`` heading."""
    for name in catalog.names:
        console.print()
        console.print(Text(f"=== {name} ===", style="bold cyan"))
        tables = catalog.tables_for(name)
        if not tables:
            console.print("[red]No entries.[/]")
            continue
        for table in tables:
            console.print(build_table(table, numbered=catalog.numbered))


def _menu(catalog: ReferenceCatalog) -> Table:
    grid = Table.grid(padding=(0, 2))
    grid.add_column(justify="right", style="cyan")
    grid.add_column()
    for index, name in enumerate(catalog.names, start=1):
        grid.add_row(str(index), Text(name))
    grid.add_row(EXIT_CHOICE, "Exit")
    return grid


def browse(
    console: Console,
    catalog: ReferenceCatalog,
    *,
    ask: Optional[AskFn] = None,
    confirm: Optional[ConfirmFn] = None,
) -> None:
    """
    Loop a numbered topic menu until the user exits.

    Args:
        console: Output console.
        catalog: Catalog to browse.
        ask: ``(message, choices) -> choice``; defaults to a rich Prompt.
        confirm: ``(message) -> bool``; defaults to a rich Confirm.
    """
    if ask is None:
        def ask(message: str, choices: Sequence[str]) -> str:
            return Prompt.ask(message, choices=list(choices), show_choices=False, console=console)
    if confirm is None:
        def confirm(message: str) -> bool:
            return Confirm.ask(message, default=True, console=console)

    label = catalog.item_label
    choices = [str(index) for index in range(1, len(catalog.topics) + 1)] + [EXIT_CHOICE]
    console.print(Text(f"\n{catalog.title}\n", style="bold cyan"))

    while True:
        console.print(_menu(catalog))
        choice = ask(f"Select a {label} to view its details", choices)
        if choice == EXIT_CHOICE:
            break
        render_topic(console, catalog, catalog.names[int(choice) - 1])
        if not confirm(f"View another {label}?"):
            break

    console.print("\n[green]Goodbye![/]\n")

"""Doctor command: effective settings and catalog sanity checks."""

from __future__ import annotations

from collections import Counter

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings
from core.domain.catalog import default_menu
from core.services.menu_operations import filter_items, map_items

app = typer.Typer(no_args_is_help=True, help="Configuration and catalog diagnostics.")

_console = Console()


def _check_prices() -> tuple[bool, str]:
    negative = filter_items(default_menu(), lambda s: s.price < 0)
    if negative:
        return False, ", ".join(map_items(negative, lambda s: s.name))
    return True, "all prices >= 0"


def _check_unique_names() -> tuple[bool, str]:
    counts = Counter(map_items(default_menu(), lambda s: s.name.casefold()))
    dupes = [name for name, n in counts.items() if n > 1]
    if dupes:
        return False, ", ".join(dupes)
    return True, f"{len(counts)} distinct names"


@app.command()
def run() -> None:
    """Show the effective settings and run catalog checks."""

    settings = AppSettings()

    table = Table(title="Smoothie Shop Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Currency", "OK", settings.currency_symbol)
    table.add_row("Price decimals", "OK", str(settings.price_decimals))
    table.add_row("Cheap threshold", "OK", settings.format_price(settings.cheap_threshold))
    table.add_row("Log level", "OK", settings.log_level)

    ok_prices, detail_prices = _check_prices()
    table.add_row("Menu prices", "OK" if ok_prices else "FAIL", detail_prices)

    ok_names, detail_names = _check_unique_names()
    table.add_row("Menu names", "OK" if ok_names else "FAIL", detail_names)

    _console.print(table)

    if not (ok_prices and ok_names):
        raise typer.Exit(code=1)

"""CLI de la tienda (Typer + Rich).

Comandos:
- `menu`: carta filtrada/ordenada.
- `basket`: llena una `Basket[Smoothie]` y muestra líneas y total.
- `stats`: agregados sobre la carta con los helpers de colecciones.
- `doctor`: diagnóstico de configuración.
"""

from __future__ import annotations

import logging
import sys
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional

import typer
from rich.console import Console

from cli import doctor
from cli.ui_components import build_basket_panel, build_menu_table, print_banner
from core.config import AppSettings
from core.domain.basket import Basket
from core.domain.catalog import default_menu, find_item
from core.domain.errors import UnknownItemError
from core.domain.models import Smoothie
from core.logging_setup import configure_logging
from core.services.menu_operations import (
    by_name,
    by_price,
    filter_items,
    is_vegan,
    price_below,
    sort_items,
    sum_field,
)

app = typer.Typer(no_args_is_help=True, help="Smoothie shop: generic baskets and collection helpers.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = logging.getLogger(__name__)


class SortField(str, Enum):
    NAME = "name"
    PRICE = "price"


_SORT_KEYS = {SortField.NAME: by_name, SortField.PRICE: by_price}


@app.callback()
def main(
    banner: Annotated[bool, typer.Option("--banner/--no-banner", help="Show the welcome banner.")] = False,
) -> None:
    settings = AppSettings()
    configure_logging(settings.log_level)
    if banner:
        print_banner(_console)


@app.command()
def menu(
    sort: Annotated[Optional[SortField], typer.Option("--sort", help="Sort by name or price.")] = None,
    vegan: Annotated[bool, typer.Option("--vegan", help="Only vegan smoothies.")] = False,
    under: Annotated[Optional[float], typer.Option("--under", min=0, help="Only prices strictly below AMOUNT.")] = None,
) -> None:
    """Print the menu, optionally filtered and sorted."""

    settings = AppSettings()
    smoothies = default_menu()
    if vegan:
        smoothies = filter_items(smoothies, is_vegan)
    if under is not None:
        smoothies = filter_items(smoothies, price_below(Decimal(str(under))))
    if sort is not None:
        smoothies = sort_items(smoothies, _SORT_KEYS[sort])

    logger.info("menu: %d smoothies after filters", len(smoothies))
    if not smoothies:
        _console.print("[yellow]No smoothies match.[/yellow]")
        return
    _console.print(build_menu_table(smoothies, settings))


@app.command()
def basket(
    names: Annotated[list[str], typer.Argument(help="Smoothie names to add, in order.")],
) -> None:
    """Add smoothies to a basket and print the line items and total."""

    settings = AppSettings()
    smoothies = default_menu()
    cart: Basket[Smoothie] = Basket(Smoothie)
    for name in names:
        try:
            cart.append(find_item(smoothies, name))
        except UnknownItemError as exc:
            raise typer.BadParameter(str(exc), param_hint="NAMES") from exc

    _console.print(build_basket_panel(cart, settings))


@app.command()
def stats() -> None:
    """Aggregate figures over the menu."""

    settings = AppSettings()
    smoothies = default_menu()
    by_cost = sort_items(smoothies, by_price)

    vegan_count = len(filter_items(smoothies, is_vegan))
    cheap = filter_items(smoothies, price_below(settings.cheap_threshold))

    _console.print(f"Smoothies: {len(smoothies)} ({vegan_count} vegan)")
    _console.print(
        f"Under {settings.format_price(settings.cheap_threshold)}: "
        + (", ".join(s.name for s in cheap) or "none")
    )
    _console.print(f"Cheapest: {by_cost[0].name} ({settings.format_price(by_cost[0].price)})")
    _console.print(f"Priciest: {by_cost[-1].name} ({settings.format_price(by_cost[-1].price)})")
    _console.print(f"Menu total: {settings.format_price(sum_field(smoothies, by_price))}")


def run() -> None:
    # El banner y los paneles usan glifos fuera de cp1252.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()


if __name__ == "__main__":
    run()

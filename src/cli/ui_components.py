"""Componentes de UI para CLI (Rich).

Tablas y paneles reutilizables por los comandos; no contienen lógica de
negocio, solo presentación.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.basket import Basket
from core.domain.models import Smoothie


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("Smoothie Shop", style="bold magenta")
    subtitle = Text("Cestas genéricas • filter/sort/sum • lambdas", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="magenta", padding=(1, 4)))


def build_menu_table(smoothies: Iterable[Smoothie], settings: AppSettings) -> Table:
    table = Table(title="Menu")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Price", style="green", justify="right")
    table.add_column("Vegan", style="white")
    table.add_column("Ingredients", style="dim")
    for smoothie in smoothies:
        table.add_row(
            smoothie.name,
            settings.format_price(smoothie.price),
            "yes" if smoothie.is_vegan else "no",
            ", ".join(smoothie.ingredients) or "-",
        )
    return table


def build_basket_panel(basket: Basket, settings: AppSettings) -> Panel:
    """Panel con las líneas de la cesta y el total formateado."""

    body = Text()
    for line in basket.printable_lines():
        body.append(f"{line}\n")
    if not basket:
        body.append("(empty)\n", style="dim")
    body.append(f"\nTotal: {settings.format_price(basket.total_price())}", style="bold")
    return Panel(body, title=Text("Basket", style="bold yellow"), border_style="yellow")

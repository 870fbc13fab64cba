"""Carta de ejemplo de la tienda.

La carta se construye en código: son los cinco smoothies de la guía.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, TypeVar

from core.domain.errors import UnknownItemError
from core.domain.models import Smoothie
from core.interfaces.priced_item import PricedItem

T = TypeVar("T", bound=PricedItem)


def default_menu() -> list[Smoothie]:
    """Devuelve una lista nueva con la carta por defecto."""

    return [
        Smoothie(
            name="Tropical Twist",
            price=Decimal("4.75"),
            is_vegan=True,
            ingredients=("mango", "pineapple", "coconut water"),
        ),
        Smoothie(
            name="Green Power",
            price=Decimal("5.50"),
            is_vegan=True,
            ingredients=("spinach", "kale", "banana", "almond milk"),
        ),
        Smoothie(
            name="Berry Bliss",
            price=Decimal("4.25"),
            is_vegan=False,
            ingredients=("strawberry", "blueberry", "yogurt"),
        ),
        Smoothie(
            name="Citrus Sunrise",
            price=Decimal("3.00"),
            is_vegan=True,
            ingredients=("orange", "lemon", "ginger"),
        ),
        Smoothie(
            name="Protein Punch",
            price=Decimal("6.00"),
            is_vegan=False,
            ingredients=("banana", "peanut butter", "whey", "milk"),
        ),
    ]


def find_item(items: Iterable[T], name: str) -> T:
    """Busca un artículo por nombre, sin distinguir mayúsculas.

    Raises:
        UnknownItemError: si ningún artículo coincide.
    """

    wanted = name.strip().casefold()
    for item in items:
        if item.name.casefold() == wanted:
            return item
    raise UnknownItemError(name)

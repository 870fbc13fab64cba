"""Helpers declarativos sobre colecciones de la carta.

Cada helper recibe el comportamiento como un valor función explícito, así que
una lambda y una función con nombre son intercambiables:

    filter_items(menu, lambda s: s.is_vegan) == filter_items(menu, is_vegan)

Todos devuelven listas nuevas y nunca mutan la entrada.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Iterable, TypeVar

from core.interfaces.priced_item import Price, PricedItem, as_decimal

T = TypeVar("T")
R = TypeVar("R")


def filter_items(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Conserva los artículos que cumplen `predicate`, en su orden original."""

    return [item for item in items if predicate(item)]


def map_items(items: Iterable[T], fn: Callable[[T], R]) -> list[R]:
    return [fn(item) for item in items]


def sort_items(
    items: Iterable[T],
    key: Callable[[T], Any],
    *,
    reverse: bool = False,
) -> list[T]:
    """Devuelve una lista nueva ordenada por `key`.

    `sorted` es estable: los empates conservan el orden de entrada (también
    con `reverse=True`).
    """

    return sorted(items, key=key, reverse=reverse)


def sum_field(items: Iterable[T], getter: Callable[[T], Price]) -> Decimal:
    """Suma `getter(item)` en una pasada; `Decimal("0")` si no hay artículos.

    Acepta valores `Decimal`, `int` o `float` (ver `as_decimal`).
    """

    total = Decimal("0")
    for item in items:
        total += as_decimal(getter(item))
    return total


def for_each(items: Iterable[T], action: Callable[[T], None]) -> None:
    for item in items:
        action(item)


# Funciones con nombre ---------------------------------------------------------


def by_name(item: PricedItem) -> str:
    return item.name


def by_price(item: PricedItem) -> Decimal:
    return as_decimal(item.price)


def is_vegan(item: Any) -> bool:
    return bool(getattr(item, "is_vegan", False))


def price_below(threshold: Decimal | int | str) -> Callable[[PricedItem], bool]:
    """Predicado `item.price < threshold` (estricto)."""

    limit = Decimal(str(threshold))

    def predicate(item: PricedItem) -> bool:
        return as_decimal(item.price) < limit

    return predicate


def has_ingredient(ingredient: str) -> Callable[[Any], bool]:
    """Predicado: la lista de ingredientes contiene `ingredient` (sin mayúsculas)."""

    wanted = ingredient.strip().casefold()

    def predicate(item: Any) -> bool:
        return any(i.casefold() == wanted for i in getattr(item, "ingredients", ()))

    return predicate

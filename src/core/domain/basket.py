"""Cesta genérica de artículos con precio.

`Basket[T]` guarda, en orden de inserción, artículos de un único tipo `T`
acotado por `PricedItem`. Solo admite añadir; no hay borrado ni edición.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Generic, Iterator, TypeVar

from core.domain.errors import InvalidPriceError, ItemTypeMismatchError, NotPricedItemError
from core.interfaces.priced_item import PricedItem, as_decimal

T = TypeVar("T", bound=PricedItem)

logger = logging.getLogger(__name__)


class Basket(Generic[T]):
    """Colección ordenada y homogénea de artículos con precio.

    El tipo de los artículos se fija con `item_type`; si se omite, lo fija el
    primer `append`. Los modelos del dominio son inmutables, así que guardar la
    referencia equivale a que la cesta sea dueña del valor.
    """

    def __init__(self, item_type: type[T] | None = None) -> None:
        self._item_type: type[T] | None = item_type
        self._items: list[T] = []

    @property
    def item_type(self) -> type[T] | None:
        return self._item_type

    @property
    def items(self) -> tuple[T, ...]:
        """Instantánea inmutable del contenido actual."""

        return tuple(self._items)

    def append(self, item: T) -> None:
        """Añade `item` al final de la cesta.

        Raises:
            NotPricedItemError: si `item` no expone `name` y un `price` numérico.
            InvalidPriceError: si el precio es negativo o no finito.
            ItemTypeMismatchError: si `item` no es del tipo de la cesta.
        """

        if not isinstance(item, PricedItem):
            raise NotPricedItemError(item)
        try:
            price = as_decimal(item.price)
        except TypeError as exc:
            raise NotPricedItemError(item) from exc
        if not price.is_finite() or price < 0:
            raise InvalidPriceError(item, item.price)
        if self._item_type is None:
            self._item_type = type(item)
        elif not isinstance(item, self._item_type):
            raise ItemTypeMismatchError(item, self._item_type)

        self._items.append(item)
        logger.debug("basket += %s (%s items)", item.name, len(self._items))

    def total_price(self) -> Decimal:
        """Suma de `price` de todos los artículos; `Decimal("0")` si está vacía.

        No redondea: el formato (decimales, moneda) es cosa de la presentación.
        """

        total = Decimal("0")
        for item in self._items:
            total += as_decimal(item.price)
        return total

    def printable_lines(self) -> list[str]:
        return [f"{item.name}: {as_decimal(item.price):.2f}" for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        kind = self._item_type.__name__ if self._item_type else "?"
        return f"Basket[{kind}]({len(self._items)} items, total={self.total_price()})"

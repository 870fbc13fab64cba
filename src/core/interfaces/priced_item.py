"""Contrato de producto con precio.

`PricedItem` es un contrato estructural: cualquier objeto con atributos
`name` y `price` lo cumple, sea un modelo Pydantic, un dataclass o un
`SimpleNamespace`. La cesta lo usa como cota de su parámetro de tipo.

El precio puede ser `Decimal`, `int` o `float`; `as_decimal` lo normaliza
para que las sumas sean exactas.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, Union, runtime_checkable

Price = Union[Decimal, int, float]


@runtime_checkable
class PricedItem(Protocol):
    """Contrato mínimo para un artículo vendible.

    Invariante: `price >= 0`.
    """

    name: str
    price: Price


def as_decimal(value: object) -> Decimal:
    """Convierte un precio numérico a `Decimal`.

    Los `float` pasan por `str` (1.5 -> Decimal("1.5"), no su binario exacto).

    Raises:
        TypeError: si `value` no es `Decimal`, `int` ni `float` (`bool` tampoco vale).
    """

    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
        raise TypeError(f"price must be a number, got {type(value).__name__!r}")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))

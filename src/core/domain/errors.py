"""Excepciones del dominio de la tienda."""

from __future__ import annotations


class ShopError(Exception):
    """Base de todos los errores del dominio."""


class NotPricedItemError(ShopError, TypeError):
    """El valor no expone `name` y un `price` numérico."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"{type(value).__name__!r} is not a priced item (needs 'name' and a numeric 'price')"
        )
        self.value = value


class InvalidPriceError(ShopError, ValueError):
    """El precio es negativo o no finito (NaN, infinito)."""

    def __init__(self, value: object, price: object) -> None:
        super().__init__(f"invalid price {price!r} for {getattr(value, 'name', value)!r}")
        self.value = value
        self.price = price


class ItemTypeMismatchError(ShopError, TypeError):
    """El valor tiene precio, pero no es del tipo de artículo de la cesta."""

    def __init__(self, value: object, expected: type) -> None:
        super().__init__(
            f"basket holds {expected.__name__!r} items, got {type(value).__name__!r}"
        )
        self.value = value
        self.expected = expected


class UnknownItemError(ShopError, LookupError):
    """Ningún artículo de la carta coincide con el nombre pedido."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no item named {name!r} on the menu")
        self.name = name

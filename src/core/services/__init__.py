"""Operaciones sobre colecciones de la carta (filtrar, ordenar, sumar)."""

from core.services.menu_operations import (
    by_name,
    by_price,
    filter_items,
    for_each,
    has_ingredient,
    is_vegan,
    map_items,
    price_below,
    sort_items,
    sum_field,
)

__all__ = [
    "by_name",
    "by_price",
    "filter_items",
    "for_each",
    "has_ingredient",
    "is_vegan",
    "map_items",
    "price_below",
    "sort_items",
    "sum_field",
]

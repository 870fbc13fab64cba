"""Interfaces/abstracciones del Core.

Define contratos (Protocol) que cumplen los modelos concretos de la tienda.
"""

from core.interfaces.priced_item import PricedItem, as_decimal

__all__ = ["PricedItem", "as_decimal"]

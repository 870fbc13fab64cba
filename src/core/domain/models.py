"""Modelos del dominio (Pydantic v2).

Los productos de la tienda son registros inmutables: se construyen una vez con
validación estricta (nombre no vacío, precio >= 0) y después solo se leen.

Nota:
- Cualquier modelo con `name` y `price` cumple el contrato `PricedItem`
  (ver `core.interfaces.priced_item`) sin heredar de nada.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Smoothie(BaseModel):
    """Un smoothie de la carta."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Nombre comercial del smoothie (p.ej. 'Berry Bliss').",
    )
    price: Decimal = Field(
        ...,
        ge=0,
        decimal_places=2,
        description="Precio unitario, no negativo.",
    )
    is_vegan: bool = Field(
        default=False,
        description="Indica si el smoothie no lleva ingredientes de origen animal.",
    )
    ingredients: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Ingredientes en orden de receta (puede estar vacío).",
    )


class Juice(BaseModel):
    """Zumo embotellado; segundo tipo de producto con precio."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=64)
    price: Decimal = Field(..., ge=0, decimal_places=2)
    size_ml: int = Field(
        default=330,
        gt=0,
        description="Volumen de la botella en mililitros.",
    )

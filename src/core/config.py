"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) para que la CLI y el
logging lean la misma configuración tipada.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="SMOOTHIE_SHOP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    currency_symbol: str = Field(
        default="$",
        max_length=4,
        description="Símbolo de moneda para mostrar precios.",
    )
    price_decimals: int = Field(
        default=2,
        ge=0,
        le=4,
        description="Decimales al mostrar totales.",
    )
    cheap_threshold: Decimal = Field(
        default=Decimal("5.00"),
        ge=0,
        description="Umbral (estricto) de precio para considerar un smoothie 'barato'.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    def format_price(self, amount: Decimal) -> str:
        """Formatea un importe con el símbolo y decimales configurados."""

        return f"{self.currency_symbol}{amount:.{self.price_decimals}f}"

"""Configuración de logging (stdlib `logging` renderizado con Rich)."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "smoothie-shop"


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> None:
    """Instala un único RichHandler en el logger raíz.

    Si ya está instalado, solo actualiza el nivel.
    """

    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

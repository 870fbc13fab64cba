"""Atajo para lanzar `smoothie-shop` desde un checkout sin instalar.

    python main.py menu --sort price
    python main.py basket "Berry Bliss" "Citrus Sunrise"

Equivale al script de consola que instala `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path

_SRC = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(_SRC) not in sys.path:
        sys.path.insert(0, str(_SRC))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()

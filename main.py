"""Launcher de desarrollo: `python -m main ...` sin `pip install -e .`.

Añade `src/` al path y delega en `cli.main.run` (mismo comando que `v0-chat`).
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()

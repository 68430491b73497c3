"""Run `filepair` from a source checkout: `python -m main 10.txt 3.png`."""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    # `cli`, `core` and `adapters` live under src/ and are only importable
    # after `pip install -e .` unless src/ is on the path.
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()

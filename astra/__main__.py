"""Module entrypoint for running astra as ``python -m astra``."""

from __future__ import annotations

from astra.cli import main


if __name__ == "__main__":
    main()

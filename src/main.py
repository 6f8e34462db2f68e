"""Script entry point: ``python -m main`` from inside ``src/``."""

from __future__ import annotations

import sys

# Discord embeds and the CLI both print emoji; cp1252 consoles choke on them.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()

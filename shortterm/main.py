from __future__ import annotations

"""CLI entry point for the short-term memory trainer."""

from .app.cli import main


def cli() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    cli()

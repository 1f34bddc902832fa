"""Shared Scheduler application package."""

from __future__ import annotations

__all__ = ["main"]


def main() -> None:
    from .cli import main as cli_main

    raise SystemExit(cli_main())

"""regwalk CLI - Command line interface for regwalk."""

from __future__ import annotations

from regwalk.cli.commands import build_table, cli, generate_one, setup_logging


def main() -> None:
    """Main entry point for the regwalk CLI."""
    cli()


__all__ = [
    "main",
    "cli",
    "build_table",
    "generate_one",
    "setup_logging",
]

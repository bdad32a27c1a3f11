"""CLI entry point for ragsplit."""

from __future__ import annotations

import click

from ragsplit.cli.commands import split
from ragsplit.version import __version__


@click.group()
@click.version_option(version=__version__, prog_name="ragsplit")
def cli() -> None:
    """Split documents into overlapping chunks for retrieval."""


cli.add_command(split.split)


def main() -> None:
    """Run the ragsplit CLI."""
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()

"""CLI entry point for the texthash digest engine."""

from __future__ import annotations

import click

from texthash.cli.commands import (
    algorithms,
    check,
    hash_all,
    hash_lines,
    hash_text,
)


@click.group()
def cli() -> None:
    """Compute and check MD5 and SHA-family digests of text."""


cli.add_command(hash_text)
cli.add_command(hash_all)
cli.add_command(hash_lines)
cli.add_command(check)
cli.add_command(algorithms)

"""CLI command implementations for the texthash digest engine."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click

from texthash.domains.hashing.core.format_validation import looks_like_hash, matching_algorithms
from texthash.domains.hashing.services.hash_facade import HashFacade
from texthash.models.algorithm import AlgorithmIdentifier, get_algorithm_info
from texthash.models.config import Config
from texthash.utils.logger import configure_logging


def _get_config() -> Config:
    """Load configuration from the environment and .env file."""
    return Config()


def _parse_algorithm(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> AlgorithmIdentifier | None:
    """Click callback turning an algorithm name into an AlgorithmIdentifier."""
    if value is None:
        return None
    try:
        return AlgorithmIdentifier.parse(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


def _read_text(text: str | None, use_stdin: bool) -> str:
    """Resolve the input text from the argument or standard input."""
    if use_stdin:
        if text is not None:
            msg = "pass TEXT or --stdin, not both"
            raise click.UsageError(msg)
        return click.get_text_stream("stdin").read()
    if text is None:
        msg = "missing TEXT (or use --stdin)"
        raise click.UsageError(msg)
    return text


def _print_summary(title: str, stats: dict[str, Any]) -> None:
    """Print a formatted summary of batch operation results."""
    click.echo(f"\n[SUCCESS] {title}", err=True)
    for key, value in stats.items():
        if key == "errors" and isinstance(value, list):
            if value:
                click.echo(f"  Errors ({len(value)}):", err=True)
                for error in value[:10]:
                    click.echo(f"    - {error}", err=True)
                if len(value) > 10:
                    click.echo(f"    ... and {len(value) - 10} more", err=True)
        elif key != "results":
            click.echo(f"  {key}: {value}", err=True)


_algorithm_option = click.option(
    "--algorithm",
    "-a",
    default=None,
    callback=_parse_algorithm,
    help="MD5, SHA-1, SHA-256, SHA-384 or SHA-512 (default from config)",
)

_output_format_option = click.option(
    "--output-format",
    default="summary",
    type=click.Choice(["summary", "json"]),
    help="Output format",
)


@click.command(name="hash")
@click.argument("text", required=False)
@_algorithm_option
@click.option("--stdin", "use_stdin", is_flag=True, help="Read the text from standard input")
@_output_format_option
def hash_text(
    text: str | None,
    algorithm: AlgorithmIdentifier | None,
    use_stdin: bool,
    output_format: str,
) -> None:
    """Hash TEXT with one algorithm."""
    config = _get_config()
    configure_logging(config.log_level)
    selected = algorithm or config.algorithm
    message = _read_text(text, use_stdin)

    with HashFacade.from_config(config) as facade:
        result = facade.submit_one(message, selected).result()

    if output_format == "json":
        click.echo(json.dumps({"algorithm": selected.value, **result.model_dump()}, indent=2))
    elif result.success:
        click.echo(result.hash)
    else:
        click.echo(f"[ERROR] {selected.value}: {result.error}", err=True)

    if not result.success:
        sys.exit(1)


@click.command(name="hash-all")
@click.argument("text", required=False)
@click.option("--stdin", "use_stdin", is_flag=True, help="Read the text from standard input")
@_output_format_option
def hash_all(text: str | None, use_stdin: bool, output_format: str) -> None:
    """Hash TEXT with every supported algorithm."""
    config = _get_config()
    configure_logging(config.log_level)
    message = _read_text(text, use_stdin)

    with HashFacade.from_config(config) as facade:
        result = facade.compute_all(message)

    if output_format == "json":
        click.echo(json.dumps(result.model_dump(), indent=2))
    else:
        for algorithm in AlgorithmIdentifier:
            error = result.errors.get(algorithm.result_key)
            if error:
                click.echo(f"{algorithm.value}: [ERROR] {error}")
            else:
                click.echo(f"{algorithm.value}: {result.get(algorithm)}")

    if not result.success:
        sys.exit(1)


def _split_lines(content: str) -> list[str]:
    """Split file content on newlines only.

    ``read_text`` has already turned ``\\r\\n`` and ``\\r`` into ``\\n``. Other
    characters ``str.splitlines`` treats as boundaries, such as form feed or
    U+2028, stay inside the line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


@click.command(name="hash-lines")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_algorithm_option
@click.option("--skip-blank", is_flag=True, help="Do not print lines that are empty")
def hash_lines(file: Path, algorithm: AlgorithmIdentifier | None, skip_blank: bool) -> None:
    """Hash every line of FILE as a separate message."""
    config = _get_config()
    configure_logging(config.log_level)
    selected = algorithm or config.algorithm
    try:
        lines = _split_lines(file.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        click.echo(f"[ERROR] {file} is not valid UTF-8: {exc.reason} at byte {exc.start}", err=True)
        sys.exit(1)

    click.echo(f"[INFO] Hashing {len(lines)} lines with {selected.value}...", err=True)
    with HashFacade.from_config(config) as facade:
        batch = facade.compute_many(lines, selected)

    for line, result in zip(lines, batch.results, strict=True):
        if skip_blank and not line:
            continue
        digest = result.hash if result.success else f"[ERROR] {result.error}"
        click.echo(f"{digest}  {line}")

    _print_summary("Line hashing complete", batch.model_dump(exclude={"results"}))
    if batch.failed:
        sys.exit(1)


@click.command()
@click.argument("candidate")
@_algorithm_option
def check(candidate: str, algorithm: AlgorithmIdentifier | None) -> None:
    """Check whether CANDIDATE is shaped like a hex digest."""
    config = _get_config()
    configure_logging(config.log_level)

    if algorithm is not None:
        if looks_like_hash(candidate, algorithm):
            click.echo(f"[OK] Looks like a {algorithm.value} digest")
            return
        click.echo(
            f"[NO] Not a {algorithm.value} digest "
            f"(expected {algorithm.hex_length} hex characters, got {len(candidate)} characters)"
        )
        sys.exit(1)

    matches = matching_algorithms(candidate)
    if not matches:
        click.echo("[NO] Does not look like any supported digest")
        sys.exit(1)
    click.echo(f"[OK] Looks like: {', '.join(match.value for match in matches)}")


@click.command()
def algorithms() -> None:
    """List supported algorithms."""
    for algorithm in AlgorithmIdentifier:
        info = get_algorithm_info(algorithm)
        click.echo(
            f"  {info.algorithm.value:<8} {info.bits:>4} bits  "
            f"{info.hex_length:>3} hex chars  {info.description}"
        )

"""Inspect command - Structured view of a buildx builder."""

import sys
from pathlib import Path
from typing import Optional

import typer
from bxkit_common import BxkitError
from bxkit_sdk.buildx import Builder, parse_inspect

from .utils import OutputFormat, emit, error


def inspect(
    name: Optional[str] = typer.Argument(None, help="Builder name to inspect with buildx"),
    file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Parse saved `buildx inspect` output instead ('-' reads stdin)",
    ),
    fmt: OutputFormat = typer.Option(OutputFormat.json, "--format", help="Output format"),
):
    """
    Print a builder as JSON or YAML.

    \b
    Examples:
        # Run buildx inspect and parse it
        bxkit inspect mybuilder

        # Parse output captured earlier
        docker buildx inspect mybuilder | bxkit inspect --file -
    """
    try:
        if file is not None:
            text = sys.stdin.read() if file == "-" else Path(file).read_text()
            builder = parse_inspect(text)
        elif name:
            builder = Builder().inspect(name)
        else:
            error("Give a builder name or --file")
            raise typer.Exit(2)
    except OSError as e:
        error(f"Cannot read {file}: {e}")
        raise typer.Exit(1)
    except BxkitError as e:
        error(e.message)
        raise typer.Exit(1)

    emit(builder.model_dump(mode="json", exclude_none=True), fmt)

"""Shared output helpers for bxkit CLI commands."""

import json
from enum import Enum
from typing import Any

import typer
import yaml
from rich.console import Console

# Results go to stdout through typer.echo, messages to stderr
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    json = "json"
    yaml = "yaml"


def error(message: str) -> None:
    err_console.print(f"[bold red]✗[/bold red] {message}", highlight=False)


def emit(data: Any, fmt: OutputFormat = OutputFormat.json) -> None:
    """Print structured data to stdout in the requested format."""
    if fmt == OutputFormat.yaml:
        typer.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip())
    else:
        typer.echo(json.dumps(data, indent=2, default=str))

"""Secret commands - Turn KEY=VALUE inputs into buildx --secret references."""

from typing import Callable

import typer
from bxkit_common import BxkitError
from bxkit_sdk.buildx import resolve_secret_env, resolve_secret_file, resolve_secret_string

from .utils import error

app = typer.Typer(no_args_is_help=True)


def _resolve(resolver: Callable[[str], str], kvp: str) -> None:
    try:
        typer.echo(resolver(kvp))
    except BxkitError as e:
        error(e.message)
        raise typer.Exit(1)


@app.command(name="env")
def secret_env(kvp: str = typer.Argument(..., help="KEY=ENV_VAR_NAME")):
    """Reference a secret held in an environment variable."""
    _resolve(resolve_secret_env, kvp)


@app.command(name="string")
def secret_string(kvp: str = typer.Argument(..., help="KEY=VALUE")):
    """Write VALUE to a temp file and reference it."""
    _resolve(resolve_secret_string, kvp)


@app.command(name="file")
def secret_file(kvp: str = typer.Argument(..., help="KEY=PATH")):
    """Copy PATH to a temp file and reference it."""
    _resolve(resolve_secret_file, kvp)

"""bxkit CLI - Main entry point."""

from typing import Optional

import typer
from bxkit_common import LOG_LEVELS, configure_logging

from . import inspect_cmd, metadata_cmd, options_cmd, secret_cmd
from .utils import error

app = typer.Typer(
    name="bxkit",
    help="bxkit CLI - Parse and resolve docker buildx data for CI steps",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR); defaults to BXKIT_LOG_LEVEL",
    ),
):
    if log_level and log_level.upper() not in LOG_LEVELS:
        error(f"Unknown log level {log_level} (choose from {', '.join(LOG_LEVELS)})")
        raise typer.Exit(2)
    configure_logging("bxkit_cli", log_level)


# Register all commands
app.command()(inspect_cmd.inspect)
app.command()(options_cmd.provenance)
app.command()(options_cmd.attest)
app.command()(options_cmd.exporters)
app.command()(metadata_cmd.metadata)

# Register command groups
app.add_typer(secret_cmd.app, name="secret", help="Resolve build secrets")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

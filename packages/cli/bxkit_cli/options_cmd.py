"""Build option commands - Normalize provenance, attestation and exporter values."""

from typing import List, Optional

import typer
from bxkit_common import BxkitError
from bxkit_sdk.buildx import (
    Build,
    has_attestation_type,
    has_docker_exporter,
    has_local_exporter,
    has_tar_exporter,
    resolve_attestation_attrs,
    resolve_provenance_attrs,
)

from .utils import OutputFormat, emit, error


def provenance(
    value: str = typer.Argument("", help="Provenance value (true, false or attributes)"),
    input_name: Optional[str] = typer.Option(
        None,
        "--input",
        "-i",
        help="Read the value from workflow input NAME instead",
    ),
):
    """
    Print provenance attributes with a builder id.

    \b
    Examples:
        bxkit provenance mode=max
        bxkit provenance --input provenance
    """
    try:
        if input_name:
            typer.echo(Build.get_provenance_input(input_name))
        else:
            typer.echo(resolve_provenance_attrs(value))
    except BxkitError as e:
        error(e.message)
        raise typer.Exit(1)


def attest(
    attrs: str = typer.Argument(..., help="Attestation attributes, e.g. type=sbom,true"),
    has_type: Optional[str] = typer.Option(
        None,
        "--has-type",
        help="Only check whether the attestation is of this type (prints true/false)",
    ),
):
    """Print attestation attributes with bare booleans turned into disabled=."""
    if has_type:
        typer.echo(str(has_attestation_type(has_type, attrs)).lower())
        return
    typer.echo(resolve_attestation_attrs(attrs))


def exporters(
    outputs: Optional[List[str]] = typer.Argument(None, help="Exporter values as given to --output"),
    load: bool = typer.Option(False, "--load", help="The build also uses --load"),
    fmt: OutputFormat = typer.Option(OutputFormat.json, "--format", help="Output format"),
):
    """Classify exporters as local, tar and/or docker."""
    outputs = outputs or []
    emit(
        {
            "local": has_local_exporter(outputs),
            "tar": has_tar_exporter(outputs),
            "docker": has_docker_exporter(outputs, load),
        },
        fmt,
    )

"""Metadata command - Resolve what a finished build produced."""

from typing import Optional

import typer
from bxkit_common import BxkitError
from bxkit_sdk.buildx import Build

from .utils import OutputFormat, emit, error


def metadata(
    directory: Optional[str] = typer.Option(
        None,
        "--dir",
        "-d",
        help="Directory holding iidfile and metadata-file (defaults to the bxkit temp dir)",
    ),
    fmt: OutputFormat = typer.Option(OutputFormat.json, "--format", help="Output format"),
):
    """Print image ID, build ref and digests of the last build."""
    build = Build(tmp_dir=directory)
    try:
        result = {
            "image_id": build.resolve_image_id(),
            "ref": build.resolve_ref(),
            "digest": build.resolve_digest(),
            "config_digest": build.resolve_config_digest(),
        }
    except ValueError as e:
        error(f"Invalid metadata file {build.metadata_file_path}: {e}")
        raise typer.Exit(1)
    except BxkitError as e:
        error(e.message)
        raise typer.Exit(1)
    emit(result, fmt)

"""
bxkit Buildx
============

Parsing and resolution helpers around the buildx CLI:

- Builder inspection parsing (builder)
- Build result files and provenance input (build)
- Secret references (secrets)
- Exporter classification (exporters)
- Attestation / provenance attributes (attestations)

Usage:
    from bxkit_sdk.buildx import parse_inspect, resolve_secret_env

    builder = parse_inspect(stdout)
    secret = resolve_secret_env("GIT_AUTH_TOKEN=GITHUB_TOKEN")
"""

from .attestations import (
    has_attestation_type,
    parse_bool,
    resolve_attestation_attrs,
    resolve_provenance_attrs,
)
from .build import Build
from .builder import Builder, InspectKey, parse_inspect
from .buildx import Buildx, Command
from .exporters import has_docker_exporter, has_exporter_type, has_local_exporter, has_tar_exporter
from .secrets import (
    has_git_auth_token_secret,
    parse_secret_kvp,
    resolve_secret_env,
    resolve_secret_file,
    resolve_secret_string,
)

__all__ = [
    # Commands
    "Buildx",
    "Command",
    # Builder inspection
    "Builder",
    "InspectKey",
    "parse_inspect",
    # Build results
    "Build",
    # Secrets
    "parse_secret_kvp",
    "resolve_secret_env",
    "resolve_secret_string",
    "resolve_secret_file",
    "has_git_auth_token_secret",
    # Exporters
    "has_exporter_type",
    "has_local_exporter",
    "has_tar_exporter",
    "has_docker_exporter",
    # Attestations
    "parse_bool",
    "has_attestation_type",
    "resolve_attestation_attrs",
    "resolve_provenance_attrs",
]

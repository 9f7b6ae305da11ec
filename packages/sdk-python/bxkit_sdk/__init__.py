"""bxkit SDK - helpers for driving docker and buildx from CI automation.

This package provides tools for:
- Parsing `buildx inspect` output into structured builder records
- Resolving build results (image ID, metadata, ref, digest)
- Validating and encoding build secrets
- Classifying exporters and normalizing attestation/provenance attributes
- Reading workflow inputs and run identity

Example:
    >>> from bxkit_sdk import parse_inspect, resolve_secret_env
    >>> parse_inspect("Name: builder\\nDriver: docker").driver
    'docker'
    >>> resolve_secret_env("TOKEN=GITHUB_TOKEN")
    'id=TOKEN,env=GITHUB_TOKEN'
"""

from .buildx import (
    Build,
    Builder,
    Buildx,
    has_attestation_type,
    has_docker_exporter,
    has_git_auth_token_secret,
    has_local_exporter,
    has_tar_exporter,
    parse_inspect,
    resolve_attestation_attrs,
    resolve_provenance_attrs,
    resolve_secret_env,
    resolve_secret_file,
    resolve_secret_string,
)
from .context import Context
from .docker import Docker
from .exec import ExecOutput, exec_command, get_exec_output
from .github import GitHubContext, workflow_run_url
from .inputs import get_boolean_input, get_input, get_input_list

__version__ = "0.1.0"

__all__ = [
    # Buildx
    "Buildx",
    "Builder",
    "Build",
    "parse_inspect",
    "resolve_secret_env",
    "resolve_secret_string",
    "resolve_secret_file",
    "has_git_auth_token_secret",
    "has_local_exporter",
    "has_tar_exporter",
    "has_docker_exporter",
    "has_attestation_type",
    "resolve_attestation_attrs",
    "resolve_provenance_attrs",

    # Docker
    "Docker",

    # Environment
    "Context",
    "GitHubContext",
    "workflow_run_url",
    "get_input",
    "get_boolean_input",
    "get_input_list",

    # Exec
    "ExecOutput",
    "get_exec_output",
    "exec_command",
]

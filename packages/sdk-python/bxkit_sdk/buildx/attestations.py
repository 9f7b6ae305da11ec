"""
Attestation and Provenance Attributes
=====================================

Normalizes the `--attest` and `--provenance` values passed to buildx.

Usage:
    from bxkit_sdk.buildx.attestations import resolve_attestation_attrs

    resolve_attestation_attrs("type=provenance,true")
    # 'type=provenance,disabled=false'
"""

from typing import Optional

from bxkit_common.constants import (
    BUILDER_ID_KEY,
    INPUT_BOOL_FALSE,
    INPUT_BOOL_TRUE,
    PARSE_BOOL_FALSE,
    PARSE_BOOL_TRUE,
)
from bxkit_common.logger import get_logger

from ..github import workflow_run_url
from .attrs import has_attr, join_fields, parse_fields, parse_records, split_attr

logger = get_logger(__name__)


def parse_bool(value: str) -> Optional[bool]:
    """Parse a boolean token the way buildx does; None if it is not one."""
    if value in PARSE_BOOL_TRUE:
        return True
    if value in PARSE_BOOL_FALSE:
        return False
    return None


def has_attestation_type(name: str, attrs: str) -> bool:
    """True iff `attrs` contains `type=<name>`."""
    return has_attr(attrs, "type", name)


def resolve_attestation_attrs(attrs: str) -> str:
    """
    Rewrite bare boolean tokens into `disabled=` attributes.

    Examples:
        >>> resolve_attestation_attrs("type=provenance,false")
        'type=provenance,disabled=true'
        >>> resolve_attestation_attrs("type=sbom,generator=image")
        'type=sbom,generator=image'
    """
    resolved = []
    for field in parse_fields(attrs):
        enabled = parse_bool(field)
        if enabled is None:
            resolved.append(field)
        else:
            resolved.append(f"disabled={str(not enabled).lower()}")
    return join_fields(resolved)


def resolve_provenance_attrs(value: str) -> str:
    """
    Make sure provenance attributes carry a builder id.

    An empty or true value becomes `builder-id=<run url>` and a false value
    becomes `false`. Otherwise the value is returned as is when it already has
    a `builder-id` attribute, and with `,builder-id=<run url>` appended when
    it does not.
    """
    if not value or value in INPUT_BOOL_TRUE:
        return f"{BUILDER_ID_KEY}={workflow_run_url()}"
    if value in INPUT_BOOL_FALSE:
        return "false"
    records = parse_records(value)
    fields = records[0] if records else []
    for field in fields:
        if split_attr(field)[0] == BUILDER_ID_KEY:
            return value
    logger.debug("Adding default builder id to provenance attributes")
    return f"{value},{BUILDER_ID_KEY}={workflow_run_url()}"

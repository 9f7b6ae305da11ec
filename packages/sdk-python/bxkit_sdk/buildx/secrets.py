"""
Secret Resolution
=================

Turns `KEY=VALUE` secret inputs into the references buildx expects for
`--secret`:

- `id=KEY,env=NAME` when the content comes from an environment variable
- `id=KEY,src=PATH` when the content is written to a temp file

The raw secret value never appears in the returned reference and is never
logged.
"""

from typing import List, Tuple

from bxkit_common import NotFoundError, ValidationError
from bxkit_common.constants import GIT_AUTH_TOKEN
from bxkit_common.logger import get_logger

from ..context import Context

logger = get_logger(__name__)


def parse_secret_kvp(kvp: str) -> Tuple[str, str]:
    """
    Split a `KEY=VALUE` secret on its first '='.

    Raises:
        ValidationError: If there is no '=', or key or value is empty
    """
    key, sep, value = kvp.partition("=")
    if not sep or not key or not value:
        raise ValidationError(f"{kvp} is not a valid secret")
    return key, value


def _write_secret(content: bytes) -> str:
    secret_file = Context.tmp_name(tmpdir=Context.tmp_dir())
    with open(secret_file, "wb") as f:
        f.write(content)
    return secret_file


def resolve_secret_string(kvp: str) -> str:
    """`KEY=VALUE` -> `id=KEY,src=<temp file holding VALUE>`."""
    key, value = parse_secret_kvp(kvp)
    secret_file = _write_secret(value.encode("utf-8"))
    logger.debug("Resolved string secret", secret_id=key)
    return f"id={key},src={secret_file}"


def resolve_secret_file(kvp: str) -> str:
    """
    `KEY=PATH` -> `id=KEY,src=<temp file holding a byte copy of PATH>`.

    Raises:
        ValidationError: If `kvp` is malformed
        NotFoundError: If PATH is missing or cannot be read as a file
    """
    key, path = parse_secret_kvp(kvp)
    try:
        with open(path, "rb") as f:
            content = f.read()
    except OSError as e:
        raise NotFoundError(f"secret file {path} not found") from e
    secret_file = _write_secret(content)
    logger.debug("Resolved file secret", secret_id=key, source=path)
    return f"id={key},src={secret_file}"


def resolve_secret_env(kvp: str) -> str:
    """`KEY=NAME` -> `id=KEY,env=NAME`."""
    key, value = parse_secret_kvp(kvp)
    return f"id={key},env={value}"


def has_git_auth_token_secret(secrets: List[str]) -> bool:
    """True iff one of the secrets is keyed GIT_AUTH_TOKEN."""
    return any(secret.startswith(f"{GIT_AUTH_TOKEN}=") for secret in secrets)

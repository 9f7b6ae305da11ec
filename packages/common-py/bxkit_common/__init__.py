"""
bxkit Common - shared utilities for all bxkit packages.

Provides:
- Exception hierarchy (errors)
- Structured JSON logger (logger)
- Environment variable names, file names and defaults (constants)
"""

from .constants import (
    BUILDER_ID_KEY,
    GIT_AUTH_TOKEN,
    INPUT_BOOL_FALSE,
    INPUT_BOOL_TRUE,
    LOG_LEVELS,
    PARSE_BOOL_FALSE,
    PARSE_BOOL_TRUE,
    BuildFiles,
    Defaults,
    EnvVars,
    MetadataKeys,
)
from .errors import BxkitError, CommandError, ConfigError, NotFoundError, ValidationError
from .logger import BxkitLogger, configure_logging, get_logger

__all__ = [
    # Errors
    "BxkitError",
    "ValidationError",
    "NotFoundError",
    "CommandError",
    "ConfigError",
    # Logging
    "BxkitLogger",
    "get_logger",
    "configure_logging",
    # Constants
    "EnvVars",
    "Defaults",
    "BuildFiles",
    "MetadataKeys",
    "BUILDER_ID_KEY",
    "GIT_AUTH_TOKEN",
    "PARSE_BOOL_TRUE",
    "PARSE_BOOL_FALSE",
    "INPUT_BOOL_TRUE",
    "INPUT_BOOL_FALSE",
    "LOG_LEVELS",
]

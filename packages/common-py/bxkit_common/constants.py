"""
bxkit Constants

Single source of truth for environment variable names, file names and
default values shared across bxkit packages.
"""

from typing import FrozenSet


class EnvVars:
    """Environment variables read by bxkit."""

    GITHUB_SERVER_URL = "GITHUB_SERVER_URL"
    GITHUB_REPOSITORY = "GITHUB_REPOSITORY"
    GITHUB_RUN_ID = "GITHUB_RUN_ID"
    GITHUB_RUN_ATTEMPT = "GITHUB_RUN_ATTEMPT"
    RUNNER_TEMP = "RUNNER_TEMP"
    DOCKER_CONFIG = "DOCKER_CONFIG"
    LOG_LEVEL = "BXKIT_LOG_LEVEL"
    INPUT_PREFIX = "INPUT_"


class Defaults:
    """Fallback values when the environment is silent."""

    GITHUB_SERVER_URL = "https://github.com"
    GITHUB_RUN_ATTEMPT = "1"
    LOG_LEVEL = "INFO"
    DOCKER_CONFIG_DIRNAME = ".docker"
    DOCKER_CONFIG_FILENAME = "config.json"
    TMP_DIR_PREFIX = "docker-actions-toolkit-"


class BuildFiles:
    """File names buildx writes build results to inside the temp dir."""

    IMAGE_ID = "iidfile"
    METADATA = "metadata-file"


class MetadataKeys:
    """Well-known keys of the buildx metadata file."""

    BUILD_REF = "buildx.build.ref"
    IMAGE_DIGEST = "containerimage.digest"
    CONFIG_DIGEST = "containerimage.config.digest"


# Attribute keys and literals used by build option resolution
BUILDER_ID_KEY = "builder-id"
GIT_AUTH_TOKEN = "GIT_AUTH_TOKEN"

# Boolean spellings accepted for bare attestation tokens (strconv.ParseBool)
PARSE_BOOL_TRUE: FrozenSet[str] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
PARSE_BOOL_FALSE: FrozenSet[str] = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# Boolean spellings accepted for action inputs (YAML 1.2 core schema)
INPUT_BOOL_TRUE: FrozenSet[str] = frozenset({"true", "True", "TRUE"})
INPUT_BOOL_FALSE: FrozenSet[str] = frozenset({"false", "False", "FALSE"})

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

"""
Docker CLI Helpers
==================

Locates the Docker CLI configuration and wraps the few `docker` commands
bxkit needs.
"""

import json
import os
import shutil
from typing import Any, Dict, List, Optional

from bxkit_common import CommandError
from bxkit_common.constants import Defaults, EnvVars
from bxkit_common.logger import get_logger
from bxkit_schema import ConfigFile

from .exec import ExecOutput, exec_command, get_exec_output

logger = get_logger(__name__)


def _check(res: ExecOutput) -> ExecOutput:
    if res.stderr and res.exit_code != 0:
        raise CommandError(res.stderr.strip(), exit_code=res.exit_code)
    return res


class Docker:
    """Static helpers around the `docker` binary."""

    @staticmethod
    def config_dir() -> str:
        """DOCKER_CONFIG, or ~/.docker when unset or empty."""
        return os.environ.get(EnvVars.DOCKER_CONFIG) or os.path.join(
            os.path.expanduser("~"), Defaults.DOCKER_CONFIG_DIRNAME
        )

    @staticmethod
    def config_file() -> Optional[ConfigFile]:
        """
        Parse config.json from the config dir.

        Returns:
            ConfigFile, or None if the file does not exist
        """
        path = os.path.join(Docker.config_dir(), Defaults.DOCKER_CONFIG_FILENAME)
        if not os.path.exists(path):
            logger.debug("Docker config file not found", path=path)
            return None
        with open(path, "r", encoding="utf-8") as f:
            return ConfigFile.model_validate(json.load(f))

    @staticmethod
    def is_available() -> bool:
        available = shutil.which("docker") is not None
        if not available:
            logger.debug("Docker CLI not found in PATH")
        return available

    @staticmethod
    def context() -> str:
        """Name of the current docker context."""
        res = _check(
            get_exec_output(
                "docker",
                ["context", "inspect", "--format", "{{.Name}}"],
                ignore_return_code=True,
                silent=True,
            )
        )
        return res.stdout.strip()

    @staticmethod
    def context_inspect(name: Optional[str] = None) -> Dict[str, Any]:
        """Inspect a docker context (the current one when `name` is None)."""
        args: List[str] = ["context", "inspect", "--format=json"]
        if name:
            args.append(name)
        res = _check(get_exec_output("docker", args, ignore_return_code=True, silent=True))
        return json.loads(res.stdout)[0]

    @staticmethod
    def print_version() -> None:
        exec_command("docker", ["version"])

    @staticmethod
    def print_info() -> None:
        exec_command("docker", ["info"])

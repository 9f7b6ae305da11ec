"""
External Command Execution
==========================

Runs docker/buildx binaries and captures what they print. This is the only
module in bxkit that spawns processes.
"""

import subprocess
import sys
from dataclasses import dataclass
from typing import List, Optional

from bxkit_common import CommandError
from bxkit_common.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ExecOutput:
    """Captured result of a finished command."""

    stdout: str
    stderr: str
    exit_code: int

    def __bool__(self) -> bool:
        return self.exit_code == 0


def _run(cmd: List[str], capture: bool) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(cmd, capture_output=capture, text=True, check=False)
    except FileNotFoundError as e:
        raise CommandError(f"Unable to locate executable file: {cmd[0]}") from e


def get_exec_output(
    command: str,
    args: Optional[List[str]] = None,
    ignore_return_code: bool = False,
    silent: bool = False,
) -> ExecOutput:
    """
    Run a command and capture stdout/stderr.

    Args:
        command: Executable name or path
        args: Arguments
        ignore_return_code: Return the output instead of raising on failure
        silent: Do not echo the captured output

    Returns:
        ExecOutput with decoded stdout, stderr and exit code

    Raises:
        CommandError: If the executable is missing, or it fails and
            ignore_return_code is False
    """
    cmd = [command, *(args or [])]
    logger.debug("Running command", command=" ".join(cmd))
    proc = _run(cmd, capture=True)
    result = ExecOutput(stdout=proc.stdout or "", stderr=proc.stderr or "", exit_code=proc.returncode)

    if not silent:
        sys.stdout.write(result.stdout)
        sys.stderr.write(result.stderr)

    if result.exit_code != 0 and not ignore_return_code:
        raise CommandError(
            result.stderr.strip() or f"{command} failed with exit code {result.exit_code}",
            exit_code=result.exit_code,
        )
    return result


def exec_command(command: str, args: Optional[List[str]] = None) -> int:
    """
    Run a command with its output going straight to the terminal.

    Raises:
        CommandError: If the command exits non-zero
    """
    cmd = [command, *(args or [])]
    logger.debug("Running command", command=" ".join(cmd))
    proc = _run(cmd, capture=False)
    if proc.returncode != 0:
        raise CommandError(f"{command} failed with exit code {proc.returncode}", exit_code=proc.returncode)
    return proc.returncode

"""
Buildx Command Resolution
=========================

buildx is either a Docker CLI plugin (`docker buildx ...`) or a standalone
binary (`buildx ...`). Standalone mode is used when no docker CLI is around.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..docker import Docker


@dataclass
class Command:
    """Executable plus arguments."""

    command: str
    args: List[str] = field(default_factory=list)

    def argv(self) -> List[str]:
        return [self.command, *self.args]


class Buildx:
    """Builds buildx command lines."""

    def __init__(self, standalone: Optional[bool] = None):
        """
        Args:
            standalone: Force standalone (True) or plugin (False) mode;
                detected from the docker CLI availability when None
        """
        self._standalone = standalone

    def is_standalone(self) -> bool:
        if self._standalone is None:
            self._standalone = not Docker.is_available()
        return self._standalone

    def get_command(self, args: List[str]) -> Command:
        if self.is_standalone():
            return Command("buildx", list(args))
        return Command("docker", ["buildx", *args])

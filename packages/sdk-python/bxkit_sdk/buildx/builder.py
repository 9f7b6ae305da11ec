"""
Builder Inspection
==================

Runs `buildx inspect` and parses its text output into a BuilderInfo.

The output looks like:

    Name:          mybuilder
    Driver:        docker-container
    Last Activity: 2023-01-16 09:45:23 +0000 UTC

    Nodes:
    Name:      mybuilder0
    Endpoint:  unix:///var/run/docker.sock
    Status:    running
    Buildkit:  v0.11.0
    Platforms: linux/amd64, linux/arm64

The format varies across buildx versions, so the parser keeps what it
recognizes and skips everything else instead of failing.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from bxkit_common import CommandError
from bxkit_common.logger import get_logger
from bxkit_schema import BuilderInfo, NodeInfo

from ..exec import get_exec_output
from .buildx import Buildx

logger = get_logger(__name__)

_DRIVER_OPT_RE = re.compile(r'([\w.-]+)="([^"]*)"')
_ZONE_ABBREV_RE = re.compile(r"\s+[A-Z]{2,5}$")
_DATETIME_FORMATS = ("%Y-%m-%d %H:%M:%S %z", "%Y-%m-%d %H:%M:%S.%f %z")


class InspectKey(Enum):
    """Keys of `buildx inspect` output that carry builder or node data."""

    NAME = "name"
    DRIVER = "driver"
    LAST_ACTIVITY = "last activity"
    ENDPOINT = "endpoint"
    DRIVER_OPTIONS = "driver options"
    STATUS = "status"
    FLAGS = "flags"
    BUILDKIT = "buildkit"
    PLATFORMS = "platforms"

    @classmethod
    def lookup(cls, key: str) -> Optional["InspectKey"]:
        try:
            return cls(key.lower())
        except ValueError:
            return None


def parse_datetime(value: str) -> Optional[datetime]:
    """Parse a Go-formatted timestamp such as `2023-01-16 09:45:23 +0000 UTC`."""
    text = _ZONE_ABBREV_RE.sub("", value.strip())
    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Unparseable last activity", value=value)
        return None


def parse_driver_opts(value: str) -> List[str]:
    """`image="moby/buildkit" network="host"` -> ['image=moby/buildkit', 'network=host']"""
    return [f"{key}={val}" for key, val in _DRIVER_OPT_RE.findall(value)]


def parse_platforms(value: str) -> str:
    """
    Join the platform list, keeping only preferred platforms when any is starred.

    Examples:
        >>> parse_platforms("linux/amd64*, linux/arm64")
        'linux/amd64'
        >>> parse_platforms("linux/amd64, linux/arm64")
        'linux/amd64,linux/arm64'
    """
    platforms = [p.strip() for p in value.split(",") if p.strip()]
    if "*" in value:
        platforms = [p.replace("*", "", 1) for p in platforms if "*" in p]
    return ",".join(platforms)


def _split_line(line: str):
    key, *rest = line.split(":")
    return key.strip(), ":".join(part.strip() for part in rest)


def parse_inspect(data: str) -> BuilderInfo:
    """
    Parse `buildx inspect` output.

    The first `Name` line names the builder; every following `Name` line
    starts a new node. Node fields seen before the next `Name` line (or the
    end of input) belong to the current node.

    Args:
        data: Raw stdout of `buildx inspect`

    Returns:
        BuilderInfo; never raises on unexpected content
    """
    builder: Dict[str, Any] = {}
    nodes: List[NodeInfo] = []
    node = NodeInfo()

    for line in data.strip().split("\n"):
        key, value = _split_line(line)
        if not key or not value:
            continue
        kind = InspectKey.lookup(key)
        if kind is None:
            continue

        if kind is InspectKey.NAME:
            if "name" not in builder:
                builder["name"] = value
            else:
                if not node.is_empty():
                    nodes.append(node)
                    node = NodeInfo()
                node.name = value
        elif kind is InspectKey.DRIVER:
            builder["driver"] = value
        elif kind is InspectKey.LAST_ACTIVITY:
            builder["last_activity"] = parse_datetime(value)
        elif kind is InspectKey.ENDPOINT:
            node.endpoint = value
        elif kind is InspectKey.DRIVER_OPTIONS:
            node.driver_opts = parse_driver_opts(value)
        elif kind is InspectKey.STATUS:
            node.status = value
        elif kind is InspectKey.FLAGS:
            node.buildkitd_flags = value
        elif kind is InspectKey.BUILDKIT:
            node.buildkit_version = value
        elif kind is InspectKey.PLATFORMS:
            node.platforms = parse_platforms(value)

    if not node.is_empty():
        nodes.append(node)
    return BuilderInfo(**builder, nodes=nodes)


class Builder:
    """Inspects buildx builder instances."""

    def __init__(self, buildx: Optional[Buildx] = None):
        self.buildx = buildx or Buildx()

    def inspect(self, name: str) -> BuilderInfo:
        """
        Run `buildx inspect <name>` and parse the result.

        Raises:
            CommandError: If the command fails with output on stderr
        """
        cmd = self.buildx.get_command(["inspect", name])
        res = get_exec_output(cmd.command, cmd.args, ignore_return_code=True, silent=True)
        if res.stderr and res.exit_code != 0:
            raise CommandError(res.stderr.strip(), exit_code=res.exit_code)
        builder = parse_inspect(res.stdout)
        logger.debug("Inspected builder", builder=builder.name, nodes=len(builder.nodes))
        return builder

"""
Builder Models

Pydantic models for the structured form of `buildx inspect` output.

A builder is made of one or more nodes; every node carries its own
endpoint, driver options, status and platform set.

Usage:
    from bxkit_schema import BuilderInfo, NodeInfo

    builder = BuilderInfo(name="mybuilder", driver="docker-container")
    builder.nodes.append(NodeInfo(name="mybuilder0", status="running"))
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NodeInfo(BaseModel):
    """
    One execution node within a builder.

    Attributes:
        name: Node name
        endpoint: Docker endpoint or context the node talks to
        driver_opts: Driver options as ordered "key=value" strings
        status: Node status (e.g. "running", "inactive")
        buildkitd_flags: Flags buildkitd was started with
        buildkit_version: BuildKit version reported by the node
        platforms: Comma-joined platform identifiers
    """

    name: Optional[str] = None
    endpoint: Optional[str] = None
    driver_opts: Optional[List[str]] = None
    status: Optional[str] = None
    buildkitd_flags: Optional[str] = None
    buildkit_version: Optional[str] = None
    platforms: Optional[str] = None

    model_config = ConfigDict(validate_assignment=True)

    def is_empty(self) -> bool:
        """True when no field has been set."""
        return not self.model_dump(exclude_none=True)


class BuilderInfo(BaseModel):
    """
    One builder instance.

    Nodes keep the order in which they appear in the inspect output.
    """

    name: Optional[str] = None
    driver: Optional[str] = None
    last_activity: Optional[datetime] = None
    nodes: List[NodeInfo] = Field(default_factory=list)

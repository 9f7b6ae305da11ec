"""
bxkit Schema - pydantic models for docker and buildx data.

Pure data: no process execution and no file I/O happen here.
"""

from typing import Any, Dict

from .builder import BuilderInfo, NodeInfo
from .docker import AuthConfig, ConfigFile, ProxyConfig

# Content of the buildx --metadata-file; free-form, see MetadataKeys for the known keys
BuildMetadata = Dict[str, Any]

__all__ = [
    "BuilderInfo",
    "NodeInfo",
    "BuildMetadata",
    "ConfigFile",
    "AuthConfig",
    "ProxyConfig",
]

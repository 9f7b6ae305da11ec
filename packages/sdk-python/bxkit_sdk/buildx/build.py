"""
Build Results
=============

Reads what `buildx build --iidfile ... --metadata-file ...` left behind and
resolves the provenance input of a build step.

Usage:
    from bxkit_sdk.buildx import Build

    build = Build()
    args = ["--iidfile", build.image_id_file_path, "--metadata-file", build.metadata_file_path]
    # ... run buildx build ...
    digest = build.resolve_digest()
"""

import json
import os
from typing import Any, Optional

from bxkit_common import ValidationError
from bxkit_common.constants import BuildFiles, MetadataKeys
from bxkit_common.logger import get_logger
from bxkit_schema import BuildMetadata

from ..context import Context
from ..inputs import get_boolean_input, get_input
from .attestations import resolve_provenance_attrs

logger = get_logger(__name__)


class Build:
    """Locations and readers for buildx build result files."""

    def __init__(self, tmp_dir: Optional[str] = None):
        """
        Args:
            tmp_dir: Directory holding the result files (defaults to Context.tmp_dir())
        """
        self._tmp_dir = tmp_dir

    @property
    def tmp_dir(self) -> str:
        if self._tmp_dir is None:
            self._tmp_dir = Context.tmp_dir()
        return self._tmp_dir

    @property
    def image_id_file_path(self) -> str:
        return os.path.join(self.tmp_dir, BuildFiles.IMAGE_ID)

    @property
    def metadata_file_path(self) -> str:
        return os.path.join(self.tmp_dir, BuildFiles.METADATA)

    def resolve_image_id(self) -> Optional[str]:
        """Image ID written by --iidfile, or None if there is none."""
        if not os.path.exists(self.image_id_file_path):
            return None
        with open(self.image_id_file_path, "r", encoding="utf-8") as f:
            return f.read().strip()

    def resolve_metadata(self) -> Optional[BuildMetadata]:
        """
        Parsed --metadata-file content, or None if missing or `null`.

        Raises:
            ValueError: If the file is not valid JSON
            ValidationError: If the JSON is not an object
        """
        if not os.path.exists(self.metadata_file_path):
            return None
        with open(self.metadata_file_path, "r", encoding="utf-8") as f:
            content = f.read().strip()
        if not content or content == "null":
            return None
        metadata = json.loads(content)
        if not isinstance(metadata, dict):
            raise ValidationError(f"Build metadata is not a JSON object: {self.metadata_file_path}")
        return metadata

    def _metadata_value(self, key: str) -> Optional[Any]:
        metadata = self.resolve_metadata()
        if metadata is None:
            return None
        return metadata.get(key)

    def resolve_ref(self) -> Optional[str]:
        return self._metadata_value(MetadataKeys.BUILD_REF)

    def resolve_digest(self) -> Optional[str]:
        return self._metadata_value(MetadataKeys.IMAGE_DIGEST)

    def resolve_config_digest(self) -> Optional[str]:
        return self._metadata_value(MetadataKeys.CONFIG_DIGEST)

    @staticmethod
    def get_provenance_input(name: str) -> str:
        """
        Resolve a provenance workflow input.

        Returns:
            "" when the input is unset, `builder-id=<run url>` for true,
            `false` for false, otherwise the attributes with a builder id
        """
        value = get_input(name)
        if not value:
            return value
        try:
            enabled = get_boolean_input(name)
        except ValidationError:
            return resolve_provenance_attrs(value)
        return resolve_provenance_attrs("true" if enabled else "false")

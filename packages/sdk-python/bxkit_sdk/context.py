"""
Temporary Location Provider
===========================

Every bxkit process owns one private temp directory (under RUNNER_TEMP when
running inside a GitHub runner). Secret files, the buildx iidfile and the
metadata file all live there.
"""

import os
import shutil
import tempfile
import threading
from typing import Optional

from bxkit_common.constants import Defaults, EnvVars
from bxkit_common.logger import get_logger

logger = get_logger(__name__)


class Context:
    """Process-wide temp directory and temp file name provider."""

    _tmp_dir: Optional[str] = None
    _lock = threading.Lock()

    @classmethod
    def tmp_dir(cls) -> str:
        """
        Return the private temp directory, creating it on first use.

        Safe to call from several threads; they all get the same directory.

        Returns:
            Absolute path of the directory
        """
        with cls._lock:
            if cls._tmp_dir is None or not os.path.isdir(cls._tmp_dir):
                base = os.environ.get(EnvVars.RUNNER_TEMP) or tempfile.gettempdir()
                os.makedirs(base, exist_ok=True)
                cls._tmp_dir = tempfile.mkdtemp(prefix=Defaults.TMP_DIR_PREFIX, dir=base)
                logger.debug("Created temp dir", path=cls._tmp_dir)
            return cls._tmp_dir

    @classmethod
    def tmp_name(cls, tmpdir: Optional[str] = None) -> str:
        """
        Return the path of a fresh, empty file.

        Args:
            tmpdir: Directory to create the file in (defaults to tmp_dir())
        """
        fd, path = tempfile.mkstemp(dir=tmpdir or cls.tmp_dir())
        os.close(fd)
        return path

    @classmethod
    def cleanup(cls) -> None:
        """Remove the temp directory and everything written to it."""
        with cls._lock:
            if cls._tmp_dir is not None:
                shutil.rmtree(cls._tmp_dir, ignore_errors=True)
                logger.debug("Removed temp dir", path=cls._tmp_dir)
                cls._tmp_dir = None

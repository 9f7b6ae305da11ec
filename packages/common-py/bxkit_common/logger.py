"""
bxkit Structured Logger

JSON-per-line logging shared by all bxkit packages. Records are written to
stderr so that the stdout of bxkit commands (secret references, attribute
strings, builder JSON) stays machine readable inside CI steps.

Usage:
    from bxkit_common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Resolved secret", secret_id="GIT_AUTH_TOKEN")

    step_logger = logger.with_context(builder="mybuilder")
    step_logger.debug("Parsed node", node="mybuilder0")
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .constants import Defaults, EnvVars

_HANDLER_MARKER = "_bxkit_handler"


class _StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever sys.stderr is at emit time."""

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        super().emit(record)


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "service": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "fields", {}))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _resolve_level(log_level: Optional[str]) -> int:
    level = (log_level or os.environ.get(EnvVars.LOG_LEVEL) or Defaults.LOG_LEVEL).upper()
    return getattr(logging, level, logging.INFO)


class BxkitLogger:
    """
    Thin wrapper around a stdlib logger that attaches structured fields.

    Attributes:
        service_name: Logger name (usually the module __name__)
        context: Fields added to every record emitted by this logger
    """

    def __init__(
        self,
        service_name: str,
        log_level: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.service_name = service_name
        self.context: Dict[str, Any] = dict(context or {})
        self._logger = logging.getLogger(service_name)
        # Handler and default level live on the top-level package logger
        top = logging.getLogger(service_name.split(".")[0])
        if top.level == logging.NOTSET:
            top.setLevel(_resolve_level(None))
        if log_level is not None:
            self._logger.setLevel(_resolve_level(log_level))
        if not any(getattr(h, _HANDLER_MARKER, False) for h in top.handlers):
            handler = _StderrHandler()
            handler.setFormatter(JsonFormatter())
            setattr(handler, _HANDLER_MARKER, True)
            top.addHandler(handler)

    def with_context(self, **context: Any) -> "BxkitLogger":
        """Return a child logger carrying additional context fields."""
        merged = {**self.context, **context}
        child = BxkitLogger.__new__(BxkitLogger)
        child.service_name = self.service_name
        child.context = merged
        child._logger = self._logger
        return child

    def _log(self, level: int, message: str, exc_info: bool = False, **fields: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        extra = fields.pop("extra", None) or {}
        record_fields = {**self.context, **extra, **fields}
        self._logger.log(level, message, exc_info=exc_info, extra={"fields": record_fields})

    def debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, **fields)

    def info(self, message: str, **fields: Any) -> None:
        self._log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, **fields)

    warn = warning

    def error(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, **fields)

    def critical(self, message: str, **fields: Any) -> None:
        self._log(logging.CRITICAL, message, **fields)

    def exception(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, exc_info=True, **fields)


def get_logger(name: str, log_level: Optional[str] = None) -> BxkitLogger:
    """
    Get a structured logger.

    Args:
        name: Logger/service name
        log_level: Optional level override (defaults to BXKIT_LOG_LEVEL or INFO)

    Returns:
        BxkitLogger instance
    """
    return BxkitLogger(name, log_level=log_level)


def configure_logging(service_name: str, log_level: Optional[str] = None) -> BxkitLogger:
    """
    Configure the level of every bxkit logger and return one for the caller.

    Args:
        service_name: Name of the calling service (e.g. "bxkit.cli")
        log_level: Level name; defaults to BXKIT_LOG_LEVEL or INFO
    """
    level = _resolve_level(log_level)
    for name in ("bxkit_common", "bxkit_schema", "bxkit_sdk", "bxkit_cli", service_name):
        logging.getLogger(name).setLevel(level)
    return get_logger(service_name, log_level=logging.getLevelName(level))

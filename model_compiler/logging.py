"""Logging utilities for model-compiler commands.

Records may carry a ``stage`` attribute naming the pipeline stage that emitted
them; ``stage_logger`` attaches it and the configured formats print it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .errors import Stage

_LOGGER_NAME = "model_compiler"
_NO_STAGE = "-"

CONSOLE_FORMAT = "[model-compiler] %(levelname)s [%(stage)s] %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(stage)s]: %(message)s"


class StageFilter(logging.Filter):
    """Fills in ``stage`` for records logged outside a pipeline stage."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "stage"):
            record.stage = _NO_STAGE
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the model_compiler hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def stage_logger(logger: logging.Logger, stage: "Stage") -> logging.LoggerAdapter:
    """Wrap ``logger`` so every record it emits is tagged with ``stage``."""
    return logging.LoggerAdapter(logger, {"stage": stage.value})


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the package logger with console output and optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.addFilter(StageFilter())
    stream_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.addFilter(StageFilter())
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["StageFilter", "configure_logging", "get_logger", "stage_logger"]

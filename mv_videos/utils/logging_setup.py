"""Loguru logging configuration."""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from mv_videos.config.settings import LOG_RETENTION, LOG_ROTATION
from mv_videos.exceptions import LogFileError

_VERBOSITY_LEVELS = ("WARNING", "INFO", "DEBUG")


def verbosity_to_level(verbosity: int) -> str:
    """
    Map a -v count to a loguru level name.

    0 -> WARNING, 1 -> INFO, 2 -> DEBUG, 3 and more -> TRACE.
    """
    if verbosity < 0:
        return _VERBOSITY_LEVELS[0]
    if verbosity < len(_VERBOSITY_LEVELS):
        return _VERBOSITY_LEVELS[verbosity]
    return "TRACE"


@dataclass
class LogConfig:
    """
    Logging settings.

    Attributes:
        level: Default level for the console sink.
        color: If True, colorize console output.
        context: Optional prefix shown on every console line.
        module_levels: Per-module level overrides, e.g.
            {"mv_videos.filesystem": "DEBUG"}.
        log_file: Optional file sink, always at DEBUG.
    """

    level: str = "WARNING"
    color: bool = True
    context: Optional[str] = None
    module_levels: Dict[str, str] = field(default_factory=dict)
    log_file: Optional[Path] = None


def build_format(config: LogConfig) -> str:
    """Build the console format string for a LogConfig."""
    prefix = f"Context={config.context} " if config.context else ""
    # loguru reads braces as fields
    prefix = prefix.replace("{", "{{").replace("}", "}}")
    if config.color:
        return prefix + "<level>{level: <8}</level> <cyan>{name}</cyan>: {message}"
    return prefix + "{level: <8} {name}: {message}"


def setup_logging(config: LogConfig) -> None:
    """
    Configure loguru sinks.

    Args:
        config: Logging settings.

    Raises:
        LogFileError: If the log file cannot be opened.
    """
    logger.remove()

    level_filter: Dict[str, str] = {"": config.level}
    level_filter.update(config.module_levels)

    logger.add(
        sys.stderr,
        level="TRACE",
        filter=level_filter,
        colorize=config.color,
        format=build_format(config),
    )

    if config.log_file:
        try:
            logger.add(
                config.log_file,
                rotation=LOG_ROTATION,
                retention=LOG_RETENTION,
                level="DEBUG",
            )
        except OSError as e:
            raise LogFileError(config.log_file) from e

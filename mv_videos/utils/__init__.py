"""Utility functions."""

from mv_videos.utils.logging_setup import (
    LogConfig,
    verbosity_to_level,
    setup_logging,
)

__all__ = [
    "LogConfig",
    "verbosity_to_level",
    "setup_logging",
]

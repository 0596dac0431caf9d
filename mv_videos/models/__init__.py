"""Data models for the video move pipeline."""

from mv_videos.models.selection import SizeThreshold, MovePlanEntry
from mv_videos.models.report import (
    MoveStatus,
    MoveOutcome,
    ExecutionReport,
    RunStatus,
    RunOutcome,
)

__all__ = [
    "SizeThreshold",
    "MovePlanEntry",
    "MoveStatus",
    "MoveOutcome",
    "ExecutionReport",
    "RunStatus",
    "RunOutcome",
]

"""Video move pipeline."""

from mv_videos.pipeline.orchestrator import (
    ConfirmFn,
    PipelineContext,
    PipelineOrchestrator,
)

__all__ = [
    "ConfirmFn",
    "PipelineContext",
    "PipelineOrchestrator",
]

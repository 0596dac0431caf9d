"""Execution report models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from mv_videos.models.selection import MovePlanEntry


class MoveStatus(Enum):
    """Outcome of a single planned move."""
    MOVED = "moved"
    WOULD_MOVE = "would move"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class MoveOutcome:
    """Result of executing one MovePlanEntry."""

    entry: MovePlanEntry
    status: MoveStatus
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is not MoveStatus.FAILED


@dataclass
class ExecutionReport:
    """
    Ordered outcomes of a move batch.

    Failed moves do not stop the batch, so a report can mix
    MOVED and FAILED outcomes.
    """

    dry_run: bool = False
    outcomes: List[MoveOutcome] = field(default_factory=list)

    def add(self, outcome: MoveOutcome) -> None:
        self.outcomes.append(outcome)

    def _with_status(self, status: MoveStatus) -> List[MoveOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def moved(self) -> List[MoveOutcome]:
        return self._with_status(MoveStatus.MOVED)

    @property
    def would_move(self) -> List[MoveOutcome]:
        return self._with_status(MoveStatus.WOULD_MOVE)

    @property
    def skipped(self) -> List[MoveOutcome]:
        return self._with_status(MoveStatus.SKIPPED)

    @property
    def failed(self) -> List[MoveOutcome]:
        return self._with_status(MoveStatus.FAILED)

    @property
    def has_failures(self) -> bool:
        return any(not o.ok for o in self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)


class RunStatus(Enum):
    """Final state of a pipeline run."""
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NOTHING_TO_DO = "nothing to do"


@dataclass
class RunOutcome:
    """
    Result of a full pipeline run.

    Attributes:
        status: How the run ended.
        command: Discovery command that was executed.
        plan: Planned moves (empty when nothing was found).
        report: Execution report, None unless the run completed.
    """

    status: RunStatus
    command: str = ""
    plan: List[MovePlanEntry] = field(default_factory=list)
    report: Optional[ExecutionReport] = None

    @property
    def succeeded(self) -> bool:
        """True unless a move failed."""
        return self.report is None or not self.report.has_failures

"""Orchestration of the video move pipeline."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from loguru import logger

from mv_videos.config.settings import (
    DEFAULT_EXTENSIONS,
    DEFAULT_SIZE,
    DISCOVERY_TIMEOUT_SECONDS,
)
from mv_videos.config.validation import parse_extensions, validate_size
from mv_videos.exceptions import EmptySourcesError
from mv_videos.filesystem import (
    Discovery,
    ShellDiscovery,
    build_find_command,
    check_destination,
    ensure_no_collisions,
    execute_plan,
    parse_discovery_output,
    plan_moves,
    require_existing,
    screen_candidates,
)
from mv_videos.models import MovePlanEntry, RunOutcome, RunStatus

ConfirmFn = Callable[[Sequence[MovePlanEntry]], bool]


@dataclass
class PipelineContext:
    """
    Run configuration of the pipeline.

    Attributes:
        sources: Source directories, searched recursively.
        destination: Flat destination directory.
        size: Raw minimum size, find -size syntax.
        extensions: Raw comma-separated extension list.
        dry_run: If True, report moves without performing them.
        discovery_timeout: Seconds allowed for discovery, None for no limit.
        progress: If True, show a progress bar while moving.
    """

    sources: List[str] = field(default_factory=list)
    destination: Path = field(default_factory=Path)
    size: str = DEFAULT_SIZE
    extensions: str = DEFAULT_EXTENSIONS
    dry_run: bool = False
    discovery_timeout: Optional[float] = DISCOVERY_TIMEOUT_SECONDS
    progress: bool = False


class PipelineOrchestrator:
    """
    Runs the stages of a move batch in order.

    validate -> check destination -> build command -> discover -> parse
    -> verify -> screen -> plan -> confirm -> execute. Every stage failure
    except a single failed move ends the run with an exception.
    """

    def __init__(
        self,
        context: PipelineContext,
        discovery: Optional[Discovery] = None,
        confirm: Optional[ConfirmFn] = None,
    ):
        """
        Args:
            context: Run configuration.
            discovery: Discovery backend, defaults to ShellDiscovery.
            confirm: Called with the plan before a real move batch; a
                falsy answer cancels the run. None skips confirmation.
        """
        self.context = context
        self.discovery = discovery or ShellDiscovery(timeout=context.discovery_timeout)
        self.confirm = confirm

    def build_command(self) -> str:
        """Validate the arguments and build the discovery command."""
        ctx = self.context
        threshold = validate_size(ctx.size)
        extensions = parse_extensions(ctx.extensions)
        if not ctx.sources:
            raise EmptySourcesError()
        check_destination(ctx.destination)

        command = build_find_command(ctx.sources, threshold, extensions)
        logger.debug(f"find = {command}")
        return command

    def discover(self, command: str) -> List[Path]:
        """Run discovery and return the verified regular files over the size."""
        output = self.discovery.run(command)
        candidates = parse_discovery_output(output)
        existing = require_existing(candidates)
        return screen_candidates(existing, validate_size(self.context.size))

    def plan(self, verified: Sequence[Path]) -> List[MovePlanEntry]:
        """Plan flat destinations and reject collisions."""
        plan = plan_moves(verified, self.context.destination)
        ensure_no_collisions(plan)
        return plan

    def run(self) -> RunOutcome:
        """
        Execute the whole pipeline.

        Returns:
            RunOutcome; its report lists per-move failures.
        """
        ctx = self.context
        command = self.build_command()

        verified = self.discover(command)
        if not verified:
            logger.info("No matching video files found")
            return RunOutcome(status=RunStatus.NOTHING_TO_DO, command=command)
        logger.info(f"{len(verified)} video file(s) found")

        plan = self.plan(verified)

        if not ctx.dry_run and self.confirm is not None and not self.confirm(plan):
            logger.info("Move batch cancelled by user")
            return RunOutcome(status=RunStatus.CANCELLED, command=command, plan=plan)

        report = execute_plan(plan, dry_run=ctx.dry_run, progress=ctx.progress)
        return RunOutcome(
            status=RunStatus.COMPLETED,
            command=command,
            plan=plan,
            report=report,
        )

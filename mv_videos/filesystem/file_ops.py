"""File operations for executing a move plan."""

import shutil
from pathlib import Path
from typing import Sequence

from loguru import logger
from tqdm import tqdm

from mv_videos.models.report import ExecutionReport, MoveOutcome, MoveStatus
from mv_videos.models.selection import MovePlanEntry


def move_file(source: Path, destination: Path, dry_run: bool = False) -> MoveOutcome:
    """
    Move a file to its destination without overwriting anything.

    Args:
        source: Source file path.
        destination: Destination file path.
        dry_run: If True, only simulate the operation.

    Returns:
        MoveOutcome describing what happened.
    """
    entry = MovePlanEntry(source=source, destination=destination)

    if dry_run:
        logger.info(f'SIMULATION - Move: {source} -> {destination}')
        return MoveOutcome(entry, MoveStatus.WOULD_MOVE)

    if not source.exists():
        logger.error(f'Source file not found: {source}')
        return MoveOutcome(entry, MoveStatus.FAILED, "source file not found")

    try:
        if destination.exists():
            if source.samefile(destination):
                logger.info(f'Already in place: {destination}')
                return MoveOutcome(entry, MoveStatus.SKIPPED, "already in place")
            logger.error(f'Destination file exists: {destination}')
            return MoveOutcome(entry, MoveStatus.FAILED, "destination file exists")

        shutil.move(str(source), str(destination))
        logger.info(f'File moved: {source} -> {destination}')
        return MoveOutcome(entry, MoveStatus.MOVED)

    except (OSError, shutil.Error) as e:
        logger.error(f'Error moving {source}: {e}')
        return MoveOutcome(entry, MoveStatus.FAILED, str(e))


def execute_plan(
    plan: Sequence[MovePlanEntry],
    dry_run: bool = False,
    progress: bool = False,
) -> ExecutionReport:
    """
    Execute every planned move in order.

    A failed move is recorded and the batch continues with the next
    entry; completed moves are never rolled back.

    Args:
        plan: Planned moves.
        dry_run: If True, only report what would be moved.
        progress: If True, show a progress bar.

    Returns:
        ExecutionReport with one outcome per entry.
    """
    report = ExecutionReport(dry_run=dry_run)
    desc = "Simulating moves" if dry_run else "Moving videos"

    with tqdm(plan, desc=desc, unit="file", disable=not progress) as pbar:
        for entry in pbar:
            pbar.set_postfix_str(f"{entry.source.name[:30]}...")
            report.add(move_file(entry.source, entry.destination, dry_run))

    if report.failed:
        logger.warning(f"{len(report.failed)} of {len(report)} move(s) failed")
    else:
        logger.info(f"{len(report)} move(s) processed")
    return report

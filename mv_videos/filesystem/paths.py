"""Destination path planning for flattened moves."""

from pathlib import Path
from typing import Dict, List, Sequence

from loguru import logger

from mv_videos.exceptions import (
    DestinationCollisionError,
    DestinationMissingError,
    InvalidFileNameError,
)
from mv_videos.models.selection import MovePlanEntry


def check_destination(destination_dir: Path) -> None:
    """
    Ensure the destination directory exists.

    Args:
        destination_dir: Directory receiving the flattened files.

    Raises:
        DestinationMissingError: If it is absent or not a directory.
    """
    if not destination_dir.is_dir():
        raise DestinationMissingError(destination_dir)


def destination_for(source: Path, destination_dir: Path) -> Path:
    """
    Map a source file to its flat destination.

    The directory structure of the source is dropped; only the file
    name is kept.

    Args:
        source: Verified source file.
        destination_dir: Destination directory.

    Returns:
        destination_dir / source.name

    Raises:
        InvalidFileNameError: If the source has no file name component.
    """
    name = source.name
    if name in ("", ".", ".."):
        raise InvalidFileNameError(source)
    return destination_dir / name


def plan_moves(verified: Sequence[Path], destination_dir: Path) -> List[MovePlanEntry]:
    """
    Build the move plan for verified files.

    Args:
        verified: Files confirmed to exist.
        destination_dir: Destination directory.

    Returns:
        One MovePlanEntry per file, in input order.
    """
    plan = [
        MovePlanEntry(source=source, destination=destination_for(source, destination_dir))
        for source in verified
    ]
    for entry in plan:
        logger.trace(f"Planned: {entry}")
    logger.debug(f"{len(plan)} move(s) planned into {destination_dir}")
    return plan


def find_collisions(plan: Sequence[MovePlanEntry]) -> Dict[Path, List[Path]]:
    """
    Find destinations targeted by more than one distinct source.

    Returns:
        Mapping of destination to its sources, only for collisions.
    """
    by_destination: Dict[Path, List[Path]] = {}
    for entry in plan:
        sources = by_destination.setdefault(entry.destination, [])
        if entry.source not in sources:
            sources.append(entry.source)
    return {dest: sources for dest, sources in by_destination.items() if len(sources) > 1}


def ensure_no_collisions(plan: Sequence[MovePlanEntry]) -> None:
    """
    Raises:
        DestinationCollisionError: If two sources share a destination.
    """
    collisions = find_collisions(plan)
    if collisions:
        raise DestinationCollisionError(collisions)

"""Existence, type and size checks for discovered files."""

from pathlib import Path
from typing import List, Sequence, Tuple

from loguru import logger

from mv_videos.exceptions import FilesVanishedError
from mv_videos.models.selection import SizeThreshold


def verify_candidates(candidates: Sequence[Path]) -> Tuple[List[Path], List[Path]]:
    """
    Split candidates into existing and missing files.

    Args:
        candidates: Paths reported by discovery.

    Returns:
        Tuple of (existing, missing), each in input order.
    """
    existing: List[Path] = []
    missing: List[Path] = []
    for candidate in candidates:
        if candidate.exists():
            existing.append(candidate)
        else:
            logger.warning(f"Discovered file no longer exists: {candidate}")
            missing.append(candidate)
    return existing, missing


def require_existing(candidates: Sequence[Path]) -> List[Path]:
    """
    Return the candidates if every one of them still exists.

    Raises:
        FilesVanishedError: If any candidate is missing.
    """
    existing, missing = verify_candidates(candidates)
    if missing:
        raise FilesVanishedError(missing)
    logger.debug(f"All {len(existing)} discovered file(s) verified")
    return existing


def screen_candidates(candidates: Sequence[Path], threshold: SizeThreshold) -> List[Path]:
    """
    Keep only regular files strictly larger than the threshold.

    The discovery command applies its type and size tests to the first
    extension only, so later extensions may report directories, symlinks
    or small files. Those entries are dropped with a warning.

    Args:
        candidates: Files confirmed to exist.
        threshold: Minimum size, compared with find's unit rounding.

    Returns:
        The selected files, in input order.

    Raises:
        FilesVanishedError: If a file disappears while being inspected.
    """
    selected: List[Path] = []
    for candidate in candidates:
        if candidate.is_symlink() or not candidate.is_file():
            logger.warning(f"Skipping {candidate}: not a regular file")
            continue
        try:
            size = candidate.stat().st_size
        except FileNotFoundError as e:
            raise FilesVanishedError([candidate]) from e
        if not threshold.is_exceeded_by(size):
            logger.warning(f"Skipping {candidate}: {size} bytes is not larger than {threshold}")
            continue
        selected.append(candidate)
    logger.debug(f"{len(selected)} of {len(candidates)} file(s) selected")
    return selected

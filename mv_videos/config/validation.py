"""Validation of the raw size and extension arguments."""

import re
from typing import List

from loguru import logger

from mv_videos.config.settings import FORBIDDEN_EXTENSION_CHARS, SIZE_UNITS
from mv_videos.exceptions import (
    EmptyExtensionsError,
    InvalidExtensionError,
    InvalidSizeError,
)
from mv_videos.models.selection import SizeThreshold

_DIGITS = re.compile(r"[0-9]+")


def validate_size(raw: str) -> SizeThreshold:
    """
    Validate a find -size style threshold such as "100M" or "250".

    Args:
        raw: Raw size argument.

    Returns:
        Parsed SizeThreshold.

    Raises:
        InvalidSizeError: If the string is empty or the magnitude is not
            a non-negative integer.
    """
    if not raw:
        raise InvalidSizeError(raw, "size must not be empty")

    unit = None
    magnitude = raw
    if raw[-1] in SIZE_UNITS:
        unit = raw[-1]
        magnitude = raw[:-1]

    if not _DIGITS.fullmatch(magnitude):
        raise InvalidSizeError(raw, f"'{magnitude}' is not a non-negative integer")

    threshold = SizeThreshold(magnitude=int(magnitude), unit=unit)
    logger.debug(f"Size threshold: {threshold}")
    return threshold


def parse_extensions(raw: str) -> List[str]:
    """
    Split a comma-separated extension list.

    A single trailing comma is tolerated ("mkv,avi," gives two
    extensions). Whitespace around each extension is dropped.

    Args:
        raw: Raw extension argument, e.g. "avi,mkv,mp4".

    Returns:
        Extensions in the given order, duplicates included.

    Raises:
        EmptyExtensionsError: If the string is empty.
        InvalidExtensionError: If a segment is empty or contains a
            character that cannot appear in a find -name pattern.
    """
    if not raw:
        raise EmptyExtensionsError()

    trimmed = raw[:-1] if raw.endswith(",") else raw
    extensions = [segment.strip() for segment in trimmed.split(",")]

    for extension in extensions:
        if not extension or FORBIDDEN_EXTENSION_CHARS.intersection(extension):
            raise InvalidExtensionError(raw, extension)

    logger.debug(f"Extensions: {extensions}")
    return extensions

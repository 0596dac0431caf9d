"""Selection and planning data models."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

# Bytes per find -size unit; no unit means 512-byte blocks
UNIT_BYTES: Dict[Optional[str], int] = {
    None: 512,
    "k": 1024,
    "M": 1024 ** 2,
    "G": 1024 ** 3,
    "T": 1024 ** 4,
    "P": 1024 ** 5,
}


@dataclass(frozen=True)
class SizeThreshold:
    """
    Minimum file size a video must exceed to be selected.

    Attributes:
        magnitude: Non-negative size value.
        unit: Optional find -size unit (k, M, G, T or P).
    """

    magnitude: int
    unit: Optional[str] = None

    def as_find_argument(self) -> str:
        """Return the size in find -size notation, without the sign."""
        return f"{self.magnitude}{self.unit or ''}"

    @property
    def block_size(self) -> int:
        """Number of bytes in one unit of this threshold."""
        return UNIT_BYTES[self.unit]

    def is_exceeded_by(self, size: int) -> bool:
        """
        Tell whether find -size +N would select a file of this size.

        find rounds the file size up to whole units before comparing,
        so a 1 byte file is 1k and does not exceed +1k.

        Args:
            size: File size in bytes.
        """
        return -(-size // self.block_size) > self.magnitude

    def __str__(self) -> str:
        return self.as_find_argument()


@dataclass(frozen=True)
class MovePlanEntry:
    """
    A single planned move.

    Attributes:
        source: Verified source file.
        destination: Flat destination path (destination dir / source name).
    """

    source: Path
    destination: Path

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"

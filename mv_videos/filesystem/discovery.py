"""File discovery through find(1)."""

import os
import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

from loguru import logger

from mv_videos.config.settings import DISCOVERY_TIMEOUT_SECONDS
from mv_videos.config.validation import validate_size
from mv_videos.exceptions import (
    DiscoveryFailedError,
    DiscoverySpawnError,
    DiscoveryTimeoutError,
    EmptyExtensionsError,
    EmptySourcesError,
)
from mv_videos.models.selection import SizeThreshold

SourcePath = Union[str, Path]


class Discovery(Protocol):
    """Anything that turns a discovery command into line-oriented output."""

    def run(self, command: str) -> str:
        ...


def quote_source(source: SourcePath) -> str:
    """
    Double-quote a source directory for the shell.

    Characters that keep their meaning inside double quotes are escaped.
    """
    escaped = str(source)
    for char in ('\\', '"', '$', '`'):
        escaped = escaped.replace(char, f"\\{char}")
    return f'"{escaped}"'


def build_find_command(
    sources: Sequence[SourcePath],
    threshold: Union[SizeThreshold, str],
    extensions: Sequence[str],
) -> str:
    """
    Build the find command selecting videos in the source directories.

    Args:
        sources: Directories to search, in order.
        threshold: Files must be strictly larger than this size.
        extensions: Extensions to match, without leading dot.

    Returns:
        Shell command string.

    Raises:
        EmptySourcesError: If no source directory is given.
        EmptyExtensionsError: If no extension is given.
    """
    if not sources:
        raise EmptySourcesError()
    if not extensions:
        raise EmptyExtensionsError()

    if not isinstance(threshold, SizeThreshold):
        threshold = validate_size(threshold)

    quoted_sources = " ".join(quote_source(s) for s in sources)
    name_patterns = " -or ".join(f'-name "*.{ext}"' for ext in extensions)

    return f"find {quoted_sources} -type f -size +{threshold} {name_patterns}"


class ShellDiscovery:
    """
    Run a discovery command through the system shell.

    Standard output and standard error are captured separately; the
    latter is attached to errors and logged as a warning otherwise.
    """

    def __init__(self, timeout: Optional[float] = DISCOVERY_TIMEOUT_SECONDS) -> None:
        """
        Args:
            timeout: Seconds to wait for the command, None to wait forever.
        """
        self.timeout = timeout

    def run(self, command: str) -> str:
        """
        Execute the command and return its standard output.

        Raises:
            DiscoverySpawnError: If the shell could not be started.
            DiscoveryTimeoutError: If the command exceeded the timeout.
            DiscoveryFailedError: If the command exited with a non-zero status.
        """
        logger.debug(f"Running discovery: {command} (timeout={self.timeout})")
        try:
            result = subprocess.run(
                command,
                shell=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise DiscoveryTimeoutError(command, self.timeout) from e
        except OSError as e:
            raise DiscoverySpawnError(command) from e

        output = os.fsdecode(result.stdout)
        stderr = os.fsdecode(result.stderr)

        if result.returncode != 0:
            raise DiscoveryFailedError(command, result.returncode, output, stderr)

        if stderr.strip():
            logger.warning(f"Discovery reported: {stderr.strip()}")

        return output


def parse_discovery_output(raw: str) -> List[Path]:
    """
    Turn discovery output into candidate paths.

    One path per non-empty line, in output order, without deduplication.
    Only "\\n" separates lines since file names may contain other
    line-break characters.

    Args:
        raw: Captured standard output.

    Returns:
        List of candidate file paths (empty when nothing matched).
    """
    candidates = [Path(line) for line in raw.split("\n") if line]
    logger.debug(f"{len(candidates)} candidate file(s) discovered")
    return candidates

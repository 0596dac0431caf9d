"""Exceptions raised by the video move pipeline."""

from pathlib import Path
from typing import Dict, List, Optional, Sequence


class MvVideosError(Exception):
    """Base class for all mv_videos errors."""

    pass


# Argument validation


class InvalidSizeError(MvVideosError):
    """Size threshold is empty, has an unknown unit or a non-numeric magnitude."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid size argument '{raw}': {reason}")


class EmptyExtensionsError(MvVideosError):
    """No file extension was given."""

    def __init__(self):
        super().__init__("At least one file extension is required")


class InvalidExtensionError(MvVideosError):
    """An extension segment is empty or would break the discovery command."""

    def __init__(self, raw: str, segment: str):
        self.raw = raw
        self.segment = segment
        super().__init__(f"Invalid extension '{segment}' in '{raw}'")


class EmptySourcesError(MvVideosError):
    """No source directory was given."""

    def __init__(self):
        super().__init__("At least one source directory is required")


# Planning


class DestinationMissingError(MvVideosError):
    """Destination directory does not exist or is not a directory."""

    def __init__(self, destination: Path):
        self.destination = destination
        super().__init__(f"Destination directory {destination} does not exist or is not a directory")


class InvalidFileNameError(MvVideosError):
    """A discovered path has no usable file name component."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Cannot extract a file name from '{path}'")


class DestinationCollisionError(MvVideosError):
    """Several source files would land on the same flat destination."""

    def __init__(self, collisions: Dict[Path, List[Path]]):
        self.collisions = collisions
        lines = [
            f"{destination} <- {', '.join(str(s) for s in sources)}"
            for destination, sources in collisions.items()
        ]
        super().__init__(
            f"{len(collisions)} destination(s) would receive more than one file:\n"
            + "\n".join(lines)
        )


# Discovery


class DiscoveryError(MvVideosError):
    """Base class for errors of the external discovery process."""

    def __init__(self, message: str, command: str):
        self.command = command
        super().__init__(message)


class DiscoverySpawnError(DiscoveryError):
    """The discovery process could not be started."""

    def __init__(self, command: str):
        super().__init__(f"Failed to execute shell command: '{command}'", command)


class DiscoveryFailedError(DiscoveryError):
    """The discovery process exited with a non-zero status."""

    def __init__(self, command: str, returncode: int, output: str = "", stderr: str = ""):
        self.returncode = returncode
        self.output = output
        self.stderr = stderr
        message = f"Shell command '{command}' exited with status {returncode}"
        diagnostic = (stderr or output).strip()
        if diagnostic:
            message += f":\n{diagnostic}"
        super().__init__(message, command)


class DiscoveryTimeoutError(DiscoveryError):
    """The discovery process did not finish in time."""

    def __init__(self, command: str, timeout: Optional[float]):
        self.timeout = timeout
        super().__init__(f"Shell command '{command}' timed out after {timeout} seconds", command)


# Verification


class FilesVanishedError(MvVideosError):
    """Discovered files no longer exist at verification time."""

    def __init__(self, missing: Sequence[Path]):
        self.missing = list(missing)
        names = "\n".join(str(path) for path in self.missing)
        super().__init__(f"{len(self.missing)} discovered file(s) no longer exist:\n{names}")


# Configuration


class ConfigError(MvVideosError):
    """Base class for configuration file errors."""

    pass


class ConfigReadError(ConfigError):
    """Configuration file could not be read."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Could not read configuration file {path}")


class ConfigParseError(ConfigError):
    """Configuration file is not valid TOML or has unexpected values."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse configuration file {path}: {reason}")


class NoSuitableConfigFoundError(ConfigError):
    """None of the candidate configuration files could be loaded."""

    def __init__(self, locations: Sequence[Path]):
        self.locations = list(locations)
        tried = ", ".join(str(p) for p in self.locations)
        super().__init__(f"No suitable configuration found in [{tried}]")


class LogFileError(ConfigError):
    """The configured log file could not be opened."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Could not open log file {path}")


# Console


class ConfirmationError(MvVideosError):
    """The confirmation answer could not be read."""

    def __init__(self):
        super().__init__("Failed to read confirmation")

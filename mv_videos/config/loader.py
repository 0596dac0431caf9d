"""TOML configuration file loading."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from loguru import logger

from mv_videos.exceptions import (
    ConfigError,
    ConfigParseError,
    ConfigReadError,
    NoSuitableConfigFoundError,
)

PathLike = Union[str, Path]

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class FileConfig:
    """
    Values read from a configuration file.

    Every field is optional; None means "not set in the file".

    Attributes:
        extensions: Default comma-separated extension list.
        size: Default minimum size.
        timeout: Default discovery timeout in seconds (0 disables).
        confirm: Whether to ask before moving.
        color: Whether to colorize output.
        log_context: Prefix added to every log line.
        log_file: Optional log file path.
        module_levels: Per-module log level overrides.
        path: File the values were read from.
    """

    extensions: Optional[str] = None
    size: Optional[str] = None
    timeout: Optional[float] = None
    confirm: Optional[bool] = None
    color: Optional[bool] = None
    log_context: Optional[str] = None
    log_file: Optional[Path] = None
    module_levels: Dict[str, str] = field(default_factory=dict)
    path: Optional[Path] = None


def default_locations(config_file_name: str) -> List[Path]:
    """
    Return the standard configuration locations.

    Args:
        config_file_name: Base file name, e.g. "mv_videos.toml".

    Returns:
        [~/.config_file_name, /etc/config_file_name]
    """
    locations: List[Path] = []
    try:
        locations.append(Path.home() / f".{config_file_name}")
    except RuntimeError:
        logger.debug("No home directory, skipping user configuration")
    locations.append(Path("/etc") / config_file_name)
    return locations


def _expect(path: Path, section: Dict[str, Any], key: str, types: tuple) -> Any:
    value = section.get(key)
    if value is None:
        return None
    # bool is an int subclass; keep it out of numeric settings
    if not isinstance(value, types) or (isinstance(value, bool) and bool not in types):
        raise ConfigParseError(path, f"'{key}' has an invalid value {value!r}")
    return value


def _section(path: Path, data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigParseError(path, f"[{name}] must be a table")
    return section


def config_from_dict(data: Dict[str, Any], path: Path) -> FileConfig:
    """
    Convert parsed TOML into a FileConfig.

    Raises:
        ConfigParseError: If a known key has the wrong type.
    """
    defaults = _section(path, data, "defaults")
    logging = _section(path, data, "logging")
    modules = _section(path, logging, "modules")

    extensions = _expect(path, defaults, "extensions", (str, list))
    if isinstance(extensions, list):
        if not all(isinstance(ext, str) for ext in extensions):
            raise ConfigParseError(path, "'extensions' must only contain strings")
        extensions = ",".join(extensions)

    for module, level in modules.items():
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ConfigParseError(path, f"invalid log level {level!r} for '{module}'")

    log_file = _expect(path, logging, "file", (str,))

    return FileConfig(
        extensions=extensions,
        size=_expect(path, defaults, "size", (str,)),
        timeout=_expect(path, defaults, "timeout", (int, float)),
        confirm=_expect(path, defaults, "confirm", (bool,)),
        color=_expect(path, logging, "color", (bool,)),
        log_context=_expect(path, logging, "context", (str,)),
        log_file=Path(log_file).expanduser() if log_file else None,
        module_levels={module: level.upper() for module, level in modules.items()},
        path=path,
    )


def load_config_file(file_path: PathLike) -> FileConfig:
    """
    Read and parse one configuration file.

    Raises:
        ConfigReadError: If the file cannot be read.
        ConfigParseError: If it is not valid TOML or has wrong types.
    """
    path = Path(file_path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ConfigReadError(path) from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise ConfigParseError(path, "not valid UTF-8") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(path, str(e)) from e

    return config_from_dict(data, path)


def smart_load(file_paths: Sequence[PathLike]) -> FileConfig:
    """
    Load the first configuration file that can be read and parsed.

    Args:
        file_paths: Candidate files, in priority order.

    Returns:
        FileConfig of the first loadable file.

    Raises:
        NoSuitableConfigFoundError: If none of the files could be loaded.
    """
    for file_path in file_paths:
        try:
            config = load_config_file(file_path)
        except ConfigError as e:
            logger.debug(f"Skipping configuration: {e}")
            continue
        logger.debug(f"Configuration loaded from {config.path}")
        return config

    raise NoSuitableConfigFoundError([Path(p) for p in file_paths])

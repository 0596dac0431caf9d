"""Configuration, validation and CLI handling."""

from mv_videos.config.settings import (
    DEFAULT_EXTENSIONS,
    DEFAULT_SIZE,
    SIZE_UNITS,
    DISCOVERY_TIMEOUT_SECONDS,
    CONFIG_FILE_NAME,
    CONFIRMATION_TOKEN,
)
from mv_videos.config.validation import validate_size, parse_extensions
from mv_videos.config.loader import (
    FileConfig,
    default_locations,
    load_config_file,
    smart_load,
)
from mv_videos.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    config_locations,
    args_to_cli_args,
)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_SIZE",
    "SIZE_UNITS",
    "DISCOVERY_TIMEOUT_SECONDS",
    "CONFIG_FILE_NAME",
    "CONFIRMATION_TOKEN",
    "validate_size",
    "parse_extensions",
    "FileConfig",
    "default_locations",
    "load_config_file",
    "smart_load",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "config_locations",
    "args_to_cli_args",
]

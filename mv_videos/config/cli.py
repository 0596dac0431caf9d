"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from mv_videos.config.loader import FileConfig, default_locations
from mv_videos.config.settings import (
    CONFIG_FILE_NAME,
    DEFAULT_EXTENSIONS,
    DEFAULT_SIZE,
    DISCOVERY_TIMEOUT_SECONDS,
)


@dataclass
class CLIArgs:
    """
    Resolved command-line arguments.

    Attributes:
        sources: Source directories.
        destination: Flat destination directory.
        extensions: Comma-separated extension list.
        size: Minimum size, find -size syntax.
        dry_run: If True, only show what would be done.
        verbose: Verbosity count (-v, -vv, ...).
        assume_yes: If True, do not ask for confirmation.
        timeout: Discovery timeout in seconds, None for no limit.
        color: If True, colorize output.
        progress: If True, show a progress bar.
        config_file: Explicit configuration file, if any.
    """

    sources: List[str] = field(default_factory=list)
    destination: Path = field(default_factory=Path)
    extensions: str = DEFAULT_EXTENSIONS
    size: str = DEFAULT_SIZE
    dry_run: bool = False
    verbose: int = 0
    assume_yes: bool = False
    timeout: Optional[float] = DISCOVERY_TIMEOUT_SECONDS
    color: bool = True
    progress: bool = True
    config_file: Optional[Path] = None


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='mv_videos',
        description="""
        Move video files from a nested directory structure into another,
        flat directory.
        """
    )

    parser.add_argument(
        'sources',
        nargs='+',
        metavar='SOURCE',
        help='source directories'
    )

    parser.add_argument(
        'destination',
        metavar='DESTINATION',
        help='destination directory'
    )

    parser.add_argument(
        '-e', '--extension',
        dest='extensions',
        default=None,
        help=f'file extensions to consider (default: {DEFAULT_EXTENSIONS})'
    )

    parser.add_argument(
        '-s', '--size',
        default=None,
        help=f'only consider files bigger than this (default: {DEFAULT_SIZE})'
    )

    parser.add_argument(
        '-d', '--dry', '--dry-run',
        dest='dry_run',
        action='store_true',
        help='only show what would be done'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='verbose mode (-v, -vv, -vvv, etc.)'
    )

    parser.add_argument(
        '-y', '--yes',
        action='store_true',
        help='move without asking for confirmation'
    )

    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help=f'discovery timeout in seconds, 0 to disable (default: {DISCOVERY_TIMEOUT_SECONDS})'
    )

    parser.add_argument(
        '--config',
        default=None,
        help=f'configuration file (default: ~/.{CONFIG_FILE_NAME}, /etc/{CONFIG_FILE_NAME}, ./{CONFIG_FILE_NAME})'
    )

    parser.add_argument(
        '--no-color',
        action='store_true',
        help='disable colored output'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='disable the progress bar'
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def config_locations(explicit: Optional[str] = None) -> List[Path]:
    """
    Return the configuration files to try, in priority order.

    An explicit file replaces the standard locations.
    """
    if explicit:
        return [Path(explicit).expanduser()]
    locations = default_locations(CONFIG_FILE_NAME)
    locations.append(Path.cwd() / CONFIG_FILE_NAME)
    return locations


def _timeout_or_none(value: float) -> Optional[float]:
    return value if value > 0 else None


def args_to_cli_args(
    namespace: argparse.Namespace,
    file_config: Optional[FileConfig] = None
) -> CLIArgs:
    """
    Merge parsed arguments with configuration file defaults.

    Command-line values win over the configuration file, which wins
    over built-in settings.

    Args:
        namespace: Parsed argparse Namespace.
        file_config: Loaded configuration file, if any.

    Returns:
        CLIArgs instance.
    """
    conf = file_config or FileConfig()

    if namespace.timeout is not None:
        timeout = _timeout_or_none(namespace.timeout)
    elif conf.timeout is not None:
        timeout = _timeout_or_none(conf.timeout)
    else:
        timeout = DISCOVERY_TIMEOUT_SECONDS

    assume_yes = namespace.yes or conf.confirm is False
    color = not namespace.no_color and conf.color is not False

    return CLIArgs(
        sources=list(namespace.sources),
        destination=Path(namespace.destination),
        extensions=namespace.extensions if namespace.extensions is not None
        else conf.extensions or DEFAULT_EXTENSIONS,
        size=namespace.size if namespace.size is not None else conf.size or DEFAULT_SIZE,
        dry_run=namespace.dry_run,
        verbose=namespace.verbose,
        assume_yes=assume_yes,
        timeout=timeout,
        color=color,
        progress=not namespace.no_progress,
        config_file=Path(namespace.config).expanduser() if namespace.config else None,
    )

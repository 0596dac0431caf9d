"""Entry point for the mv_videos package.

This module provides the command-line entry point for the video move tool.
Run with: python -m mv_videos
"""

import sys
from typing import List, Optional

from loguru import logger

from mv_videos.config import (
    CLIArgs,
    FileConfig,
    args_to_cli_args,
    config_locations,
    load_config_file,
    parse_arguments,
    smart_load,
)
from mv_videos.exceptions import MvVideosError, NoSuitableConfigFoundError
from mv_videos.models import RunOutcome, RunStatus
from mv_videos.pipeline import ConfirmFn, PipelineContext, PipelineOrchestrator
from mv_videos.ui import (
    ConsoleUI,
    confirm_plan,
    display_configuration,
    display_plan,
    display_report,
)
from mv_videos.utils import LogConfig, setup_logging, verbosity_to_level


def load_file_config(explicit: Optional[str]) -> Optional[FileConfig]:
    """
    Load the configuration file.

    Args:
        explicit: Path given with --config, if any.

    Returns:
        FileConfig, or None when no standard location holds one.

    Raises:
        ConfigError: If the explicit file cannot be loaded.
    """
    if explicit:
        return load_config_file(config_locations(explicit)[0])
    try:
        return smart_load(config_locations())
    except NoSuitableConfigFoundError as e:
        logger.debug(f"Using built-in defaults: {e}")
        return None


def build_log_config(cli_args: CLIArgs, file_config: Optional[FileConfig]) -> LogConfig:
    """Combine verbosity and configuration file logging settings."""
    conf = file_config or FileConfig()
    return LogConfig(
        level=verbosity_to_level(cli_args.verbose),
        color=cli_args.color,
        context=conf.log_context,
        module_levels=dict(conf.module_levels),
        log_file=conf.log_file,
    )


def build_confirm(cli_args: CLIArgs, console: ConsoleUI) -> Optional[ConfirmFn]:
    """Return the confirmation gate, or None when it is disabled."""
    if cli_args.assume_yes or cli_args.dry_run:
        return None

    def confirm(plan) -> bool:
        display_plan(plan, console)
        return confirm_plan(plan)

    return confirm


def report_outcome(outcome: RunOutcome, console: ConsoleUI) -> int:
    """
    Print the outcome of a run.

    Returns:
        Exit code (0 for success, 1 if any move failed).
    """
    if outcome.status is RunStatus.NOTHING_TO_DO:
        console.print_info("No matching video files found")
        return 0
    if outcome.status is RunStatus.CANCELLED:
        console.print_warning("Cancelled, no file was moved")
        return 0

    display_report(outcome.report, console)
    return 0 if outcome.succeeded else 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the video move tool.

    Args:
        argv: Argument list (None for sys.argv).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    namespace = parse_arguments(argv)

    # Console-only logging until the configuration file is known
    setup_logging(LogConfig(
        level=verbosity_to_level(namespace.verbose),
        color=not namespace.no_color,
    ))
    console = ConsoleUI(color=not namespace.no_color)

    try:
        file_config = load_file_config(namespace.config)
    except MvVideosError as e:
        console.print_error_chain(e)
        return 1

    cli_args = args_to_cli_args(namespace, file_config)
    console.set_color(cli_args.color)
    try:
        setup_logging(build_log_config(cli_args, file_config))
    except MvVideosError as e:
        console.print_error_chain(e)
        return 1
    logger.debug(f"args = {cli_args}")

    if cli_args.dry_run:
        console.print_warning(
            "SIMULATION MODE\n\n"
            "• No file will be moved\n"
            "• Every planned move is only reported"
        )

    display_configuration(cli_args, console)

    ctx = PipelineContext(
        sources=cli_args.sources,
        destination=cli_args.destination,
        size=cli_args.size,
        extensions=cli_args.extensions,
        dry_run=cli_args.dry_run,
        discovery_timeout=cli_args.timeout,
        progress=cli_args.progress,
    )
    orchestrator = PipelineOrchestrator(ctx, confirm=build_confirm(cli_args, console))

    try:
        outcome = orchestrator.run()
    except MvVideosError as e:
        logger.debug(f"Run aborted: {e!r}")
        console.print_error_chain(e)
        return 1

    return report_outcome(outcome, console)


if __name__ == "__main__":
    sys.exit(main())

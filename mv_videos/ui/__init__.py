"""User interface components."""

from mv_videos.ui.console import ConsoleUI
from mv_videos.ui.display import (
    display_configuration,
    format_summary,
    display_plan,
    display_report,
)
from mv_videos.ui.confirmations import (
    ask_for_confirmation,
    confirm_plan,
)

__all__ = [
    "ConsoleUI",
    "display_configuration",
    "format_summary",
    "display_plan",
    "display_report",
    "ask_for_confirmation",
    "confirm_plan",
]

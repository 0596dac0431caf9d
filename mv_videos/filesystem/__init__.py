"""Filesystem operations for moving videos."""

from mv_videos.filesystem.discovery import (
    Discovery,
    ShellDiscovery,
    quote_source,
    build_find_command,
    parse_discovery_output,
)
from mv_videos.filesystem.verification import (
    verify_candidates,
    require_existing,
    screen_candidates,
)
from mv_videos.filesystem.paths import (
    check_destination,
    destination_for,
    plan_moves,
    find_collisions,
    ensure_no_collisions,
)
from mv_videos.filesystem.file_ops import (
    move_file,
    execute_plan,
)

__all__ = [
    "Discovery",
    "ShellDiscovery",
    "quote_source",
    "build_find_command",
    "parse_discovery_output",
    "verify_candidates",
    "require_existing",
    "screen_candidates",
    "check_destination",
    "destination_for",
    "plan_moves",
    "find_collisions",
    "ensure_no_collisions",
    "move_file",
    "execute_plan",
]

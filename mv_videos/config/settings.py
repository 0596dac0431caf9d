"""Configuration settings and constants for the mv_videos package."""

from typing import FrozenSet

# Default selection criteria
DEFAULT_EXTENSIONS: str = "avi,mkv,mp4"
DEFAULT_SIZE: str = "100M"

# Units understood by find -size
SIZE_UNITS: FrozenSet[str] = frozenset({"k", "M", "G", "T", "P"})

# Characters that would break the quoted find -name pattern
FORBIDDEN_EXTENSION_CHARS: FrozenSet[str] = frozenset('/\\"\'$`*?[] \t')

# Discovery process timeout in seconds
DISCOVERY_TIMEOUT_SECONDS: int = 600

# Configuration file name, looked up as ~/.NAME, /etc/NAME and ./NAME
CONFIG_FILE_NAME: str = "mv_videos.toml"

# Token the user must type to confirm a move batch
CONFIRMATION_TOKEN: str = "yes"

# Log file rotation
LOG_ROTATION: str = "10 MB"
LOG_RETENTION: str = "7 days"

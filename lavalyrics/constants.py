"""Constants for the LavaLyrics API client."""

from typing import Final

APPLICATION_NAME: Final[str] = "LavaLyrics-Client"
LOGGER_NAME: Final[str] = "lavalyrics"
VERSION: Final[str] = "1.0.0"

# All endpoints live behind the activity proxy
DEFAULT_API_PREFIX: Final[str] = "/.proxy/api"

CONTENT_TYPE_JSON: Final[str] = "application/json"
DEFAULT_HEADERS: Final[dict[str, str]] = {"Content-Type": CONTENT_TYPE_JSON}

# API defaults
DEFAULT_QUEUE_LIMIT: Final[int] = 50
DEFAULT_LYRICS_RANGE_SECONDS: Final[float] = 5.0

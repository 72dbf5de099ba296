"""Async client for the LavaLyrics player-control API."""

from .client import LavaLyricsAPI, RequestOptions
from .errors import ApiError, LavaLyricsError
from .models import (
    ApiLyricsInfo,
    FilterRequest,
    GuildId,
    JsonValue,
    LoopMode,
    LyricsLine,
    PlayerState,
    PlayRequest,
    QueueInfo,
    SkipRequest,
    TrackIndex,
    TrackInfo,
    VolumeRequest,
)

__all__ = [
    "ApiError",
    "ApiLyricsInfo",
    "FilterRequest",
    "GuildId",
    "JsonValue",
    "LavaLyricsAPI",
    "LavaLyricsError",
    "LoopMode",
    "LyricsLine",
    "PlayRequest",
    "PlayerState",
    "QueueInfo",
    "RequestOptions",
    "SkipRequest",
    "TrackIndex",
    "TrackInfo",
    "VolumeRequest",
]

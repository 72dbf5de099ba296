"""Models for the LavaLyrics API.

Request payloads are mashumaro dataclasses so they serialize predictably.
Response payloads are described as TypedDicts: they document the shape the
service returns, but the client never validates them at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, NotRequired, TypeAlias, TypedDict

from mashumaro import DataClassDictMixin
from mashumaro.config import BaseConfig

GuildId: TypeAlias = str | int
TrackIndex: TypeAlias = int

# Any value json_loads can return
JsonValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None


class LoopMode(StrEnum):
    """Loop mode of a player."""

    OFF = "off"
    TRACK = "track"
    QUEUE = "queue"


@dataclass
class _RequestModel(DataClassDictMixin):
    """Base for request bodies, unset (None) fields are left out."""

    class Config(BaseConfig):
        """Mashumaro config."""

        omit_none = True


@dataclass
class PlayRequest(_RequestModel):
    """Body of a play request.

    `query` is either a url or a search term, `source` optionally picks the
    search source (e.g. ``ytsearch``) and `position` inserts the track at that
    queue index instead of appending it.
    """

    query: str
    source: str | None = None
    position: int | None = None


@dataclass
class SkipRequest(_RequestModel):
    """Body of a skip request, an empty request skips the current track."""

    index: int | None = None


@dataclass
class VolumeRequest(_RequestModel):
    """Body of a volume request."""

    volume: int | float


@dataclass
class FilterRequest(_RequestModel):
    """Body of a filter request."""

    name: str
    enabled: bool = True
    settings: dict[str, Any] | None = None


class TrackInfo(TypedDict):
    """A track as returned by the player endpoints."""

    identifier: str
    title: str
    author: str
    uri: str | None
    length: int
    is_stream: bool
    source_name: str
    artwork_url: NotRequired[str | None]
    position: NotRequired[int]


class PlayerState(TypedDict):
    """State of the player of a single guild."""

    guild_id: str
    connected: bool
    paused: bool
    volume: int
    position: int
    shuffle: bool
    loop_mode: str
    autoplay: bool
    current: TrackInfo | None
    queue_length: int
    lyrics_enabled: NotRequired[bool]


class QueueInfo(TypedDict):
    """A page of the queue of a player."""

    tracks: list[TrackInfo]
    total: int
    limit: int


class LyricsLine(TypedDict):
    """A single timed lyrics line, times in milliseconds."""

    timestamp: int
    duration: int | None
    line: str


class ApiLyricsInfo(TypedDict):
    """Lyrics of the current track."""

    source_name: str
    provider: str | None
    text: str | None
    lines: list[LyricsLine]

"""API Client for LavaLyrics."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Self, cast
from urllib.parse import quote, urlencode

from mashumaro import DataClassDictMixin

from .constants import (
    DEFAULT_API_PREFIX,
    DEFAULT_HEADERS,
    DEFAULT_LYRICS_RANGE_SECONDS,
    DEFAULT_QUEUE_LIMIT,
    LOGGER_NAME,
    VERSION,
)
from .errors import ApiError
from .helpers.aiohttp_client import create_clientsession
from .helpers.json import json_dumps, json_loads
from .models import SkipRequest, VolumeRequest

if TYPE_CHECKING:
    from types import TracebackType

    from aiohttp import ClientResponse, ClientSession

    from .models import (
        ApiLyricsInfo,
        FilterRequest,
        GuildId,
        JsonValue,
        LoopMode,
        PlayerState,
        PlayRequest,
        QueueInfo,
        TrackIndex,
        TrackInfo,
    )

LOGGER = logging.getLogger(f"{LOGGER_NAME}.client")


@dataclass
class RequestOptions:
    """Per request overrides, unset fields keep their defaults.

    Headers are merged over the default headers, so a key given here wins.
    The body must already be serialized to a json string.
    """

    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None
    params: dict[str, Any] | None = None


def format_query_value(value: Any) -> str:
    """Format a value for use in a query string, the way the API expects it.

    Integral floats drop the fraction, other floats use str(). That only differs
    from the JavaScript number formatting for exponent notation (1e-07 vs 1e-7)
    and non-finite values (nan vs NaN).
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float) and value.is_integer():
        # 5.0 -> "5"
        return str(int(value))
    return str(value)


def serialize_body(payload: DataClassDictMixin | Mapping[str, Any]) -> str:
    """Serialize a request model (or a plain mapping) to a json string."""
    if isinstance(payload, DataClassDictMixin):
        return json_dumps(payload.to_dict())
    return json_dumps(dict(payload))


def _segment(value: GuildId | TrackIndex) -> str:
    """Percent-encode a caller supplied value for use as a single path segment."""
    return quote(str(value), safe="")


class LavaLyricsAPI:
    """Client for interacting with the LavaLyrics API."""

    def __init__(
        self,
        base_url: str = "",
        *,
        session: ClientSession | None = None,
        api_prefix: str = DEFAULT_API_PREFIX,
        headers: Mapping[str, str] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize API client.

        :param base_url: Origin of the LavaLyrics server, empty for relative urls.
        :param session: Existing aiohttp session, one is created (and owned) when omitted.
        :param api_prefix: Path prefix all endpoints live under.
        :param headers: Extra headers to send with every request.
        :param logger: Logger to use instead of the module logger.
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix.rstrip("/")
        self.logger = logger or LOGGER
        self._headers = dict(headers or {})
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Self:
        """Enter context manager."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the http session, if we created it ourselves."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> ClientSession:
        """Return the http session, creating it on first use."""
        if self._session is None:
            self._session = create_clientsession(VERSION)
            self._owns_session = True
        return self._session

    def build_url(self, endpoint: str, params: Mapping[str, Any] | None = None) -> str:
        """Return the full url for an endpoint (which must start with a slash)."""
        if not endpoint.startswith("/"):
            raise ValueError(f"Endpoint must start with '/': {endpoint!r}")
        url = f"{self.base_url}{self.api_prefix}{endpoint}"
        if params:
            url += "?" + urlencode({key: format_query_value(val) for key, val in params.items()})
        return url

    async def _request(self, endpoint: str, options: RequestOptions | None = None) -> Any:
        """Handle API requests internally."""
        if options is None:
            options = RequestOptions()
        url = self.build_url(endpoint, options.params)
        headers = {**DEFAULT_HEADERS, **self._headers, **options.headers}

        self.logger.debug("Making %s request to LavaLyrics API: %s", options.method, url)

        async with self.session.request(
            options.method, url, headers=headers, data=options.body
        ) as response:
            return await self._handle_response(response)

    async def _handle_response(self, response: ClientResponse) -> Any:
        """Translate a non-2xx status to ApiError, decode the body otherwise."""
        # ClientResponse.ok also accepts 3xx, the API only considers 2xx a success
        if not 200 <= response.status < 300:
            raise ApiError(response.status, response.reason or "")
        text = await response.text()
        if not text:
            return None
        return json_loads(text)

    async def get_root(self) -> JsonValue:
        """Get the service root (name and version of the API)."""
        return cast("JsonValue", await self._request("/"))

    async def get_guilds(self) -> JsonValue:
        """Get the guilds the bot is connected to."""
        return cast("JsonValue", await self._request("/guilds"))

    async def get_player_state(self, guild_id: GuildId) -> PlayerState:
        """Get the player state of a guild."""
        return cast("PlayerState", await self._request(f"/player/{_segment(guild_id)}"))

    async def get_now_playing(self, guild_id: GuildId) -> TrackInfo | None:
        """Get the current track of a guild, None when nothing is playing."""
        return cast(
            "TrackInfo | None", await self._request(f"/player/{_segment(guild_id)}/nowplaying")
        )

    async def get_queue(self, guild_id: GuildId, limit: int = DEFAULT_QUEUE_LIMIT) -> QueueInfo:
        """Get (at most `limit` tracks of) the queue of a guild."""
        options = RequestOptions(params={"limit": limit})
        return cast(
            "QueueInfo", await self._request(f"/player/{_segment(guild_id)}/queue", options)
        )

    async def clear_queue(self, guild_id: GuildId) -> JsonValue:
        """Remove all tracks from the queue."""
        return cast(
            "JsonValue",
            await self._request(
                f"/player/{_segment(guild_id)}/queue", RequestOptions(method="DELETE")
            ),
        )

    async def remove_track(self, guild_id: GuildId, track_index: TrackIndex) -> JsonValue:
        """Remove the track at `track_index` from the queue."""
        endpoint = f"/player/{_segment(guild_id)}/queue/{_segment(track_index)}"
        return cast("JsonValue", await self._request(endpoint, RequestOptions(method="DELETE")))

    async def get_lyrics(self, guild_id: GuildId) -> ApiLyricsInfo:
        """Get the full lyrics of the current track."""
        return cast("ApiLyricsInfo", await self._request(f"/player/{_segment(guild_id)}/lyrics"))

    async def get_current_lyrics(
        self, guild_id: GuildId, range_seconds: float = DEFAULT_LYRICS_RANGE_SECONDS
    ) -> ApiLyricsInfo:
        """Get the lyrics lines within `range_seconds` of the playback position."""
        options = RequestOptions(params={"range_seconds": range_seconds})
        return cast(
            "ApiLyricsInfo",
            await self._request(f"/player/{_segment(guild_id)}/lyrics/current", options),
        )

    async def toggle_lyrics(self, guild_id: GuildId) -> JsonValue:
        """Toggle the lyrics panel of a guild."""
        return await self._post(guild_id, "lyrics/toggle")

    async def play_track(
        self, guild_id: GuildId, play_request: PlayRequest | Mapping[str, Any]
    ) -> JsonValue:
        """Play (or enqueue) a track."""
        return await self._post(guild_id, "play", play_request)

    async def pause_player(self, guild_id: GuildId) -> JsonValue:
        """Pause playback."""
        return await self._post(guild_id, "pause")

    async def resume_player(self, guild_id: GuildId) -> JsonValue:
        """Resume playback."""
        return await self._post(guild_id, "resume")

    async def stop_player(self, guild_id: GuildId) -> JsonValue:
        """Stop playback."""
        return await self._post(guild_id, "stop")

    async def skip_track(
        self,
        guild_id: GuildId,
        skip_request: SkipRequest | Mapping[str, Any] | None = None,
    ) -> JsonValue:
        """Skip the current track (or skip to the index in the request)."""
        if skip_request is None:
            skip_request = SkipRequest()
        return await self._post(guild_id, "skip", skip_request)

    async def set_volume(self, guild_id: GuildId, volume: int | float) -> JsonValue:
        """Set the volume of the player."""
        return await self._post(guild_id, "volume", VolumeRequest(volume=volume))

    async def toggle_shuffle(self, guild_id: GuildId, enabled: bool) -> JsonValue:
        """Enable or disable shuffle."""
        return await self._post(guild_id, "shuffle", params={"enabled": enabled})

    async def set_loop_mode(self, guild_id: GuildId, mode: LoopMode | str) -> JsonValue:
        """Set the loop mode of the player."""
        return await self._post(guild_id, "loop", params={"mode": mode})

    async def toggle_autoplay(self, guild_id: GuildId, enabled: bool) -> JsonValue:
        """Enable or disable autoplay."""
        return await self._post(guild_id, "autoplay", params={"enabled": enabled})

    async def get_filters(self, guild_id: GuildId) -> JsonValue:
        """Get the filter chain of the player."""
        return cast("JsonValue", await self._request(f"/player/{_segment(guild_id)}/filters"))

    async def set_filter(
        self, guild_id: GuildId, filter_request: FilterRequest | Mapping[str, Any]
    ) -> JsonValue:
        """Set (or disable) a filter in the filter chain."""
        return await self._post(guild_id, "filters", filter_request)

    async def _post(
        self,
        guild_id: GuildId,
        action: str,
        payload: DataClassDictMixin | Mapping[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> JsonValue:
        """Send a POST to a player endpoint, with an optional json body."""
        options = RequestOptions(method="POST", params=params)
        if payload is not None:
            options.body = serialize_body(payload)
        return cast(
            "JsonValue", await self._request(f"/player/{_segment(guild_id)}/{action}", options)
        )

"""Helpers for setting up a aiohttp session (and related)."""

from __future__ import annotations

import sys
from typing import Any

import aiohttp
from aiohttp.hdrs import USER_AGENT

from lavalyrics.constants import APPLICATION_NAME


def get_user_agent(version: str) -> str:
    """Return the User-Agent we identify with."""
    return (
        f"{APPLICATION_NAME}/{version} "
        f"aiohttp/{aiohttp.__version__} Python/{sys.version_info[0]}.{sys.version_info[1]}"
    )


def create_clientsession(version: str = "0.0.0", **kwargs: Any) -> aiohttp.ClientSession:
    """Create a new ClientSession with kwargs, i.e. for a timeout or cookies."""
    # Identify as the LavaLyrics client unless the caller overrides the user agent
    headers = {USER_AGENT: get_user_agent(version)}
    headers.update(kwargs.pop("headers", None) or {})
    return aiohttp.ClientSession(headers=headers, **kwargs)

"""Tests for the helpers."""

from dataclasses import dataclass

import pytest
from aiohttp.hdrs import USER_AGENT
from mashumaro import DataClassDictMixin

from lavalyrics.helpers.aiohttp_client import create_clientsession, get_user_agent
from lavalyrics.helpers.json import json_dumps, json_loads


@dataclass
class _Item(DataClassDictMixin):
    name: str


def test_json_dumps() -> None:
    """Test dumping json."""
    assert json_dumps({"a": 1, "b": [True, None]}) == '{"a":1,"b":[true,null]}'
    assert json_dumps([_Item(name="x")]) == '[{"name":"x"}]'
    with pytest.raises(TypeError):
        json_dumps(object())


def test_json_loads() -> None:
    """Test loading json."""
    assert json_loads('{"a":1}') == {"a": 1}
    assert json_loads("null") is None


def test_user_agent() -> None:
    """Test the user agent identifies the client."""
    assert get_user_agent("1.2.3").startswith("LavaLyrics-Client/1.2.3 aiohttp/")


async def test_create_clientsession() -> None:
    """Test the session identifies as the client unless overridden."""
    session = create_clientsession("1.2.3")
    try:
        assert session.headers[USER_AGENT] == get_user_agent("1.2.3")
    finally:
        await session.close()

    session = create_clientsession(headers={USER_AGENT: "custom"})
    try:
        assert session.headers[USER_AGENT] == "custom"
    finally:
        await session.close()

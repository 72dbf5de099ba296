"""Helpers to work with (de)serializing of json."""

from __future__ import annotations

from typing import Any

import orjson


def _default(obj: Any) -> Any:
    """Convert objects orjson does not handle natively."""
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def json_dumps(data: Any) -> str:
    """Dump json string (compact, no whitespace)."""
    return orjson.dumps(data, default=_default).decode("utf-8")


json_loads = orjson.loads

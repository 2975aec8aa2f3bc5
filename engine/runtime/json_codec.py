"""JSON codec helpers for log export paths."""

from __future__ import annotations

from typing import Any

import orjson


def dumps_text(payload: Any, *, sort_keys: bool = False) -> str:
    """Serialize payload to a single-line JSON string.

    Values orjson cannot encode natively are rendered with `str()`.
    """
    options = orjson.OPT_NON_STR_KEYS
    if sort_keys:
        options |= orjson.OPT_SORT_KEYS
    return orjson.dumps(payload, default=str, option=options).decode("utf-8")


__all__ = ["dumps_text"]

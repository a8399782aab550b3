from __future__ import annotations

import json
from enum import Enum
from typing import Any


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, BaseException):
        # Exception class names are what you grep for in client logs.
        return json.dumps(f"{type(value).__name__}: {value}", ensure_ascii=False)
    if isinstance(value, (str, list, tuple, dict)):
        return json.dumps(value, ensure_ascii=False)
    return json.dumps(str(value), ensure_ascii=False)


def format_kv(**fields: Any) -> str:
    """
    Render a compact single-line key=value log string.

    Example:
      seq=2 event="save_failed" movie_id=42 state="not_saved" error="RemoteRejection: watchlist.save: db error"
    """
    return " ".join(
        f"{key}={_format_value(value)}" for key, value in fields.items() if value is not None
    )

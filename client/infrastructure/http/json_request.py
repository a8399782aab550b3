"""One HTTP round-trip, with failures mapped onto ``domain.errors``.

- connection problems and timeouts -> ``NetworkFailure``
- status >= 400 -> ``RemoteRejection`` carrying the server message
- unparsable JSON when JSON is required -> ``MalformedResponse``
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Mapping, Optional, Type, TypeVar
from urllib.parse import urljoin

import aiohttp
from pydantic import BaseModel, ValidationError

from domain.errors import MalformedResponse, NetworkFailure, RemoteRejection

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_MESSAGE_KEYS = ("message", "error", "detail", "status_message")


def join_url(base: str, path: str) -> str:
    base = (base or "").rstrip("/") + "/"
    path = (path or "").lstrip("/")
    return urljoin(base, path)


def extract_message(text: str) -> str:
    """Pull a human-readable message out of a response body.

    JSON bodies like ``{"message": "db error"}`` yield ``"db error"``; anything
    else is returned as stripped text.
    """
    raw = (text or "").strip()
    if not raw:
        return ""
    try:
        payload = json.loads(raw)
    except ValueError:
        return raw
    if isinstance(payload, dict):
        for key in _MESSAGE_KEYS:
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    if isinstance(payload, str):
        return payload.strip()
    return raw


async def request_json(
    session: aiohttp.ClientSession,
    method: str,
    url: str,
    *,
    operation: str,
    params: Optional[Mapping[str, Any]] = None,
    json_body: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
    require_json: bool = True,
) -> Any:
    """Perform the request and return the decoded JSON payload.

    With ``require_json=False`` a success body that is empty or not JSON yields
    ``None`` instead of raising; mutations use this because the status code is
    what confirms them.
    """
    try:
        async with session.request(
            method, url, params=params, json=json_body, headers=headers
        ) as resp:
            status = resp.status
            # Non-UTF-8 bytes decode to U+FFFD.
            text = await resp.text(errors="replace")
    except asyncio.TimeoutError as exc:
        raise NetworkFailure("request timed out", operation=operation) from exc
    except aiohttp.ClientError as exc:
        raise NetworkFailure(str(exc) or type(exc).__name__, operation=operation) from exc

    if status >= 400:
        message = extract_message(text) or f"HTTP {status}"
        logger.warning("%s failed (%s): %s", operation, status, text[:200])
        raise RemoteRejection(message, status=status, body=text, operation=operation)

    if not text.strip():
        if require_json:
            raise MalformedResponse("empty response body", operation=operation, payload=text)
        return None
    try:
        return json.loads(text)
    except ValueError as exc:
        if require_json:
            raise MalformedResponse("response is not valid JSON", operation=operation, payload=text[:200]) from exc
        return None


def parse_model(model: Type[ModelT], payload: Any, *, operation: str) -> ModelT:
    """Validate a decoded payload, reporting shape problems as ``MalformedResponse``."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0] if exc.errors() else {}
        raise MalformedResponse(
            f"invalid {model.__name__}: {first.get('msg', 'validation failed')}",
            operation=operation,
        ) from exc

from __future__ import annotations

from infrastructure.http.client_base import HttpClientBase
from infrastructure.http.json_request import extract_message, join_url, parse_model, request_json

__all__ = [
    "HttpClientBase",
    "extract_message",
    "join_url",
    "parse_model",
    "request_json",
]

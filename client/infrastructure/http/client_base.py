from __future__ import annotations

import asyncio
from typing import Optional

import aiohttp


class HttpClientBase:
    """Lazily created, shared ``aiohttp.ClientSession`` with a fixed total timeout.

    Every request made through the session is bounded by ``timeout_s``; when the
    bound is hit aiohttp raises ``asyncio.TimeoutError``, which the request
    helper reports as a network failure.
    """

    def __init__(self, *, timeout_s: float) -> None:
        self._timeout_s = float(timeout_s or 10.0)
        self._session: Optional[aiohttp.ClientSession] = None
        self._lock = asyncio.Lock()  # Protect session creation from concurrent access

    async def _get_session(self) -> aiohttp.ClientSession:
        # Fast path: return existing session if available
        if self._session is not None and not self._session.closed:
            return self._session

        # Slow path: acquire lock and create session (double-check pattern)
        async with self._lock:
            if self._session is not None and not self._session.closed:
                return self._session

            timeout = aiohttp.ClientTimeout(total=self._timeout_s)
            self._session = aiohttp.ClientSession(timeout=timeout)
            return self._session

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

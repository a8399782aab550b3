from __future__ import annotations

import logging
from urllib.parse import quote

from pydantic import ValidationError

from application.ports import WatchlistServicePort
from domain.watchlist import MovieSummary, WatchlistEntry
from infrastructure.config.settings import (
    WATCHLIST_BASE_URL,
    WATCHLIST_CHECK_PATH,
    WATCHLIST_LIST_PATH,
    WATCHLIST_REMOVE_PATH,
    WATCHLIST_SAVE_PATH,
    WATCHLIST_TIMEOUT_S,
)
from infrastructure.http import HttpClientBase, join_url, parse_model, request_json
from infrastructure.watchlist.schemas import (
    CheckResponse,
    MessageResponse,
    RemoveRequest,
    SaveRequest,
    parse_entries,
)

logger = logging.getLogger(__name__)


class HttpWatchlistService(HttpClientBase, WatchlistServicePort):
    """Watchlist REST client.

    One attempt per call, no retries. Failures surface as ``NetworkFailure``,
    ``RemoteRejection`` or ``MalformedResponse``.
    """

    def __init__(
        self,
        *,
        base_url: str = WATCHLIST_BASE_URL,
        timeout_s: float = WATCHLIST_TIMEOUT_S,
        list_path: str = WATCHLIST_LIST_PATH,
        check_path: str = WATCHLIST_CHECK_PATH,
        save_path: str = WATCHLIST_SAVE_PATH,
        remove_path: str = WATCHLIST_REMOVE_PATH,
    ) -> None:
        super().__init__(timeout_s=timeout_s)
        self._base_url = (base_url or "").strip()
        self._list_path = list_path or "/watchlist/{user_id}"
        self._check_url = join_url(self._base_url, check_path)
        self._save_url = join_url(self._base_url, save_path)
        self._remove_url = join_url(self._base_url, remove_path)

    @staticmethod
    def _headers() -> dict[str, str]:
        return {"accept": "application/json"}

    async def list_watchlist(self, *, user_id: str) -> list[WatchlistEntry]:
        session = await self._get_session()
        path = self._list_path.replace("{user_id}", quote(str(user_id), safe=""))
        payload = await request_json(
            session,
            "GET",
            join_url(self._base_url, path),
            operation="watchlist.list",
            headers=self._headers(),
        )
        entries = parse_entries(payload, user_id=str(user_id), operation="watchlist.list")
        logger.debug("watchlist.list user_id=%s count=%d", user_id, len(entries))
        return entries

    async def is_saved(self, *, user_id: str, movie_id: int) -> bool:
        session = await self._get_session()
        params = {"user_id": str(user_id), "movie_id": str(int(movie_id))}
        payload = await request_json(
            session,
            "GET",
            self._check_url,
            operation="watchlist.check",
            params=params,
            headers=self._headers(),
        )
        return parse_model(CheckResponse, payload, operation="watchlist.check").saved

    async def save(self, *, user_id: str, movie: MovieSummary) -> str:
        session = await self._get_session()
        body = SaveRequest.from_movie(user_id=str(user_id), movie=movie).model_dump()
        payload = await request_json(
            session,
            "POST",
            self._save_url,
            operation="watchlist.save",
            json_body=body,
            headers=self._headers(),
            require_json=False,
        )
        return self._message(payload)

    async def remove(self, *, user_id: str, movie_id: int) -> str:
        session = await self._get_session()
        body = RemoveRequest(user_id=str(user_id), movie_id=int(movie_id)).model_dump()
        payload = await request_json(
            session,
            "DELETE",
            self._remove_url,
            operation="watchlist.remove",
            json_body=body,
            headers=self._headers(),
            require_json=False,
        )
        return self._message(payload)

    @staticmethod
    def _message(payload: object) -> str:
        # The 2xx status is the confirmation; the message is only for display.
        if isinstance(payload, str):
            return payload
        try:
            return MessageResponse.model_validate(payload).message
        except ValidationError:
            return ""

from __future__ import annotations

from typing import Dict, Tuple

from application.ports import WatchlistServicePort
from domain.errors import RemoteRejection
from domain.watchlist import MovieSummary, WatchlistEntry


class InMemoryWatchlistService(WatchlistServicePort):
    """Process-local stand-in for the watchlist service.

    Keeps one entry per ``(user_id, movie_id)`` and answers duplicate saves and
    unknown removes the way the REST service does, with a rejection.
    """

    def __init__(self) -> None:
        self._entries: Dict[Tuple[str, int], WatchlistEntry] = {}

    async def list_watchlist(self, *, user_id: str) -> list[WatchlistEntry]:
        return [e for e in self._entries.values() if e.user_id == str(user_id)]

    async def is_saved(self, *, user_id: str, movie_id: int) -> bool:
        return (str(user_id), int(movie_id)) in self._entries

    async def save(self, *, user_id: str, movie: MovieSummary) -> str:
        key = (str(user_id), int(movie.id))
        if key in self._entries:
            raise RemoteRejection(
                "Movie already in watchlist", status=409, operation="watchlist.save"
            )
        self._entries[key] = WatchlistEntry(
            user_id=key[0],
            movie_id=key[1],
            title=movie.title,
            poster_path=movie.poster_path,
            vote_average=movie.vote_average,
            release_date=movie.release_date,
        )
        return "Movie saved to watchlist"

    async def remove(self, *, user_id: str, movie_id: int) -> str:
        key = (str(user_id), int(movie_id))
        if self._entries.pop(key, None) is None:
            raise RemoteRejection(
                "Movie not found in watchlist", status=404, operation="watchlist.remove"
            )
        return "Movie removed from watchlist"

    async def close(self) -> None:
        return None

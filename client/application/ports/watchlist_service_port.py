from __future__ import annotations

from typing import Protocol

from domain.watchlist import MovieSummary, WatchlistEntry


class WatchlistServicePort(Protocol):
    """Remote authority for watchlist membership.

    Implementations raise ``NetworkFailure``, ``RemoteRejection`` or
    ``MalformedResponse`` (see ``domain.errors``) instead of returning sentinels.
    """

    async def list_watchlist(self, *, user_id: str) -> list[WatchlistEntry]:
        ...

    async def is_saved(self, *, user_id: str, movie_id: int) -> bool:
        ...

    async def save(self, *, user_id: str, movie: MovieSummary) -> str:
        """Create the membership; returns the server's human-readable message."""
        ...

    async def remove(self, *, user_id: str, movie_id: int) -> str:
        """Delete the membership; returns the server's human-readable message."""
        ...

    async def close(self) -> None:
        ...

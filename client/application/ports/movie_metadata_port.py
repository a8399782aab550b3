from __future__ import annotations

from typing import Protocol

from domain.watchlist import MovieDetails


class MovieMetadataPort(Protocol):
    async def fetch_movie_details(self, movie_id: int) -> MovieDetails:
        ...

    async def close(self) -> None:
        ...

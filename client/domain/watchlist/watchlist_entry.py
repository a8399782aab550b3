from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WatchlistEntry:
    """A remote-persisted watchlist membership record.

    At most one entry exists per ``(user_id, movie_id)``. Entries are created by
    a save and destroyed by a remove; they are never edited in place.
    """

    user_id: str
    movie_id: int
    title: str
    poster_path: Optional[str] = None
    # 0-10 scale (TMDB vote average)
    vote_average: float = 0.0
    # ISO date, e.g. "2014-11-05"
    release_date: Optional[str] = None

    @property
    def key(self) -> tuple[str, int]:
        return (self.user_id, self.movie_id)

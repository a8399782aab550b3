from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class MovieSummary:
    """Denormalized movie fields carried by a watchlist save.

    The watchlist store does not hold movie metadata on its own, so every save
    ships the fields the list screen needs to render a card.
    """

    id: int
    title: str
    poster_path: Optional[str] = None
    vote_average: float = 0.0
    release_date: Optional[str] = None


@dataclass(frozen=True)
class MovieDetails:
    """A movie record as returned by the metadata provider."""

    id: int
    title: str
    overview: str = ""
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
    runtime: Optional[int] = None
    vote_average: float = 0.0
    vote_count: int = 0
    budget: int = 0
    revenue: int = 0
    genres: tuple[str, ...] = field(default_factory=tuple)
    production_companies: tuple[str, ...] = field(default_factory=tuple)

    def summary(self) -> MovieSummary:
        return MovieSummary(
            id=self.id,
            title=self.title,
            poster_path=self.poster_path,
            vote_average=self.vote_average,
            release_date=self.release_date,
        )

    @property
    def release_year(self) -> Optional[str]:
        if not self.release_date:
            return None
        return self.release_date.split("-")[0] or None

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from domain.watchlist import MovieDetails


class NamedRef(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""


class TMDBMovie(BaseModel):
    """Subset of TMDB ``/movie/{id}`` used by the detail screen."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str = ""
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
    runtime: Optional[int] = None
    vote_average: float = 0.0
    vote_count: int = 0
    budget: int = 0
    revenue: int = 0
    genres: List[NamedRef] = []
    production_companies: List[NamedRef] = []

    @field_validator("vote_average", "vote_count", "budget", "revenue", mode="before")
    @classmethod
    def zero_when_null(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("genres", "production_companies", mode="before")
    @classmethod
    def empty_when_null(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_domain(self) -> MovieDetails:
        return MovieDetails(
            id=self.id,
            title=self.title,
            overview=self.overview or "",
            poster_path=self.poster_path,
            release_date=self.release_date or None,
            runtime=self.runtime,
            vote_average=self.vote_average,
            vote_count=self.vote_count,
            budget=self.budget,
            revenue=self.revenue,
            genres=tuple(g.name for g in self.genres if g.name),
            production_companies=tuple(c.name for c in self.production_companies if c.name),
        )

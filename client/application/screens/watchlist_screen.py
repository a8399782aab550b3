from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from application.ports import WatchlistServicePort
from application.resource import AsyncResource, ResourceStatus
from application.screens.formatting import chunk, poster_url, rating_label
from domain.session import UserSession
from domain.watchlist import WatchlistEntry

DEFAULT_GRID_COLUMNS = 3
EMPTY_STATE_TEXT = "No saved movies"


@dataclass(frozen=True)
class MovieCard:
    movie_id: int
    title: str
    poster_url: Optional[str]
    rating: str
    release_year: Optional[str]


def _card(entry: WatchlistEntry) -> MovieCard:
    year = (entry.release_date or "").split("-")[0] or None
    return MovieCard(
        movie_id=entry.movie_id,
        title=entry.title,
        poster_url=poster_url(entry.poster_path),
        rating=rating_label(entry.vote_average),
        release_year=year,
    )


class WatchlistScreen:
    """The saved-movies grid.

    Mutations made on other screens are not pushed here. The list pulls again
    every time it regains focus, which is what keeps it eventually consistent.
    """

    def __init__(
        self,
        *,
        session: UserSession,
        service: WatchlistServicePort,
        columns: int = DEFAULT_GRID_COLUMNS,
    ) -> None:
        self._session = session
        self._columns = columns
        self._resource: AsyncResource[list[WatchlistEntry]] = AsyncResource(
            lambda: service.list_watchlist(user_id=session.user_id),
            auto_fetch=False,
            name="watchlist",
        )

    @property
    def resource(self) -> AsyncResource[list[WatchlistEntry]]:
        return self._resource

    async def on_focus(self) -> None:
        await self._resource.refetch()

    @property
    def loading(self) -> bool:
        return self._resource.loading

    @property
    def error(self) -> Optional[Exception]:
        return self._resource.error

    @property
    def entries(self) -> list[WatchlistEntry]:
        return list(self._resource.data or [])

    @property
    def is_empty(self) -> bool:
        # Only a completed load can be empty; idle and failed screens show their own state.
        return self._resource.status is ResourceStatus.SUCCESS and not self.entries

    def cards(self) -> list[MovieCard]:
        return [_card(e) for e in self.entries]

    def rows(self, columns: Optional[int] = None) -> list[list[MovieCard]]:
        return chunk(self.cards(), columns or self._columns)

    def unmount(self) -> None:
        self._resource.dispose()

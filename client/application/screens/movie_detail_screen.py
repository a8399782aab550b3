from __future__ import annotations

from typing import Optional

from application.ports import MovieMetadataPort, NotifierPort, WatchlistServicePort
from application.resource import AsyncResource, ResourceStatus
from application.screens.formatting import join_names, millions, or_na, poster_url, rating_label
from application.watchlist import MembershipToggle
from domain.session import UserSession
from domain.watchlist import MembershipState, MovieDetails, ToggleAction, ToggleOutcome


class MovieDetailScreen:
    """Movie metadata plus the save/remove button.

    Metadata loads first; the membership check only runs once the movie is
    known, mirroring how the screen renders.
    """

    def __init__(
        self,
        *,
        movie_id: int,
        session: UserSession,
        metadata: MovieMetadataPort,
        service: WatchlistServicePort,
        notifier: NotifierPort,
    ) -> None:
        self._movie_id = int(movie_id)
        self._session = session
        self._details: AsyncResource[MovieDetails] = AsyncResource(
            lambda: metadata.fetch_movie_details(self._movie_id),
            name=f"movie:{self._movie_id}",
        )
        self._toggle = MembershipToggle(movie_id=self._movie_id, service=service, notifier=notifier)

    @property
    def details(self) -> AsyncResource[MovieDetails]:
        return self._details

    @property
    def toggle(self) -> MembershipToggle:
        return self._toggle

    @property
    def movie(self) -> Optional[MovieDetails]:
        return self._details.data

    @property
    def loading(self) -> bool:
        return self._details.loading

    async def mount(self) -> None:
        await self.reload()

    async def reload(self) -> None:
        await self._details.refetch()
        if self._details.status is ResourceStatus.SUCCESS and self._details.data is not None:
            await self._toggle.check_status(self._session.user_id, self._movie_id)

    async def press_save(self) -> ToggleOutcome:
        movie = self._details.data
        if movie is None:
            return ToggleOutcome(action=ToggleAction.IGNORED, succeeded=False, state=self._toggle.state)
        return await self._toggle.toggle(self._session.user_id, movie.summary())

    @property
    def button_label(self) -> str:
        if self._toggle.is_saving:
            return "Removing..." if self._toggle.is_saved else "Saving..."
        return "Remove" if self._toggle.is_saved else "Save"

    @property
    def button_disabled(self) -> bool:
        return self._toggle.state in (
            MembershipState.UNKNOWN,
            MembershipState.CHECKING,
            MembershipState.SAVING,
            MembershipState.REMOVING,
        )

    @property
    def poster_url(self) -> Optional[str]:
        movie = self.movie
        return poster_url(movie.poster_path) if movie else None

    def info_fields(self) -> list[tuple[str, str]]:
        movie = self.movie
        if movie is None:
            return []
        return [
            ("Release", or_na(movie.release_year)),
            ("Runtime", f"{movie.runtime}m" if movie.runtime else or_na(None)),
            ("Rating", rating_label(movie.vote_average)),
            ("Votes", str(movie.vote_count or 0)),
            ("Overview", or_na(movie.overview)),
            ("Genres", join_names(movie.genres)),
            ("Budget", millions(movie.budget)),
            ("Revenue", millions(movie.revenue, rounded=True)),
            ("Production Companies", join_names(movie.production_companies)),
        ]

    def unmount(self) -> None:
        self._details.dispose()
        self._toggle.dispose()

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from application.ports import (
    AuthServicePort,
    MovieMetadataPort,
    NotifierPort,
    SessionStorePort,
    WatchlistServicePort,
)
from application.screens import LoginScreen, MovieDetailScreen, WatchlistScreen
from application.session import SessionService
from domain.session import UserSession
from infrastructure.config.settings import WATCHLIST_GRID_COLUMNS

logger = logging.getLogger(__name__)


@dataclass
class ClientContext:
    """Adapters wired together once per process; screens are built from it."""

    watchlist: WatchlistServicePort
    metadata: MovieMetadataPort
    auth: AuthServicePort
    session_store: SessionStorePort
    notifier: NotifierPort
    grid_columns: int = WATCHLIST_GRID_COLUMNS

    @property
    def sessions(self) -> SessionService:
        return SessionService(auth=self.auth, store=self.session_store)

    def login_screen(self) -> LoginScreen:
        return LoginScreen(sessions=self.sessions, notifier=self.notifier)

    def watchlist_screen(self, session: UserSession) -> WatchlistScreen:
        return WatchlistScreen(session=session, service=self.watchlist, columns=self.grid_columns)

    def movie_detail_screen(self, movie_id: int, session: UserSession) -> MovieDetailScreen:
        return MovieDetailScreen(
            movie_id=movie_id,
            session=session,
            metadata=self.metadata,
            service=self.watchlist,
            notifier=self.notifier,
        )

    async def close(self) -> None:
        for closable in (self.watchlist, self.metadata, self.auth):
            try:
                await closable.close()
            except Exception:
                logger.exception("Failed to close %s", type(closable).__name__)


def build_client_context(
    *,
    watchlist_provider: Optional[str] = None,
    notifier: Optional[NotifierPort] = None,
) -> ClientContext:
    """Wire infrastructure adapters into the application ports."""
    from infrastructure.auth import HttpAuthService
    from infrastructure.metadata import TMDBClient
    from infrastructure.notifications import LoggingNotifier
    from infrastructure.session import InMemorySessionStore
    from infrastructure.watchlist import create_watchlist_service

    return ClientContext(
        watchlist=create_watchlist_service(watchlist_provider),  # type: ignore[arg-type]
        metadata=TMDBClient(),
        auth=HttpAuthService(),
        session_store=InMemorySessionStore(),
        notifier=notifier or LoggingNotifier(),
    )

from __future__ import annotations

from application.ports.auth_service_port import AuthServicePort
from application.ports.movie_metadata_port import MovieMetadataPort
from application.ports.notifier_port import NotifierPort
from application.ports.session_store_port import SessionStorePort
from application.ports.watchlist_service_port import WatchlistServicePort

__all__ = [
    "AuthServicePort",
    "MovieMetadataPort",
    "NotifierPort",
    "SessionStorePort",
    "WatchlistServicePort",
]

from __future__ import annotations

from application.screens.login_screen import LoginScreen
from application.screens.movie_detail_screen import MovieDetailScreen
from application.screens.watchlist_screen import MovieCard, WatchlistScreen

__all__ = [
    "LoginScreen",
    "MovieCard",
    "MovieDetailScreen",
    "WatchlistScreen",
]

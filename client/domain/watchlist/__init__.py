from __future__ import annotations

from domain.watchlist.membership import MembershipState, ToggleAction, ToggleOutcome
from domain.watchlist.movie import MovieDetails, MovieSummary
from domain.watchlist.watchlist_entry import WatchlistEntry

__all__ = [
    "MembershipState",
    "MovieDetails",
    "MovieSummary",
    "ToggleAction",
    "ToggleOutcome",
    "WatchlistEntry",
]

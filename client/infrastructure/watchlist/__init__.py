from .factory import WatchlistServiceFactory, create_watchlist_service
from .http_watchlist_service import HttpWatchlistService
from .in_memory_watchlist_service import InMemoryWatchlistService

__all__ = [
    "WatchlistServiceFactory",
    "create_watchlist_service",
    "HttpWatchlistService",
    "InMemoryWatchlistService",
]

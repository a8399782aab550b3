"""Watchlist service factory.

Chooses the ``WatchlistServicePort`` implementation from configuration so
screens never know whether they talk to the REST service or a local fake.
"""

from __future__ import annotations

import logging
from typing import Literal

from application.ports import WatchlistServicePort
from infrastructure.config.settings import (
    WATCHLIST_BASE_URL,
    WATCHLIST_PROVIDER,
    WATCHLIST_TIMEOUT_S,
)

logger = logging.getLogger(__name__)

ProviderType = Literal["http", "memory", ""]


class WatchlistServiceFactory:
    @staticmethod
    def create(provider: ProviderType | None = None) -> WatchlistServicePort:
        """Create a watchlist service for ``provider``.

        Args:
            provider: 'http', 'memory', or None to read WATCHLIST_PROVIDER.

        Raises:
            ValueError: If an unsupported provider is specified.
        """
        if provider is None:
            provider = WATCHLIST_PROVIDER  # type: ignore[assignment]

        provider = (provider or "").strip().lower()

        match provider:
            case "http" | "":
                if not WATCHLIST_BASE_URL:
                    logger.warning(
                        "WATCHLIST_PROVIDER=http but WATCHLIST_BASE_URL is not set; "
                        "falling back to InMemoryWatchlistService"
                    )
                    from infrastructure.watchlist.in_memory_watchlist_service import (
                        InMemoryWatchlistService,
                    )

                    return InMemoryWatchlistService()

                from infrastructure.watchlist.http_watchlist_service import (
                    HttpWatchlistService,
                )

                return HttpWatchlistService(
                    base_url=WATCHLIST_BASE_URL,
                    timeout_s=WATCHLIST_TIMEOUT_S,
                )

            case "memory":
                from infrastructure.watchlist.in_memory_watchlist_service import (
                    InMemoryWatchlistService,
                )

                return InMemoryWatchlistService()

            case _:
                raise ValueError(
                    f"Unsupported WATCHLIST_PROVIDER: {provider!r}. "
                    f"Supported values: 'http', 'memory'"
                )


def create_watchlist_service(provider: ProviderType | None = None) -> WatchlistServicePort:
    """Shorthand for ``WatchlistServiceFactory.create()``."""
    return WatchlistServiceFactory.create(provider)

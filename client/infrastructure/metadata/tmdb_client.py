"""
TMDB API HTTP client for the movie detail screen.

Only the movie details endpoint is used. Authentication prefers the v4 bearer
token and falls back to the v3 ``api_key`` query parameter.
"""

from __future__ import annotations

import logging

from application.ports import MovieMetadataPort
from domain.watchlist import MovieDetails
from infrastructure.config.settings import (
    TMDB_API_KEY,
    TMDB_API_TOKEN,
    TMDB_BASE_URL,
    TMDB_LANGUAGE,
    TMDB_TIMEOUT_S,
)
from infrastructure.http import HttpClientBase, parse_model, request_json
from infrastructure.metadata.schemas import TMDBMovie

logger = logging.getLogger(__name__)


class TMDBClient(HttpClientBase, MovieMetadataPort):
    """Async HTTP client for TMDB API.

    Attributes:
        _base_url: TMDB API base URL
        _api_token: TMDB API bearer token (JWT)
        _api_key: TMDB v3 API key, used only when no bearer token is set
        _language: response language, e.g. "en-US"
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        api_token: str | None = None,
        api_key: str | None = None,
        timeout_s: float | None = None,
        language: str | None = None,
    ) -> None:
        super().__init__(timeout_s=float(timeout_s or TMDB_TIMEOUT_S or 10.0))
        self._base_url = (base_url or TMDB_BASE_URL or "").rstrip("/")
        self._api_token = (api_token if api_token is not None else TMDB_API_TOKEN or "").strip()
        self._api_key = (api_key if api_key is not None else TMDB_API_KEY or "").strip()
        self._language = (language or TMDB_LANGUAGE or "en-US").strip()
        if not (self._api_token or self._api_key):
            logger.warning("TMDB client not configured (missing TMDB_API_TOKEN / TMDB_API_KEY)")

    def _headers(self) -> dict[str, str]:
        headers = {"accept": "application/json"}
        # Prefer v4 bearer token auth when available.
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        return headers

    def _auth_params(self) -> dict[str, str]:
        """v3 auth via api_key query param (used when bearer token is absent)."""
        if self._api_token:
            return {}
        if self._api_key:
            return {"api_key": self._api_key}
        return {}

    async def fetch_movie_details(self, movie_id: int) -> MovieDetails:
        """Fetch one movie.

        Raises:
            NetworkFailure: TMDB could not be reached or timed out.
            RemoteRejection: TMDB answered with an error status (404, 401, ...).
            MalformedResponse: the body is not a movie record.
        """
        session = await self._get_session()
        url = f"{self._base_url}/movie/{int(movie_id)}"
        params = {"language": self._language}
        params.update(self._auth_params())

        payload = await request_json(
            session,
            "GET",
            url,
            operation="tmdb.movie_details",
            params=params,
            headers=self._headers(),
        )
        movie = parse_model(TMDBMovie, payload, operation="tmdb.movie_details")
        return movie.to_domain()

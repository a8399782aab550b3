from __future__ import annotations

import logging

from application.ports import AuthServicePort
from domain.session import UserSession
from infrastructure.config.settings import AUTH_LOGIN_PATH, WATCHLIST_BASE_URL, WATCHLIST_TIMEOUT_S
from infrastructure.http import HttpClientBase, join_url, parse_model, request_json
from infrastructure.watchlist.schemas import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)


class HttpAuthService(HttpClientBase, AuthServicePort):
    """Login endpoint of the watchlist backend."""

    def __init__(
        self,
        *,
        base_url: str = WATCHLIST_BASE_URL,
        timeout_s: float = WATCHLIST_TIMEOUT_S,
        login_path: str = AUTH_LOGIN_PATH,
    ) -> None:
        super().__init__(timeout_s=timeout_s)
        self._login_url = join_url(base_url, login_path)

    async def login(self, *, username: str, password: str) -> UserSession:
        session = await self._get_session()
        payload = await request_json(
            session,
            "POST",
            self._login_url,
            operation="auth.login",
            json_body=LoginRequest(username=username, password=password).model_dump(),
            headers={"accept": "application/json"},
        )
        return parse_model(LoginResponse, payload, operation="auth.login").to_domain()

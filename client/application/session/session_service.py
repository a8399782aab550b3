from __future__ import annotations

import logging
from typing import Optional

from application.ports import AuthServicePort, SessionStorePort
from domain.errors import IncompleteCredentials
from domain.session import UserSession

logger = logging.getLogger(__name__)


class SessionService:
    """Signs the user in and keeps the resulting session in local storage."""

    def __init__(self, *, auth: AuthServicePort, store: SessionStorePort) -> None:
        self._auth = auth
        self._store = store

    async def login(self, username: str, password: str) -> UserSession:
        username = (username or "").strip()
        if not username or not (password or "").strip():
            raise IncompleteCredentials("Username and password must not be empty.")

        session = await self._auth.login(username=username, password=password)
        await self._store.save(session)
        logger.info("Signed in username=%s", session.username)
        return session

    async def current_session(self) -> Optional[UserSession]:
        return await self._store.load()

    async def logout(self) -> None:
        await self._store.clear()

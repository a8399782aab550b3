from __future__ import annotations

from typing import Optional

from application.ports import SessionStorePort
from domain.session import UserSession


class InMemorySessionStore(SessionStorePort):
    """Session storage for the lifetime of the process.

    Device storage proper belongs to the host platform; this keeps the signed-in
    user between screens of one run.
    """

    def __init__(self, session: Optional[UserSession] = None) -> None:
        self._session = session

    async def load(self) -> Optional[UserSession]:
        return self._session

    async def save(self, session: UserSession) -> None:
        self._session = session

    async def clear(self) -> None:
        self._session = None

from __future__ import annotations

from typing import Optional, Protocol

from domain.session import UserSession


class SessionStorePort(Protocol):
    """Local device storage for the signed-in user."""

    async def load(self) -> Optional[UserSession]:
        ...

    async def save(self, session: UserSession) -> None:
        ...

    async def clear(self) -> None:
        ...

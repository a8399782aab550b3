from __future__ import annotations

from typing import Protocol

from domain.session import UserSession


class AuthServicePort(Protocol):
    async def login(self, *, username: str, password: str) -> UserSession:
        ...

    async def close(self) -> None:
        ...

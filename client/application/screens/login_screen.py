from __future__ import annotations

import logging
from typing import Optional

from application.ports import NotifierPort
from application.session import SessionService
from domain.errors import IncompleteCredentials, RemoteRejection, WatchlistClientError
from domain.session import UserSession

logger = logging.getLogger(__name__)


class LoginScreen:
    def __init__(self, *, sessions: SessionService, notifier: NotifierPort) -> None:
        self._sessions = sessions
        self._notifier = notifier
        self._submitting = False

    @property
    def submitting(self) -> bool:
        return self._submitting

    async def submit(self, username: str, password: str) -> Optional[UserSession]:
        """Sign in; every outcome is reported through the notifier."""
        if self._submitting:
            return None
        self._submitting = True
        try:
            session = await self._sessions.login(username, password)
        except IncompleteCredentials as exc:
            self._notifier.notify("Incomplete input", str(exc))
            return None
        except RemoteRejection as exc:
            logger.warning("Login rejected: %s", exc)
            self._notifier.notify("Login failed", exc.message)
            return None
        except WatchlistClientError as exc:
            logger.error("Login failed: %s", exc)
            self._notifier.notify("Error", "Cannot reach the server")
            return None
        finally:
            self._submitting = False

        self._notifier.notify("Login successful", f"Welcome {session.username}")
        return session

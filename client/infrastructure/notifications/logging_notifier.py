from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Tuple

from application.ports import NotifierPort
from infrastructure.utils import format_kv

logger = logging.getLogger(__name__)


class LoggingNotifier(NotifierPort):
    """Routes user notifications to the log and keeps the most recent ones.

    Hosts without a dialog layer (headless runs, scripts) use this; ``recent``
    lets a status line show the last message.
    """

    def __init__(self, *, keep: int = 20) -> None:
        self._recent: Deque[Tuple[str, str]] = deque(maxlen=max(1, keep))

    @property
    def recent(self) -> list[Tuple[str, str]]:
        return list(self._recent)

    def notify(self, title: str, message: str) -> None:
        self._recent.append((title, message))
        logger.info("[notify] %s", format_kv(title=title, message=message))

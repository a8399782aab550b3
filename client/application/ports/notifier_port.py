from __future__ import annotations

from typing import Protocol


class NotifierPort(Protocol):
    """User-facing notification sink (alert dialog, toast, status bar)."""

    def notify(self, title: str, message: str) -> None:
        ...

from __future__ import annotations

from application.session.session_service import SessionService

__all__ = ["SessionService"]

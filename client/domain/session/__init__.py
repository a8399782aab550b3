from __future__ import annotations

from domain.session.user_session import UserSession

__all__ = ["UserSession"]

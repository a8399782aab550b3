from __future__ import annotations

from application.watchlist.membership_toggle import MembershipToggle, failure_notification

__all__ = ["MembershipToggle", "failure_notification"]

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserSession:
    """The signed-in user, passed explicitly into every watchlist call.

    ``user_id`` is opaque to the client: it is read from the session store and
    forwarded as-is.
    """

    user_id: str
    username: str = ""

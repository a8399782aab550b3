from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MembershipState(str, Enum):
    """Client knowledge of whether one movie is in the user's watchlist."""

    UNKNOWN = "unknown"
    CHECKING = "checking"
    SAVED = "saved"
    NOT_SAVED = "not_saved"
    SAVING = "saving"
    REMOVING = "removing"

    @property
    def is_settled(self) -> bool:
        return self in (MembershipState.SAVED, MembershipState.NOT_SAVED)

    @property
    def is_mutating(self) -> bool:
        return self in (MembershipState.SAVING, MembershipState.REMOVING)


class ToggleAction(str, Enum):
    SAVE = "save"
    REMOVE = "remove"
    IGNORED = "ignored"


@dataclass(frozen=True)
class ToggleOutcome:
    """Result of one ``MembershipToggle.toggle()`` call."""

    action: ToggleAction
    succeeded: bool
    state: MembershipState
    message: str = ""
    error: Optional[Exception] = None

    @property
    def ignored(self) -> bool:
        return self.action is ToggleAction.IGNORED

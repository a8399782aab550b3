"""Watchlist membership state machine for one movie.

States::

    UNKNOWN -> CHECKING -> SAVED | NOT_SAVED
    NOT_SAVED -> SAVING -> SAVED      (failure: back to NOT_SAVED)
    SAVED -> REMOVING -> NOT_SAVED    (failure: back to SAVED)

``is_saved`` only ever changes after the remote side confirmed it. There is no
optimistic update, so a failed mutation leaves the visible state untouched.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from application.ports import NotifierPort, WatchlistServicePort
from domain.errors import RemoteRejection, WatchlistClientError
from domain.watchlist import MembershipState, MovieSummary, ToggleAction, ToggleOutcome
from infrastructure.utils import EventLogger

logger = logging.getLogger(__name__)

SAVED_TITLE = "Saved"
REMOVED_TITLE = "Removed"
REJECTED_TITLE = "Failed"
ERROR_TITLE = "Error"

DEFAULT_SAVED_MESSAGE = "Movie added to your watchlist"
DEFAULT_REMOVED_MESSAGE = "Movie removed from your watchlist"

_PENDING = {
    ToggleAction.SAVE: MembershipState.SAVING,
    ToggleAction.REMOVE: MembershipState.REMOVING,
}
_CONFIRMED = {
    ToggleAction.SAVE: MembershipState.SAVED,
    ToggleAction.REMOVE: MembershipState.NOT_SAVED,
}


def failure_notification(action: ToggleAction, error: Exception) -> tuple[str, str]:
    """Title and text shown to the user when a save/remove did not go through."""
    verb = "save" if action is ToggleAction.SAVE else "remove"
    if isinstance(error, RemoteRejection):
        return REJECTED_TITLE, f"Failed to {verb} movie: {error.message}"
    gerund = "saving" if action is ToggleAction.SAVE else "removing"
    return ERROR_TITLE, f"Something went wrong while {gerund} the movie"


class MembershipToggle:
    """Tracks and flips whether ``movie_id`` is in the user's watchlist.

    The user is passed into every call instead of being held here, so one
    toggle never silently acts on behalf of a stale session.
    """

    def __init__(
        self,
        *,
        movie_id: int,
        service: WatchlistServicePort,
        notifier: NotifierPort,
    ) -> None:
        self._movie_id = int(movie_id)
        self._service = service
        self._notifier = notifier
        self._state = MembershipState.UNKNOWN
        self._last_error: Optional[Exception] = None
        self._check_generation = 0
        self._disposed = False
        self._listeners: list[Callable[[MembershipToggle], None]] = []
        self._events = EventLogger(logger, "membership", fields={"movie_id": self._movie_id})

    @property
    def movie_id(self) -> int:
        return self._movie_id

    @property
    def state(self) -> MembershipState:
        return self._state

    @property
    def is_saved(self) -> bool:
        # While removing, the last confirmed state is still "saved".
        return self._state in (MembershipState.SAVED, MembershipState.REMOVING)

    @property
    def is_saving(self) -> bool:
        return self._state.is_mutating

    @property
    def last_error(self) -> Optional[Exception]:
        return self._last_error

    def subscribe(self, listener: Callable[[MembershipToggle], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def check_status(self, user_id: str, movie_id: Optional[int] = None) -> MembershipState:
        """Ask the remote authority whether the movie is saved.

        Any failure lands in ``NOT_SAVED``: an uncertain state is never shown as
        saved. The failure is kept in ``last_error``.
        """
        if movie_id is not None and int(movie_id) != self._movie_id:
            raise ValueError(f"check_status for movie {movie_id} on toggle for movie {self._movie_id}")
        if self._disposed:
            return self._state
        if self._state.is_mutating:
            self._events.debug("check_ignored", state=self._state)
            return self._state

        self._check_generation += 1
        generation = self._check_generation
        self._state = MembershipState.CHECKING
        self._emit()

        try:
            saved = await self._service.is_saved(user_id=user_id, movie_id=self._movie_id)
        except WatchlistClientError as exc:
            if self._check_is_current(generation):
                self._events.warning("check_failed", error=exc)
                self._settle_unknown(exc)
            return self._state
        except Exception as exc:
            if self._check_is_current(generation):
                self._events.exception("check_crashed")
                self._settle_unknown(exc)
            return self._state

        if not self._check_is_current(generation):
            self._events.debug("stale_check_dropped", generation=generation)
            return self._state

        self._last_error = None
        self._state = MembershipState.SAVED if saved else MembershipState.NOT_SAVED
        self._events.info("check_succeeded", state=self._state)
        self._emit()
        return self._state

    async def toggle(self, user_id: str, movie: MovieSummary) -> ToggleOutcome:
        """Save the movie if it is not saved, remove it if it is.

        Ignored (no remote call) unless the state is settled, which rules out
        duplicate mutations from rapid repeated taps.
        """
        if int(movie.id) != self._movie_id:
            raise ValueError(f"toggle for movie {movie.id} on toggle for movie {self._movie_id}")
        if self._disposed or not self._state.is_settled:
            self._events.debug("toggle_ignored", state=self._state, disposed=self._disposed)
            return ToggleOutcome(action=ToggleAction.IGNORED, succeeded=False, state=self._state)

        if self._state is MembershipState.NOT_SAVED:
            return await self._mutate(
                ToggleAction.SAVE,
                lambda: self._service.save(user_id=user_id, movie=movie),
            )
        return await self._mutate(
            ToggleAction.REMOVE,
            lambda: self._service.remove(user_id=user_id, movie_id=self._movie_id),
        )

    def dispose(self) -> None:
        """Stop applying results; late responses neither mutate state nor notify."""
        self._disposed = True
        self._check_generation += 1
        self._listeners.clear()

    async def _mutate(self, action: ToggleAction, call: Callable[[], Awaitable[str]]) -> ToggleOutcome:
        previous = self._state
        self._state = _PENDING[action]
        self._events.info(f"{action.value}_started")
        self._emit()

        try:
            message = await call()
        except WatchlistClientError as exc:
            if self._disposed:
                self._events.warning(f"{action.value}_failed_after_dispose", error=exc)
                return ToggleOutcome(action=action, succeeded=False, state=previous, error=exc)
            self._state = previous
            self._last_error = exc
            self._events.warning(f"{action.value}_failed", error=exc, state=previous)
            title, text = failure_notification(action, exc)
            self._notify(title, text)
            self._emit()
            return ToggleOutcome(action=action, succeeded=False, state=previous, message=text, error=exc)
        except BaseException:
            # Never leave SAVING/REMOVING behind, even on cancellation or a bug.
            if not self._disposed:
                self._state = previous
                self._emit()
            self._events.exception(f"{action.value}_crashed")
            raise

        confirmed = _CONFIRMED[action]
        if action is ToggleAction.SAVE:
            title, text = SAVED_TITLE, message or DEFAULT_SAVED_MESSAGE
        else:
            title, text = REMOVED_TITLE, message or DEFAULT_REMOVED_MESSAGE
        if self._disposed:
            self._events.info(f"{action.value}_confirmed_after_dispose")
            return ToggleOutcome(action=action, succeeded=True, state=confirmed, message=text)

        self._state = confirmed
        self._last_error = None
        self._events.info(f"{action.value}_confirmed", state=confirmed)
        self._notify(title, text)
        self._emit()
        return ToggleOutcome(action=action, succeeded=True, state=confirmed, message=text)

    def _settle_unknown(self, exc: Exception) -> None:
        self._last_error = exc
        self._state = MembershipState.NOT_SAVED
        self._emit()

    def _check_is_current(self, generation: int) -> bool:
        return not self._disposed and generation == self._check_generation

    def _notify(self, title: str, text: str) -> None:
        try:
            self._notifier.notify(title, text)
        except Exception:
            self._events.exception("notify_failed", title=title)

    def _emit(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                self._events.exception("listener_failed")

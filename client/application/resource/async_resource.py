"""Lazy-loading container for one remote fetch.

A screen hands ``AsyncResource`` a zero-argument coroutine function and reads
``data`` / ``error`` / ``loading`` back. Calling ``refetch()`` again re-runs the
fetcher; overlapping calls are resolved by generation number so a slow, older
request can never overwrite a newer one.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from infrastructure.utils import EventLogger

logger = logging.getLogger(__name__)

T = TypeVar("T")

Fetcher = Callable[[], Awaitable[T]]


class ResourceStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class AsyncResource(Generic[T]):
    """Loading/error/data state of a single fetch operation.

    Args:
        fetcher: zero-argument coroutine function producing the value.
        auto_fetch: when false, ``mount()`` does not start a fetch; the owner
            decides when to call ``refetch()`` (e.g. on screen focus).
        name: label used in log lines.

    Only the most recently *initiated* ``refetch()`` may apply its result.
    After ``dispose()`` nothing mutates the state any more.
    """

    def __init__(
        self,
        fetcher: Fetcher[T],
        *,
        auto_fetch: bool = True,
        name: str = "resource",
    ) -> None:
        self._fetcher = fetcher
        self._auto_fetch = auto_fetch
        self._name = name
        self._data: Optional[T] = None
        self._error: Optional[Exception] = None
        self._status = ResourceStatus.IDLE
        self._generation = 0
        self._disposed = False
        self._listeners: list[Callable[[AsyncResource[T]], None]] = []
        self._mount_task: Optional[asyncio.Task[None]] = None
        self._events = EventLogger(logger, f"resource:{name}", timed=True)

    @property
    def data(self) -> Optional[T]:
        return self._data

    @property
    def error(self) -> Optional[Exception]:
        return self._error

    @property
    def loading(self) -> bool:
        return self._status is ResourceStatus.LOADING

    @property
    def status(self) -> ResourceStatus:
        return self._status

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def name(self) -> str:
        return self._name

    def subscribe(self, listener: Callable[[AsyncResource[T]], None]) -> Callable[[], None]:
        """Register a change listener; returns the matching unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def mount(self) -> Optional[asyncio.Task[None]]:
        """Start the first fetch in the background when ``auto_fetch`` is set."""
        if self._disposed or not self._auto_fetch:
            return None
        self._mount_task = asyncio.get_running_loop().create_task(
            self.refetch(), name=f"resource:{self._name}:mount"
        )
        return self._mount_task

    async def refetch(self) -> None:
        """Run the fetcher and apply its outcome if no newer call was started.

        Failures are captured into ``error``; they are never raised to the caller.
        """
        if self._disposed:
            self._events.debug("refetch_after_dispose")
            return

        self._generation += 1
        generation = self._generation
        self._status = ResourceStatus.LOADING
        self._error = None
        self._events.debug("fetch_started", generation=generation)
        self._emit()

        try:
            result = await self._fetcher()
        except asyncio.CancelledError:
            if self._is_current(generation):
                self._status = ResourceStatus.SUCCESS if self._data is not None else ResourceStatus.IDLE
                self._emit()
            raise
        except Exception as exc:
            if not self._is_current(generation):
                self._events.debug("stale_failure_dropped", generation=generation, error=exc)
                return
            # Keep the previous data visible; only the error is new.
            self._error = exc
            self._status = ResourceStatus.FAILED
            self._events.warning("fetch_failed", generation=generation, error=exc)
            self._emit()
            return

        if not self._is_current(generation):
            self._events.debug("stale_result_dropped", generation=generation, latest=self._generation)
            return

        self._data = result
        self._status = ResourceStatus.SUCCESS
        self._events.debug("fetch_succeeded", generation=generation)
        self._emit()

    def reset(self) -> None:
        """Forget data and error; results of in-flight calls are dropped."""
        if self._disposed:
            return
        self._generation += 1
        self._data = None
        self._error = None
        self._status = ResourceStatus.IDLE
        self._emit()

    def dispose(self) -> None:
        """Detach from the owner; late results are never applied."""
        self._disposed = True
        self._generation += 1
        self._listeners.clear()

    def _is_current(self, generation: int) -> bool:
        return not self._disposed and generation == self._generation

    def _emit(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                self._events.exception("listener_failed")

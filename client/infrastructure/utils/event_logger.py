from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Optional

from infrastructure.utils.log_format import format_kv


class EventLogger:
    """Timeline of one client component as ``[component] seq=N event="..." ...`` lines.

    ``seq`` only advances for lines that are actually emitted, so gaps never
    appear when DEBUG is off. ``timed`` adds seconds since the logger was built.
    """

    def __init__(
        self,
        logger: logging.Logger,
        component: str,
        *,
        fields: Optional[Mapping[str, Any]] = None,
        timed: bool = False,
    ) -> None:
        self._logger = logger
        self._tag = f"[{component}]"
        self._fields = dict(fields or {})
        self._origin = time.monotonic() if timed else None
        self._seq = 0

    def debug(self, event: str, **fields: Any) -> None:
        self._log(logging.DEBUG, event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self._log(logging.INFO, event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log(logging.WARNING, event, **fields)

    def exception(self, event: str, **fields: Any) -> None:
        """ERROR line with the active traceback attached."""
        self._log(logging.ERROR, event, exc_info=True, **fields)

    def _log(self, level: int, event: str, *, exc_info: bool = False, **fields: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._seq += 1
        line: dict[str, Any] = {"seq": self._seq, "event": event}
        if self._origin is not None:
            line["elapsed_seconds"] = round(time.monotonic() - self._origin, 4)
        line.update(self._fields)
        line.update(fields)
        # stacklevel=3 attributes the record to the component, not this helper.
        self._logger.log(level, "%s %s", self._tag, format_kv(**line), exc_info=exc_info, stacklevel=3)

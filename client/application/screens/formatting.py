from __future__ import annotations

import math
from typing import Iterable, Optional, TypeVar

T = TypeVar("T")

POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"
NOT_AVAILABLE = "N/A"
SEPARATOR = " • "


def poster_url(poster_path: Optional[str]) -> Optional[str]:
    if not poster_path:
        return None
    return f"{POSTER_BASE_URL}{poster_path}"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def rating_label(vote_average: Optional[float]) -> str:
    return f"{round_half_up(vote_average or 0.0)}/10"


def millions(amount: Optional[int], *, rounded: bool = False) -> str:
    value = (amount or 0) / 1_000_000
    if rounded:
        return f"${round_half_up(value)} million"
    return f"${value:g} million"


def join_names(names: Iterable[str]) -> str:
    return SEPARATOR.join(n for n in names if n) or NOT_AVAILABLE


def or_na(value: object) -> str:
    if value is None or value == "" or value == 0:
        return NOT_AVAILABLE
    return str(value)


def chunk(items: list[T], size: int) -> list[list[T]]:
    size = max(1, int(size))
    return [items[i : i + size] for i in range(0, len(items), size)]

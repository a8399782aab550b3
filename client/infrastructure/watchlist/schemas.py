"""Wire models for the watchlist REST service, login endpoint included."""

from __future__ import annotations

from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, TypeAdapter, ValidationError, field_validator

from domain.errors import MalformedResponse
from domain.session import UserSession
from domain.watchlist import MovieSummary, WatchlistEntry


def _to_str(value: Any) -> Any:
    # Backends key users by integer ids; the client treats them as opaque strings.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


OpaqueId = Annotated[Optional[str], BeforeValidator(_to_str)]


class WatchlistEntryPayload(BaseModel):
    """One row of ``GET /watchlist/{user_id}``."""

    model_config = ConfigDict(extra="ignore")

    user_id: OpaqueId = None
    movie_id: int
    title: str = ""
    poster_path: Optional[str] = None
    vote_average: float = 0.0
    release_date: Optional[str] = None

    @field_validator("vote_average", mode="before")
    @classmethod
    def zero_when_null(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    def to_domain(self, *, user_id: str) -> WatchlistEntry:
        return WatchlistEntry(
            user_id=self.user_id or user_id,
            movie_id=self.movie_id,
            title=self.title,
            poster_path=self.poster_path,
            vote_average=self.vote_average,
            release_date=self.release_date,
        )


class CheckResponse(BaseModel):
    """``GET /watchlist/check`` response."""

    model_config = ConfigDict(extra="ignore")

    saved: bool


class MessageResponse(BaseModel):
    """Success body of save/remove."""

    model_config = ConfigDict(extra="ignore")

    message: str = ""


class SaveRequest(BaseModel):
    user_id: str
    movie_id: int
    title: str
    poster_path: Optional[str] = None
    vote_average: float = 0.0
    release_date: Optional[str] = None

    @classmethod
    def from_movie(cls, *, user_id: str, movie: MovieSummary) -> SaveRequest:
        return cls(
            user_id=user_id,
            movie_id=movie.id,
            title=movie.title,
            poster_path=movie.poster_path,
            vote_average=movie.vote_average,
            release_date=movie.release_date,
        )


class RemoveRequest(BaseModel):
    user_id: str
    movie_id: int


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str
    id: OpaqueId = None


class LoginResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user: LoginUser
    message: str = ""

    def to_domain(self) -> UserSession:
        return UserSession(user_id=self.user.id or self.user.username, username=self.user.username)


_ENTRY_LIST = TypeAdapter(List[WatchlistEntryPayload])
_LIST_KEYS = ("data", "items", "watchlist", "results")


def parse_entries(payload: Any, *, user_id: str, operation: str) -> list[WatchlistEntry]:
    # Accept a bare array or a common envelope such as {"data": [...]}.
    if isinstance(payload, dict):
        for key in _LIST_KEYS:
            if isinstance(payload.get(key), list):
                payload = payload[key]
                break
    if not isinstance(payload, list):
        raise MalformedResponse(
            f"expected a list of watchlist entries, got {type(payload).__name__}",
            operation=operation,
        )
    try:
        rows = _ENTRY_LIST.validate_python(payload)
    except ValidationError as exc:
        raise MalformedResponse(f"invalid watchlist entry: {exc.errors()[0]['msg']}", operation=operation) from exc
    return [row.to_domain(user_id=user_id) for row in rows]

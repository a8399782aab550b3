import os
from typing import Optional

from dotenv import load_dotenv

# Load the project-root .env first; it wins over the shell so edits to .env are
# picked up without restarting the terminal session.
load_dotenv(override=True)


def _get_env_int(key: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer, got {raw!r}") from exc


def _get_env_float(key: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be a number, got {raw!r}") from exc


# ===== Watchlist service =====

# Provider selection: http (remote REST service) or memory (local fake)
WATCHLIST_PROVIDER = os.getenv("WATCHLIST_PROVIDER", "http").strip().lower()

WATCHLIST_BASE_URL = os.getenv("WATCHLIST_BASE_URL", "http://localhost:3000/api").strip()
# Single attempt per user action; a timeout counts as a network failure.
WATCHLIST_TIMEOUT_S = _get_env_float("WATCHLIST_TIMEOUT_S", 10.0) or 10.0

# Paths are relative to WATCHLIST_BASE_URL.
WATCHLIST_LIST_PATH = os.getenv("WATCHLIST_LIST_PATH", "/watchlist/{user_id}").strip() or "/watchlist/{user_id}"
WATCHLIST_CHECK_PATH = os.getenv("WATCHLIST_CHECK_PATH", "/watchlist/check").strip() or "/watchlist/check"
WATCHLIST_SAVE_PATH = os.getenv("WATCHLIST_SAVE_PATH", "/watchlist/save").strip() or "/watchlist/save"
WATCHLIST_REMOVE_PATH = os.getenv("WATCHLIST_REMOVE_PATH", "/watchlist/remove").strip() or "/watchlist/remove"
AUTH_LOGIN_PATH = os.getenv("AUTH_LOGIN_PATH", "/auth/login").strip() or "/auth/login"


# ===== Movie metadata (TMDB) =====

TMDB_BASE_URL = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3").strip()
TMDB_API_TOKEN = os.getenv("TMDB_API_TOKEN", "").strip()
TMDB_API_KEY = os.getenv("TMDB_API_KEY", "").strip()
TMDB_TIMEOUT_S = _get_env_float("TMDB_TIMEOUT_S", 10.0) or 10.0
TMDB_LANGUAGE = os.getenv("TMDB_LANGUAGE", "en-US").strip() or "en-US"


# ===== Screens =====

WATCHLIST_GRID_COLUMNS = _get_env_int("WATCHLIST_GRID_COLUMNS", 3) or 3

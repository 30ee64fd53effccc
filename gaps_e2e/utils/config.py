"""Environment-driven settings for the Gaps scenario suite."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_BASE_URL = "http://localhost:8484"


def get_directory_from_env(env_name: str, default_path: str) -> Path:
    """Return a directory path from env, ensuring it exists."""
    configured = os.environ.get(env_name, default_path)
    directory = Path(configured)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _int_from_env(env_name: str, default: int) -> int:
    raw = os.environ.get(env_name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{env_name} must be an integer, got {raw!r}") from None


def _flag_from_env(env_name: str, default: bool) -> bool:
    raw = os.environ.get(env_name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


def get_base_url() -> str:
    """Return the application base URL without a trailing slash."""
    return (os.environ.get("GAPS_BASE_URL", "").strip() or DEFAULT_BASE_URL).rstrip("/")


def get_tmdb_key() -> str:
    """Return the TMDB API key used by the library fixtures, if configured."""
    return os.environ.get("GAPS_TMDB_KEY", "").strip()


@dataclass(frozen=True)
class PlexServer:
    """Connection details for a Plex server registered by a fixture hook."""

    address: str
    port: str
    token: str


def get_plex_server(name: str) -> PlexServer | None:
    """Read ``GAPS_<NAME>_PLEX_ADDRESS/PORT/TOKEN``; None when address or token is missing."""
    prefix = f"GAPS_{name.upper()}_PLEX_"
    address = os.environ.get(f"{prefix}ADDRESS", "").strip()
    token = os.environ.get(f"{prefix}TOKEN", "").strip()
    if not address or not token:
        return None
    port = os.environ.get(f"{prefix}PORT", "").strip() or "32400"
    return PlexServer(address=address, port=port, token=token)


@dataclass(frozen=True)
class E2ESettings:
    """Timeouts and switches shared by page objects and fixtures (milliseconds)."""

    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = 4_000
    search_timeout_ms: int = 120_000
    startup_timeout_ms: int = 10_000
    poll_interval_ms: int = 100
    headless: bool = True
    wait_for_startup: bool = False

    @classmethod
    def from_env(cls) -> "E2ESettings":
        return cls(
            base_url=get_base_url(),
            timeout_ms=_int_from_env("GAPS_E2E_TIMEOUT_MS", cls.timeout_ms),
            search_timeout_ms=_int_from_env("GAPS_E2E_SEARCH_TIMEOUT_MS", cls.search_timeout_ms),
            startup_timeout_ms=_int_from_env("GAPS_E2E_STARTUP_TIMEOUT_MS", cls.startup_timeout_ms),
            poll_interval_ms=_int_from_env("GAPS_E2E_POLL_INTERVAL_MS", cls.poll_interval_ms),
            headless=_flag_from_env("GAPS_E2E_HEADLESS", cls.headless),
            wait_for_startup=_flag_from_env("GAPS_E2E_WAIT_FOR_STARTUP", cls.wait_for_startup),
        )

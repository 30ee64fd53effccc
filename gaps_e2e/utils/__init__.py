"""Utility helpers for configuration and logging."""

from .config import (
    E2ESettings,
    PlexServer,
    get_base_url,
    get_directory_from_env,
    get_plex_server,
    get_tmdb_key,
)
from .logging_utils import configure_json_logging

__all__ = [
    "E2ESettings",
    "PlexServer",
    "configure_json_logging",
    "get_base_url",
    "get_directory_from_env",
    "get_plex_server",
    "get_tmdb_key",
]

"""Root conftest: shared fixtures available to all test layers."""

from __future__ import annotations

import os
from unittest.mock import MagicMock, patch

import pytest

from gaps_e2e.utils.config import E2ESettings

GAPS_ENV_PREFIXES = ("GAPS_",)


@pytest.fixture()
def clean_env():
    """Remove every GAPS_* variable so settings fall back to their defaults."""
    cleared = {k: v for k, v in os.environ.items() if k.startswith(GAPS_ENV_PREFIXES)}
    with patch.dict(os.environ, {}, clear=False):
        for key in cleared:
            os.environ.pop(key, None)
        yield


@pytest.fixture()
def library_env(clean_env):
    """TMDB key plus Plex servers for the knox and red library states."""
    values = {
        "GAPS_TMDB_KEY": "tmdb_fake_key",
        "GAPS_KNOX_PLEX_ADDRESS": "192.168.1.8",
        "GAPS_KNOX_PLEX_PORT": "32400",
        "GAPS_KNOX_PLEX_TOKEN": "knox_token",
        "GAPS_RED_PLEX_ADDRESS": "192.168.1.9",
        "GAPS_RED_PLEX_TOKEN": "red_token",
    }
    with patch.dict(os.environ, values):
        yield values


@pytest.fixture()
def fast_settings() -> E2ESettings:
    """Settings with short timeouts for mocked-page tests."""
    return E2ESettings(
        base_url="http://gaps.test",
        timeout_ms=50,
        search_timeout_ms=100,
        startup_timeout_ms=50,
        poll_interval_ms=1,
    )


@pytest.fixture()
def mock_page():
    """A MagicMock standing in for a Playwright Page."""
    page = MagicMock()
    page.url = "http://gaps.test/configuration"
    page.evaluate.return_value = 1700000000123.5
    return page

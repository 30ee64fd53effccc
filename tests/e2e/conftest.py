"""Pytest configuration for the Gaps E2E scenarios with Playwright."""
import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from gaps_e2e.app_client import is_reachable
from gaps_e2e.library_fixtures import (
    StateNotConfiguredError,
    joker_library_before,
    library_before,
    red_library_before,
)
from gaps_e2e.utils.config import E2ESettings

from tests.e2e.pages import ConfigurationPage


@pytest.fixture(scope="session")
def settings():
    """Timeouts, base URL and switches read from GAPS_* env vars."""
    return E2ESettings.from_env()


@pytest.fixture(scope="session")
def base_url(settings):
    """Base URL for the application."""
    return settings.base_url


@pytest.fixture(scope="session")
def browser(settings):
    """Launch browser for E2E tests."""
    with sync_playwright() as p:
        try:
            browser = p.chromium.launch(headless=settings.headless)
        except PlaywrightError as exc:
            pytest.skip(f"Chromium is not available: {exc}")
        yield browser
        browser.close()


@pytest.fixture(scope="function")
def page(browser):
    """Create a new page for each test."""
    context = browser.new_context(
        viewport={'width': 1920, 'height': 1080}
    )
    page = context.new_page()
    yield page
    page.close()
    context.close()


@pytest.fixture(scope="session")
def gaps_app(base_url):
    """Skip scenarios that need the application when it is not running."""
    if not is_reachable(base_url):
        pytest.skip(f"Gaps is not reachable at {base_url}")
    return base_url


def _establish(hook, browser, base_url, settings):
    context = browser.new_context()
    try:
        configuration = ConfigurationPage(context.new_page(), base_url, settings)
        return hook(base_url, configuration.register_library)
    except StateNotConfiguredError as exc:
        pytest.skip(str(exc))
    finally:
        context.close()


@pytest.fixture(scope="class")
def knox_library(gaps_app, browser, settings):
    """KnoxServer registered, no library searched yet."""
    return _establish(library_before, browser, gaps_app, settings)


@pytest.fixture(scope="class")
def red_library(gaps_app, browser, settings):
    """Server whose second library owns the "Saw" movies."""
    return _establish(red_library_before, browser, gaps_app, settings)


@pytest.fixture
def joker_library(gaps_app, browser, settings):
    """Server whose regular movie library is empty."""
    return _establish(joker_library_before, browser, gaps_app, settings)

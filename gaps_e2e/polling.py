"""Bounded polling for DOM conditions.

Playwright's ``expect`` already retries its own assertions; ``described``
re-labels its failures with the scenario-level condition, and ``wait_until``
covers conditions ``expect`` cannot express (image natural size, computed
values).
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterator

from playwright.sync_api import Error as PlaywrightError

from .errors import ScenarioAssertionError

logger = logging.getLogger("gaps-e2e.polling")


def wait_until(
    condition: Callable[[], bool],
    description: str,
    *,
    timeout_ms: float = 4_000,
    interval_ms: float = 100,
) -> None:
    """Call *condition* until it returns truthy or *timeout_ms* elapses.

    Playwright errors raised by an attempt (element detached, navigation in
    flight) count as "not yet"; the last one is chained onto the final
    ``ScenarioAssertionError``.
    """
    deadline = time.monotonic() + timeout_ms / 1000
    last_error: Exception | None = None
    attempts = 0

    while True:
        attempts += 1
        try:
            if condition():
                return
        except PlaywrightError as exc:
            last_error = exc
            logger.debug("Attempt %d for '%s' raised: %s", attempts, description, exc)

        if time.monotonic() >= deadline:
            break
        time.sleep(interval_ms / 1000)

    raise ScenarioAssertionError(description, timeout_ms) from last_error


@contextmanager
def described(description: str, timeout_ms: float | None = None) -> Iterator[None]:
    """Re-raise assertion failures in the block as ``ScenarioAssertionError(description)``."""
    try:
        yield
    except ScenarioAssertionError:
        raise
    except AssertionError as exc:
        raise ScenarioAssertionError(description, timeout_ms) from exc


def image_natural_width(locator) -> int:
    """Return ``naturalWidth`` of the first element matched by *locator* (0 until loaded)."""
    return int(locator.first.evaluate("img => img.naturalWidth || 0"))

"""HTTP helpers for the Gaps application under test."""

from __future__ import annotations

import asyncio
import logging

import httpx

from .errors import FixtureSetupError

logger = logging.getLogger("gaps-e2e.app-client")

APP_ROUTES = ("/configuration", "/libraries", "/recommended", "/rssCheck", "/about")


def is_reachable(base_url: str, timeout: float = 5.0) -> bool:
    """Return True when the application answers ``GET /`` with a non-5xx status."""
    try:
        response = httpx.get(f"{base_url.rstrip('/')}/", timeout=timeout, follow_redirects=True)
    except httpx.HTTPError as exc:
        logger.info("Gaps not reachable at %s: %s", base_url, exc)
        return False
    return response.status_code < 500


async def route_statuses(base_url: str, timeout: float = 10.0) -> dict[str, int | None]:
    """Fetch every known route concurrently; ``None`` marks a transport failure."""
    base = base_url.rstrip("/")

    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:

        async def fetch(route: str) -> int | None:
            try:
                response = await client.get(f"{base}{route}")
            except httpx.HTTPError as exc:
                logger.warning("GET %s failed: %s", route, exc)
                return None
            return response.status_code

        codes = await asyncio.gather(*(fetch(route) for route in APP_ROUTES))

    return dict(zip(APP_ROUTES, codes))


def nuke(base_url: str, state: str = "reset", timeout: float = 30.0) -> None:
    """Wipe the application's stored configuration and libraries (``PUT /nuke``)."""
    url = f"{base_url.rstrip('/')}/nuke"
    try:
        response = httpx.put(url, timeout=timeout)
    except httpx.HTTPError as exc:
        raise FixtureSetupError(state, f"PUT {url} failed: {exc}") from exc
    if not response.is_success:
        raise FixtureSetupError(state, f"PUT {url} returned {response.status_code}")
    logger.info("Reset Gaps state via %s", url)

"""Library-state fixture hooks run before a scenario group.

Each named state resets the application and registers one Plex server whose
libraries the group's scenarios assert against:

* ``knox``  - KnoxServer with "Movies" and "Disney Classic Movies", never searched
* ``red``   - the server whose second library owns the "Saw" movies
* ``joker`` - a server whose regular movie library is empty

Connection details come from the environment (see ``get_plex_server``).  The
browser half of the setup is supplied by the caller as a ``configure``
callback so this module stays free of page objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable

from playwright.sync_api import Error as PlaywrightError

from . import app_client
from .errors import FixtureSetupError, GapsE2EError
from .utils.config import PlexServer, get_plex_server, get_tmdb_key

logger = logging.getLogger("gaps-e2e.fixtures")

KNOWN_STATES = ("knox", "red", "joker")


class StateNotConfiguredError(GapsE2EError):
    """The TMDB key or the Plex server for a library state is missing from env."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Library state '{name}' needs GAPS_TMDB_KEY and "
            f"GAPS_{name.upper()}_PLEX_ADDRESS/GAPS_{name.upper()}_PLEX_TOKEN"
        )


@dataclass(frozen=True)
class LibraryState:
    """Everything needed to put the application into a named library state."""

    name: str
    tmdb_key: str
    plex: PlexServer


def resolve_state(name: str) -> LibraryState | None:
    """Build the named state from env; ``None`` when it is not configured."""
    if name not in KNOWN_STATES:
        raise ValueError(f"Unknown library state '{name}'. Expected one of {KNOWN_STATES}")
    tmdb_key = get_tmdb_key()
    plex = get_plex_server(name)
    if not tmdb_key or plex is None:
        return None
    return LibraryState(name=name, tmdb_key=tmdb_key, plex=plex)


def establish(
    state: LibraryState,
    base_url: str,
    configure: Callable[[LibraryState], None],
) -> LibraryState:
    """Reset the app, then let *configure* drive the UI into *state*."""
    logger.info("Establishing library state '%s' on %s", state.name, base_url)
    app_client.nuke(base_url, state=state.name)
    try:
        configure(state)
    except GapsE2EError as exc:
        raise FixtureSetupError(state.name, str(exc)) from exc
    except (AssertionError, TimeoutError, PlaywrightError) as exc:
        raise FixtureSetupError(state.name, f"configuration step failed: {exc}") from exc
    logger.info("Library state '%s' ready", state.name)
    return state


def run_hook(name: str, base_url: str, configure: Callable[[LibraryState], None]) -> LibraryState:
    """Resolve the named state from env and establish it."""
    state = resolve_state(name)
    if state is None:
        raise StateNotConfiguredError(name)
    return establish(state, base_url, configure)


# Preconditions for the "not searched yet", "find owned movies" and
# empty-library scenario groups.
library_before = partial(run_hook, "knox")
red_library_before = partial(run_hook, "red")
joker_library_before = partial(run_hook, "joker")

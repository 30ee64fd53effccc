"""One-shot detection of "the application has finished its startup wiring".

The probe is injected with ``page.add_init_script`` so it runs in every new
document before any of the page's own scripts.  It wraps
``EventTarget.prototype.addEventListener``; the first registration of a
``change`` listener anywhere in the document flips a window-scoped flag and
puts the original function back.  Every call is forwarded unchanged, so the
probe is a pure observer.

The flag lives on ``window`` and therefore starts over with each navigation.
``StartupSignal`` is the Python-side cell for one document: it remembers the
document's ``performance.timeOrigin`` and never reports a flag raised by a
later (or earlier) navigation of the same page.
"""

from __future__ import annotations

import json
import logging
import weakref

from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .errors import ProbeNeverFiredError

logger = logging.getLogger("gaps-e2e.probe")

DEFAULT_FLAG = "__gapsAppHasStarted"
STARTUP_EVENT = "change"

_PROBE_TEMPLATE = """
(() => {
  const flag = %(flag)s;
  const target = window.EventTarget && window.EventTarget.prototype;
  if (!target || typeof target.addEventListener !== "function") {
    return;
  }
  window[flag] = false;
  const addListener = target.addEventListener;
  let fired = false;
  target.addEventListener = function (name) {
    if (!fired && name === %(event)s) {
      fired = true;
      window[flag] = true;
      target.addEventListener = addListener;
    }
    return addListener.apply(this, arguments);
  };
})();
"""


class StartupSignal:
    """Single-document view of the probe flag."""

    def __init__(self, page: Page, flag: str, time_origin: float) -> None:
        self.page = page
        self.flag = flag
        self.time_origin = time_origin

    @property
    def _expression(self) -> str:
        return (
            f"() => performance.timeOrigin === {json.dumps(self.time_origin)}"
            f" && window[{json.dumps(self.flag)}] === true"
        )

    def is_set(self) -> bool:
        """True once the document this signal belongs to registered a ``change`` listener."""
        return bool(self.page.evaluate(self._expression))

    def wait(self, timeout_ms: float = 10_000) -> None:
        """Block until the flag is raised or raise ``ProbeNeverFiredError``."""
        try:
            self.page.wait_for_function(self._expression, timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise ProbeNeverFiredError(
                f"startup probe never fired on {self.page.url} "
                f"(no '{STARTUP_EVENT}' listener registered)",
                timeout_ms,
            ) from exc
        logger.debug("Startup observed on %s", self.page.url)


class ReadinessProbe:
    """Installs the probe script on pages and hands out per-navigation signals."""

    def __init__(self, flag: str = DEFAULT_FLAG) -> None:
        self.flag = flag
        self._installed: weakref.WeakSet = weakref.WeakSet()

    @property
    def script(self) -> str:
        return _PROBE_TEMPLATE % {
            "flag": json.dumps(self.flag),
            "event": json.dumps(STARTUP_EVENT),
        }

    def install(self, page: Page) -> None:
        """Register the probe as an init script; repeated calls for one page are no-ops."""
        if page in self._installed:
            return
        page.add_init_script(script=self.script)
        self._installed.add(page)
        logger.debug("Readiness probe installed (flag=%s)", self.flag)

    def is_installed(self, page: Page) -> bool:
        return page in self._installed

    def signal(self, page: Page) -> StartupSignal:
        """Create a fresh signal bound to the page's current document."""
        time_origin = page.evaluate("() => performance.timeOrigin")
        return StartupSignal(page, self.flag, time_origin)

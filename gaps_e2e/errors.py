"""Exception types raised by scenario assertions and fixture hooks."""

from __future__ import annotations


class GapsE2EError(Exception):
    """Base class for all errors raised by the scenario tooling."""


class ScenarioAssertionError(GapsE2EError, AssertionError):
    """A DOM condition did not hold within its polling budget."""

    def __init__(self, description: str, timeout_ms: float | None = None) -> None:
        self.description = description
        self.timeout_ms = timeout_ms
        if timeout_ms is None:
            message = f"Condition not met: {description}"
        else:
            message = f"Condition not met within {timeout_ms:g} ms: {description}"
        super().__init__(message)


class ProbeNeverFiredError(ScenarioAssertionError):
    """The page never registered a ``change`` listener, so startup was never observed."""


class FixtureSetupError(GapsE2EError):
    """A library fixture hook could not establish its precondition."""

    def __init__(self, state: str, reason: str) -> None:
        self.state = state
        self.reason = reason
        super().__init__(f"Library fixture '{state}' failed: {reason}")

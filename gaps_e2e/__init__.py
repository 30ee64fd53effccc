"""Browser-driven end-to-end scenarios for the Gaps media-library web app."""

from .errors import FixtureSetupError, GapsE2EError, ProbeNeverFiredError, ScenarioAssertionError
from .library_fixtures import joker_library_before, library_before, red_library_before
from .polling import described, wait_until
from .readiness_probe import ReadinessProbe, StartupSignal
from .suite_runner import SCENARIO_GROUPS, format_summary, run_scenarios

__all__ = [
    "FixtureSetupError",
    "GapsE2EError",
    "ProbeNeverFiredError",
    "ReadinessProbe",
    "SCENARIO_GROUPS",
    "ScenarioAssertionError",
    "StartupSignal",
    "described",
    "format_summary",
    "joker_library_before",
    "library_before",
    "red_library_before",
    "run_scenarios",
    "wait_until",
]

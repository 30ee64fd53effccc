"""Run named scenario groups with pytest and summarize the outcome."""

from __future__ import annotations

import json
import logging
import os
import re
import subprocess
import sys
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path

logger = logging.getLogger("gaps-e2e.suite-runner")

PROJECT_ROOT = Path(__file__).resolve().parent.parent

SCENARIO_GROUPS: dict[str, tuple[str, ...]] = {
    "configuration": ("tests/e2e/test_configuration.py",),
    "libraries": (
        "tests/e2e/test_libraries_not_searched.py",
        "tests/e2e/test_find_owned_movies.py",
        "tests/e2e/test_regular_movies_empty.py",
    ),
    "navigation": ("tests/e2e/test_navigation_tabs.py",),
    "probe": ("tests/e2e/test_readiness_probe_browser.py",),
}
SCENARIO_GROUPS["all"] = tuple(path for paths in SCENARIO_GROUPS.values() for path in paths)

_FAILED_LINE = re.compile(r"^FAILED (?P<node>\S+)(?: - (?P<reason>.*))?$", re.MULTILINE)
_ERROR_LINE = re.compile(r"^ERROR (?P<node>\S+)(?: - (?P<reason>.*))?$", re.MULTILINE)


@dataclass(frozen=True)
class ScenarioFailure:
    """One failed scenario as reported in pytest's short summary."""

    scenario: str
    reason: str
    kind: str = "failed"


@dataclass
class SuiteRun:
    """Outcome of one scenario-group execution."""

    group: str
    base_url: str
    exit_code: int = 1
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    errors: int = 0
    failures: list[ScenarioFailure] = field(default_factory=list)
    output: str = ""
    error: str = ""
    record_file: str = "N/A"

    @property
    def ok(self) -> bool:
        return not self.error and self.exit_code == 0 and self.passed > 0


def build_command(group: str) -> list[str]:
    """Return the pytest invocation for *group*."""
    if group not in SCENARIO_GROUPS:
        raise ValueError(f"Unknown scenario group '{group}'. Expected one of {sorted(SCENARIO_GROUPS)}")
    return [sys.executable, "-m", "pytest", "-v", "-rfE", "--tb=short", *SCENARIO_GROUPS[group]]


def _count(output: str, label: str) -> int:
    match = re.search(rf"(\d+) {label}", output)
    return int(match.group(1)) if match else 0


def parse_output(output: str) -> tuple[int, int, int, int, list[ScenarioFailure]]:
    """Extract passed/failed/skipped/error counts and failed node ids from pytest output."""
    summary_lines = [line for line in output.splitlines() if re.search(r"\d+ (passed|failed|skipped|errors?)", line)]
    summary = summary_lines[-1] if summary_lines else ""

    failures = [
        ScenarioFailure(scenario=m.group("node"), reason=(m.group("reason") or "").strip())
        for m in _FAILED_LINE.finditer(output)
    ]
    failures.extend(
        ScenarioFailure(scenario=m.group("node"), reason=(m.group("reason") or "").strip(), kind="error")
        for m in _ERROR_LINE.finditer(output)
    )
    errors = _count(summary, "error")
    return _count(summary, "passed"), _count(summary, "failed"), _count(summary, "skipped"), errors, failures


def _persist_run(results_dir: Path, run: SuiteRun) -> str:
    results_dir.mkdir(parents=True, exist_ok=True)
    record = results_dir / f"scenarios_{run.group}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
    payload = asdict(run)
    payload["output"] = run.output[-3000:]
    record.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return str(record)


def run_scenarios(
    group: str,
    base_url: str,
    results_dir: Path,
    *,
    project_root: Path = PROJECT_ROOT,
    timeout: int = 1800,
) -> SuiteRun:
    """Execute *group* against *base_url* and write a JSON run record to *results_dir*."""
    cmd = build_command(group)
    run = SuiteRun(group=group, base_url=base_url)
    env = {**os.environ, "GAPS_BASE_URL": base_url}

    logger.info("Running scenario group '%s' against %s", group, base_url)
    try:
        completed = subprocess.run(
            cmd,
            cwd=str(project_root),
            env=env,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        run.error = f"Scenario run timed out after {timeout}s"
    except FileNotFoundError as exc:
        run.error = f"Missing test command: {exc}"
    else:
        run.exit_code = completed.returncode
        run.output = f"{completed.stdout}\n{completed.stderr}".strip()
        run.passed, run.failed, run.skipped, run.errors, run.failures = parse_output(run.output)

    if run.error:
        logger.error("Scenario group '%s' did not complete: %s", group, run.error)
    else:
        logger.info(
            "Scenario group '%s': %d passed, %d failed, %d skipped",
            group,
            run.passed,
            run.failed,
            run.skipped,
        )
    run.record_file = _persist_run(results_dir, run)
    return run


def format_summary(run: SuiteRun) -> str:
    """Human-readable report of a scenario run."""
    if run.error:
        return f"❌ Scenario run error ({run.group}): {run.error}"

    status = "✅" if run.ok else "❌" if run.exit_code != 0 else "⚠️"
    lines = [
        f"{status} Scenario Group '{run.group}' Complete",
        "",
        f"- Base URL: {run.base_url}",
        f"- Passed: {run.passed}",
        f"- Failed: {run.failed}",
        f"- Skipped: {run.skipped}",
        f"- Errors: {run.errors}",
        f"- Run record: {run.record_file}",
    ]
    if run.failures:
        lines.append("")
        lines.append("Failures:")
        lines.extend(f"- {failure.scenario}: {failure.reason or failure.kind}" for failure in run.failures)
    return "\n".join(lines)

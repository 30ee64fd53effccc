#!/usr/bin/env python3
"""
Gaps E2E MCP Server
Runs the browser scenario groups against a Gaps instance and reports on them.
"""
import asyncio
import logging
import sys

from mcp.server.fastmcp import FastMCP

from gaps_e2e.app_client import APP_ROUTES, route_statuses
from gaps_e2e.suite_runner import SCENARIO_GROUPS, format_summary, run_scenarios
from gaps_e2e.utils.config import get_base_url, get_directory_from_env
from gaps_e2e.utils.logging_utils import configure_json_logging

logger = logging.getLogger("gaps-e2e-server")

# Initialize MCP server
mcp = FastMCP("gaps-e2e")


def _results_dir():
    return get_directory_from_env("GAPS_E2E_RESULTS_DIR", "test_results")


# === MCP TOOLS ===

@mcp.tool()
async def run_gaps_scenarios(group: str = "all", base_url: str = "") -> str:
    """Run a named scenario group (configuration, libraries, navigation, probe, all)."""
    group = group.strip() or "all"
    if group not in SCENARIO_GROUPS:
        return f"❌ Error: Unknown scenario group '{group}'. Available: {', '.join(sorted(SCENARIO_GROUPS))}"

    target = base_url.strip().rstrip("/") or get_base_url()
    logger.info(f"Scenario runner: group={group} base_url={target}")
    run = await asyncio.to_thread(run_scenarios, group, target, _results_dir())
    return format_summary(run)


@mcp.tool()
async def list_scenario_groups() -> str:
    """List the scenario groups and the test modules each one runs."""
    lines = ["📋 Scenario groups:"]
    for name in sorted(SCENARIO_GROUPS):
        lines.append(f"- {name}: {', '.join(SCENARIO_GROUPS[name])}")
    return "\n".join(lines)


@mcp.tool()
async def check_gaps_application(base_url: str = "") -> str:
    """Check that every Gaps route answers before running scenarios."""
    target = base_url.strip().rstrip("/") or get_base_url()
    statuses = await route_statuses(target)

    lines = []
    healthy = True
    for route in APP_ROUTES:
        code = statuses.get(route)
        if code is None:
            healthy = False
            lines.append(f"- {route}: unreachable")
        else:
            healthy = healthy and code < 400
            lines.append(f"- {route}: HTTP {code}")

    status = "✅" if healthy else "❌"
    return f"{status} Gaps application at {target}\n\n" + "\n".join(lines)


# === SERVER STARTUP ===
if __name__ == "__main__":
    configure_json_logging()
    logger.info("Starting Gaps E2E MCP server...")
    logger.info(f"Default base URL: {get_base_url()}")
    logger.info(f"Results directory: {_results_dir()}")

    try:
        mcp.run(transport='stdio')
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)

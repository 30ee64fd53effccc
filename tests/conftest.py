"""Test-layer conftest: markers."""

from __future__ import annotations


def pytest_configure(config):
    """Register custom markers so --strict-markers does not complain."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (MCP tools, suite runner)")
    config.addinivalue_line("markers", "e2e: End-to-end Playwright scenarios")

"""Pytest hooks and fixtures."""

import os

import pytest


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "network: talks to a real HTTP server (skipped in CI)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip network tests when running in CI (no loopback sockets guaranteed)."""
    if os.environ.get("CI") != "true":
        return
    skip = pytest.mark.skip(reason="Requires local sockets (skipped in CI)")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch):
    """Keep config and log files out of the real home directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in list(os.environ):
        if key.startswith("JSONRPC_HTTP_"):
            monkeypatch.delenv(key)
    from jsonrpc_http.config.access import clear_config_cache

    clear_config_cache()
    yield
    clear_config_cache()

"""Process-local cached configuration."""

from __future__ import annotations

from jsonrpc_http.config.loader import load_config
from jsonrpc_http.config.schema import Config

_cached: Config | None = None


def get_config() -> Config:
    """Load the default config once per process."""
    global _cached
    if _cached is None:
        _cached = load_config()
    return _cached


def clear_config_cache() -> None:
    global _cached
    _cached = None

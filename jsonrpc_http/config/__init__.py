"""Configuration module for jsonrpc_http."""

from jsonrpc_http.config.loader import load_config, get_config_path, save_config
from jsonrpc_http.config.schema import Config
from jsonrpc_http.config.access import get_config, clear_config_cache

__all__ = ["Config", "load_config", "save_config", "get_config_path", "get_config", "clear_config_cache"]

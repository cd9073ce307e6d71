"""Utility helpers for jsonrpc_http."""

from jsonrpc_http.utils.exceptions import ConfigError, DecodeError, JsonRpcHttpError, sanitize_error_message

__all__ = ["ConfigError", "DecodeError", "JsonRpcHttpError", "sanitize_error_message"]

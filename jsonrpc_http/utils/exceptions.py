"""
Exception hierarchy for jsonrpc_http.

Call outcomes (transport failures, JSON-RPC errors) are returned as data, see
jsonrpc_http.rpc.protocol. The exceptions here cover everything else:
- decoder mismatches, raised by decoders and caught by the choice combinators
- unreadable configuration files
"""

from __future__ import annotations

import re
from typing import Any


class JsonRpcHttpError(Exception):
    """Base exception for all jsonrpc_http errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class DecodeError(JsonRpcHttpError):
    """JSON value did not match the expected shape."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, code="DECODE_ERROR", details=details)
        self.path = path

    def at(self, name: str) -> "DecodeError":
        """Return a copy of this error nested under field *name*."""
        path = f"{name}.{self.path}" if self.path else name
        return DecodeError(self.message, path=path)


class ConfigError(JsonRpcHttpError):
    """Configuration file could not be loaded."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"[a-zA-Z0-9]{32,}"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove sensitive information from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized

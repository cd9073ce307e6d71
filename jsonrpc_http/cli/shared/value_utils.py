"""Parsing helpers for CLI arguments and dotted config keys."""

from __future__ import annotations

import json
from typing import Any


def parse_value(raw: str) -> Any:
    """Parse CLI input value as JSON if possible; fallback to string."""
    text = raw.strip()
    if text == "":
        return ""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        lowered = text.lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
        return text


def parse_param(raw: str) -> tuple[str, Any]:
    """Split a `key=value` argument into a (key, parsed value) pair."""
    key, sep, rest = raw.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ValueError(f"expected key=value, got {raw!r}")
    return key, parse_value(rest)


def deep_set(data: dict[str, Any], dotted_key: str, value: Any) -> None:
    """Set value by dotted path."""
    parts = dotted_key.split(".")
    cur: dict[str, Any] = data
    for part in parts[:-1]:
        node = cur.get(part)
        if not isinstance(node, dict):
            node = {}
            cur[part] = node
        cur = node
    cur[parts[-1]] = value

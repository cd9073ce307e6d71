"""Composable JSON decoders.

A decoder is any callable taking a parsed JSON value and returning a typed
value, raising DecodeError when the value has the wrong shape. Decoders are
built from pydantic type adapters and combined with the helpers below.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from jsonrpc_http.utils.exceptions import DecodeError

T = TypeVar("T")
U = TypeVar("U")

Decoder = Callable[[Any], T]

_MISSING = object()


def typed(tp: Any, *, strict: bool = True) -> Decoder[Any]:
    """Decoder validating against a Python type or pydantic model."""
    adapter = TypeAdapter(tp)

    def decode(raw: Any) -> Any:
        try:
            return adapter.validate_python(raw, strict=strict)
        except ValidationError as exc:
            first = exc.errors()[0] if exc.errors() else {}
            loc = ".".join(str(part) for part in first.get("loc", ()))
            raise DecodeError(str(first.get("msg") or exc), path=loc or None) from exc

    return decode


def value(raw: Any) -> Any:
    """Accept any JSON value unchanged."""
    return raw


string = typed(str)
integer = typed(int)
number = typed(float)
boolean = typed(bool)


# Failures a hand-written decoder raises the normal Python way; ValidationError is a ValueError.
_FOREIGN_FAILURES = (ValueError, TypeError, KeyError, IndexError, AttributeError, RecursionError)


def run_decoder(decoder: Decoder[T], raw: Any) -> T:
    """Call *decoder*, reporting any ordinary decode failure as DecodeError."""
    try:
        return decoder(raw)
    except DecodeError:
        raise
    except _FOREIGN_FAILURES as exc:
        raise DecodeError(f"{type(exc).__name__}: {exc}") from exc


def field(name: str, decoder: Decoder[T]) -> Decoder[T]:
    """Decode field *name* of a JSON object with *decoder*."""

    def decode(raw: Any) -> T:
        if not isinstance(raw, dict):
            raise DecodeError(f"expected an object with field '{name}'")
        if name not in raw:
            raise DecodeError(f"missing field '{name}'")
        try:
            return run_decoder(decoder, raw[name])
        except DecodeError as exc:
            raise exc.at(name) from exc

    return decode


def optional_field(name: str, decoder: Decoder[T], default: Any = None) -> Decoder[Any]:
    """Like field(), but an absent field yields *default*."""

    def decode(raw: Any) -> Any:
        if not isinstance(raw, dict):
            raise DecodeError(f"expected an object with field '{name}'")
        item = raw.get(name, _MISSING)
        if item is _MISSING:
            return default
        try:
            return run_decoder(decoder, item)
        except DecodeError as exc:
            raise exc.at(name) from exc

    return decode


def nullable(decoder: Decoder[T]) -> Decoder[T | None]:
    def decode(raw: Any) -> T | None:
        if raw is None:
            return None
        return run_decoder(decoder, raw)

    return decode


def map_decoder(fn: Callable[[T], U], decoder: Decoder[T]) -> Decoder[U]:
    """Transform the output of *decoder* with *fn*."""

    def decode(raw: Any) -> U:
        return run_decoder(fn, run_decoder(decoder, raw))

    return decode


def one_of(*decoders: Decoder[Any]) -> Decoder[Any]:
    """Try *decoders* in order; the first one that succeeds wins."""
    if not decoders:
        raise ValueError("one_of() needs at least one decoder")

    def decode(raw: Any) -> Any:
        failures: list[str] = []
        for decoder in decoders:
            try:
                return run_decoder(decoder, raw)
            except DecodeError as exc:
                failures.append(str(exc))
        raise DecodeError("no alternative matched: " + "; ".join(failures))

    return decode


def decode_string(decoder: Decoder[T], text: str) -> T:
    """Parse *text* as JSON and run *decoder* on the result."""
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, TypeError, RecursionError) as exc:
        raise DecodeError(f"invalid JSON: {type(exc).__name__}: {exc}") from exc
    return run_decoder(decoder, raw)

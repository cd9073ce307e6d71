"""Request encoding and response envelope decoding for JSON-RPC over HTTP."""

from __future__ import annotations

from typing import Any

from .decoders import Decoder, field, map_decoder, one_of, typed
from .protocol import JSONRPC_VERSION, REQUEST_ID, InnerError, InnerResult, Param, Response, RpcError


def encode_request(param: Param) -> dict[str, Any]:
    """Build the JSON-RPC request document for *param*."""
    params: dict[str, Any] = {}
    for key, item in param.params:
        params[key] = item
    return {
        "id": REQUEST_ID,
        "jsonrpc": JSONRPC_VERSION,
        "method": param.method,
        "params": params,
    }


def build_headers(param: Param) -> dict[str, str]:
    headers = {"Accept": "application/json"}
    if param.token is not None:
        # Lowercase scheme is what existing servers expect.
        headers["Authorization"] = f"bearer {param.token}"
    return headers


error_decoder: Decoder[RpcError] = typed(RpcError)


def response_decoder(payload_decoder: Decoder[Any]) -> Decoder[Response[Any]]:
    """Decode an envelope as `result` (with *payload_decoder*), else as `error`."""
    return one_of(
        map_decoder(InnerResult, field("result", payload_decoder)),
        map_decoder(InnerError, field("error", error_decoder)),
    )

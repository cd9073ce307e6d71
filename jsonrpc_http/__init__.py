"""
jsonrpc_http - JSON-RPC 2.0 over HTTP with flat, typed outcomes.
"""

__version__ = "0.1.0"

from jsonrpc_http.rpc import (
    Data,
    JsonRpcHttpClient,
    Param,
    Response,
    RpcData,
    RpcError,
    TransportError,
    call,
    error_to_string,
    flat,
    flat_response,
    task,
    to_result,
    transport_error_to_string,
)

__all__ = [
    "__version__",
    "Data",
    "JsonRpcHttpClient",
    "Param",
    "Response",
    "RpcData",
    "RpcError",
    "TransportError",
    "call",
    "error_to_string",
    "flat",
    "flat_response",
    "task",
    "to_result",
    "transport_error_to_string",
]

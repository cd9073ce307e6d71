"""JSON-RPC 2.0 over HTTP: request building, decoding and invocation."""

from .client import JsonRpcHttpClient, call, task
from .decoders import (
    Decoder,
    boolean,
    decode_string,
    field,
    integer,
    map_decoder,
    nullable,
    number,
    one_of,
    optional_field,
    run_decoder,
    string,
    typed,
    value,
)
from .flatten import error_to_string, flat, flat_response, to_result, transport_error_to_string
from .protocol import (
    BadBody,
    BadStatus,
    BadUrl,
    Data,
    Err,
    HttpErr,
    InnerError,
    InnerResult,
    NetworkError,
    Ok,
    Param,
    Response,
    Result,
    RpcData,
    RpcErr,
    RpcError,
    RpcResult,
    Timeout,
    TransportError,
)
from .serialization import build_headers, encode_request, error_decoder, response_decoder
from .transport import OutcomeKind, TransportOutcome, handle_json_response, send_post

__all__ = [
    "JsonRpcHttpClient",
    "call",
    "task",
    "Decoder",
    "boolean",
    "decode_string",
    "field",
    "integer",
    "map_decoder",
    "nullable",
    "number",
    "one_of",
    "optional_field",
    "run_decoder",
    "string",
    "typed",
    "value",
    "error_to_string",
    "flat",
    "flat_response",
    "to_result",
    "transport_error_to_string",
    "BadBody",
    "BadStatus",
    "BadUrl",
    "Data",
    "Err",
    "HttpErr",
    "InnerError",
    "InnerResult",
    "NetworkError",
    "Ok",
    "Param",
    "Response",
    "Result",
    "RpcData",
    "RpcErr",
    "RpcError",
    "RpcResult",
    "Timeout",
    "TransportError",
    "build_headers",
    "encode_request",
    "error_decoder",
    "response_decoder",
    "OutcomeKind",
    "TransportOutcome",
    "handle_json_response",
    "send_post",
]

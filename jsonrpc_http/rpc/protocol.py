"""JSON-RPC over HTTP data model: call input, response envelope and error layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, field_validator

T = TypeVar("T")
E = TypeVar("E")

JSONRPC_VERSION = "2.0"
# Requests are not correlated with responses; every call carries the same id.
REQUEST_ID = 0


class RpcError(BaseModel):
    """JSON-RPC error object returned by the server."""

    model_config = ConfigDict(frozen=True, strict=True)

    code: int
    message: str
    data: str | None = None

    @field_validator("code", mode="before")
    @classmethod
    def _integral_code(cls, v: Any) -> Any:
        # JSON has one number type; 1.0 is the integer 1 on the wire.
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v


@dataclass(frozen=True, slots=True)
class InnerResult(Generic[T]):
    """Envelope carried a `result` field."""

    value: T


@dataclass(frozen=True, slots=True)
class InnerError:
    """Envelope carried an `error` field."""

    error: RpcError


Response = Union[InnerResult[T], InnerError]


@dataclass(frozen=True, slots=True)
class BadUrl:
    url: str


@dataclass(frozen=True, slots=True)
class Timeout:
    pass


@dataclass(frozen=True, slots=True)
class NetworkError:
    pass


@dataclass(frozen=True, slots=True)
class BadStatus:
    status: int


@dataclass(frozen=True, slots=True)
class BadBody:
    """Body of a 2xx response that did not decode; holds the raw text."""

    body: str


TransportError = Union[BadUrl, Timeout, NetworkError, BadStatus, BadBody]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result = Union[Err[E], Ok[T]]

# Raw outcome of one call: transport layer outside, JSON-RPC envelope inside.
RpcData = Result[TransportError, Response[T]]


@dataclass(frozen=True, slots=True)
class RpcResult(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class RpcErr:
    error: RpcError


@dataclass(frozen=True, slots=True)
class HttpErr:
    error: TransportError


Data = Union[RpcResult[T], RpcErr, HttpErr]


@dataclass(frozen=True, slots=True)
class Param:
    """Input of a single JSON-RPC call."""

    url: str
    method: str
    params: list[tuple[str, Any]] = field(default_factory=list)
    token: str | None = None

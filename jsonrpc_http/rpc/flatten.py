"""Helpers collapsing nested call outcomes into flat results and display strings."""

from __future__ import annotations

from typing import Any

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
    Response,
    Result,
    RpcData,
    RpcErr,
    RpcError,
    RpcResult,
    Timeout,
    TransportError,
)

DEFAULT_LOCALE = "en"

# 传输层错误提示文案 (per locale)
TRANSPORT_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "bad_url": "The address {url} is not a valid URL.",
        "timeout": "The server took too long to respond. Please try again later.",
        "network_error": "Unable to reach the server. Please check your network connection.",
        "bad_status": "The server responded with HTTP status {status}.",
    },
    "zh": {
        "bad_url": "地址 {url} 不是有效的 URL。",
        "timeout": "服务器响应超时，请稍后重试。",
        "network_error": "无法连接服务器，请检查网络连接。",
        "bad_status": "服务器返回了 HTTP 状态码 {status}。",
    },
}


def _messages(locale: str | None) -> dict[str, str]:
    key = (locale or DEFAULT_LOCALE).strip().lower().replace("_", "-").split("-")[0]
    return TRANSPORT_MESSAGES.get(key) or TRANSPORT_MESSAGES[DEFAULT_LOCALE]


def flat_response(response: Response[Any]) -> Data[Any]:
    if isinstance(response, InnerResult):
        return RpcResult(response.value)
    if isinstance(response, InnerError):
        return RpcErr(response.error)
    raise TypeError(f"not a JSON-RPC response: {response!r}")


def flat(rpc_data: RpcData[Any]) -> Data[Any]:
    """Collapse transport result and response envelope into one Data value."""
    if isinstance(rpc_data, Ok):
        return flat_response(rpc_data.value)
    if isinstance(rpc_data, Err):
        return HttpErr(rpc_data.error)
    raise TypeError(f"not a call result: {rpc_data!r}")


def to_result(data: Data[Any], locale: str | None = None) -> Result[str, Any]:
    """Reduce Data to Ok(value) or Err(readable message)."""
    if isinstance(data, RpcResult):
        return Ok(data.value)
    if isinstance(data, RpcErr):
        return Err(error_to_string(data.error))
    if isinstance(data, HttpErr):
        return Err(transport_error_to_string(data.error, locale))
    raise TypeError(f"not a flattened call result: {data!r}")


def error_to_string(error: RpcError) -> str:
    text = f"Code: {error.code} Message: {error.message}"
    if error.data is not None:
        text += f" Data: {error.data}"
    return text


def transport_error_to_string(error: TransportError, locale: str | None = None) -> str:
    """
    Human readable sentence for a transport error.

    BadBody returns the raw response text unchanged; the other variants use
    the message catalog of *locale* (English when unknown).
    """
    if isinstance(error, BadBody):
        return error.body
    messages = _messages(locale)
    if isinstance(error, BadUrl):
        return messages["bad_url"].format(url=error.url)
    if isinstance(error, Timeout):
        return messages["timeout"]
    if isinstance(error, NetworkError):
        return messages["network_error"]
    if isinstance(error, BadStatus):
        return messages["bad_status"].format(status=error.status)
    raise TypeError(f"not a transport error: {error!r}")

"""HTTP client for JSON-RPC 2.0 endpoints."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import httpx
from loguru import logger

from .decoders import Decoder
from .protocol import Param, Response, Result, RpcData, TransportError
from .serialization import build_headers, encode_request, response_decoder
from .transport import handle_json_response, send_post


class JsonRpcHttpClient:
    """
    Issues JSON-RPC calls over HTTP POST.

    `task()` is awaited by the caller; `call()` schedules the request on the
    running loop and hands the outcome to a callback. Neither sets a timeout
    unless one is configured, and neither retries.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self._transport = transport

    @staticmethod
    def _prepare(param: Param, decoder: Decoder[Any]) -> tuple[dict[str, Any], dict[str, str], Decoder[Response[Any]]]:
        return encode_request(param), build_headers(param), response_decoder(decoder)

    async def task(self, param: Param, decoder: Decoder[Any]) -> Result[TransportError, Response[Any]]:
        """Run one call and return its outcome once the server has answered."""
        body, headers, envelope_decoder = self._prepare(param, decoder)
        logger.debug(f"JSON-RPC call {param.method} -> {param.url}")
        outcome = await send_post(
            param.url,
            headers=headers,
            json_body=body,
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            transport=self._transport,
        )
        return handle_json_response(envelope_decoder, outcome)

    def call(
        self,
        param: Param,
        decoder: Decoder[Any],
        on_result: Callable[[RpcData[Any]], Any],
    ) -> asyncio.Task[None]:
        """
        Schedule one call on the running event loop without waiting for it.

        *on_result* receives the outcome exactly once. The returned task only
        completes after delivery; it is not a cancellation handle.
        """
        loop = asyncio.get_running_loop()

        async def _deliver() -> None:
            on_result(await self.task(param, decoder))

        return loop.create_task(_deliver(), name=f"jsonrpc:{param.method}")


_default_client = JsonRpcHttpClient()


async def task(param: Param, decoder: Decoder[Any]) -> Result[TransportError, Response[Any]]:
    """Awaitable call through a default client (no timeout)."""
    return await _default_client.task(param, decoder)


def call(param: Param, decoder: Decoder[Any], on_result: Callable[[RpcData[Any]], Any]) -> asyncio.Task[None]:
    """Callback-style call through a default client (no timeout)."""
    return _default_client.call(param, decoder, on_result)

"""Raw HTTP outcomes and their mapping onto the transport error layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from loguru import logger

from jsonrpc_http.utils.exceptions import DecodeError, sanitize_error_message

from .decoders import Decoder, decode_string
from .protocol import BadBody, BadStatus, BadUrl, Err, NetworkError, Ok, Result, Timeout, TransportError


class OutcomeKind(str, Enum):
    """What the HTTP layer reported before any JSON-RPC interpretation."""
    BAD_URL = "bad_url"
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"
    BAD_STATUS = "bad_status"
    GOOD_STATUS = "good_status"


@dataclass(frozen=True, slots=True)
class TransportOutcome:
    kind: OutcomeKind
    url: str = ""
    status: int = 0
    body: str = ""

    @classmethod
    def bad_url(cls, url: str) -> "TransportOutcome":
        return cls(OutcomeKind.BAD_URL, url=url)

    @classmethod
    def timeout(cls, url: str = "") -> "TransportOutcome":
        return cls(OutcomeKind.TIMEOUT, url=url)

    @classmethod
    def network_error(cls, url: str = "") -> "TransportOutcome":
        return cls(OutcomeKind.NETWORK_ERROR, url=url)

    @classmethod
    def bad_status(cls, status: int, body: str = "", url: str = "") -> "TransportOutcome":
        return cls(OutcomeKind.BAD_STATUS, url=url, status=status, body=body)

    @classmethod
    def good_status(cls, body: str, status: int = 200, url: str = "") -> "TransportOutcome":
        return cls(OutcomeKind.GOOD_STATUS, url=url, status=status, body=body)


def handle_json_response(decoder: Decoder[Any], outcome: TransportOutcome) -> Result[TransportError, Any]:
    """Map a raw outcome to a transport error or the decoded body."""
    kind = outcome.kind
    if kind == OutcomeKind.BAD_URL:
        return Err(BadUrl(outcome.url))
    if kind == OutcomeKind.TIMEOUT:
        return Err(Timeout())
    if kind == OutcomeKind.BAD_STATUS:
        return Err(BadStatus(outcome.status))
    if kind == OutcomeKind.NETWORK_ERROR:
        return Err(NetworkError())
    if kind == OutcomeKind.GOOD_STATUS:
        try:
            return Ok(decode_string(decoder, outcome.body))
        except DecodeError as exc:
            logger.debug(f"JSON-RPC body did not decode: {exc}")
            return Err(BadBody(outcome.body))
    raise ValueError(f"unknown transport outcome: {kind!r}")


def _is_good_status(status_code: int) -> bool:
    return 200 <= status_code < 300


async def send_post(
    url: str,
    *,
    headers: dict[str, str],
    json_body: dict[str, Any],
    timeout: float | None = None,
    follow_redirects: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TransportOutcome:
    """POST *json_body* to *url* and report what happened as a TransportOutcome."""
    try:
        async with httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=follow_redirects,
            transport=transport,
        ) as client:
            resp = await client.post(url, headers=headers, json=json_body)
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
        logger.warning(f"JSON-RPC bad url {url!r}: {sanitize_error_message(str(exc))}")
        return TransportOutcome.bad_url(url)
    except httpx.TimeoutException:
        logger.warning(f"JSON-RPC timeout: POST {url}")
        return TransportOutcome.timeout(url)
    except httpx.RequestError as exc:
        logger.warning(f"JSON-RPC network error: POST {url}: {sanitize_error_message(str(exc))}")
        return TransportOutcome.network_error(url)

    status_code = int(resp.status_code)
    if not _is_good_status(status_code):
        logger.warning(f"JSON-RPC http error {status_code}: POST {url}")
        return TransportOutcome.bad_status(status_code, resp.text, url=url)
    return TransportOutcome.good_status(resp.text, status=status_code, url=url)

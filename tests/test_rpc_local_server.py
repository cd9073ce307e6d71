"""End-to-end calls against a throwaway JSON-RPC server on localhost."""

import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from jsonrpc_http.rpc.client import JsonRpcHttpClient
from jsonrpc_http.rpc.decoders import string
from jsonrpc_http.rpc.flatten import flat, to_result
from jsonrpc_http.rpc.protocol import BadStatus, Err, HttpErr, NetworkError, Ok, Param, RpcErr, RpcResult

pytestmark = pytest.mark.network


class _Handler(BaseHTTPRequestHandler):
    def do_POST(self):  # noqa: N802
        length = int(self.headers.get("Content-Length") or 0)
        request = json.loads(self.rfile.read(length))
        if self.path == "/fail":
            self._reply(500, b"internal")
            return
        if self.headers.get("Authorization") != "bearer abc":
            body = {"jsonrpc": "2.0", "id": request["id"], "error": {"code": 401, "message": "unauthorized"}}
        elif request["method"] == "ping":
            body = {"jsonrpc": "2.0", "id": request["id"], "result": "pong"}
        else:
            body = {"jsonrpc": "2.0", "id": request["id"], "error": {"code": -32601, "message": "Method not found"}}
        self._reply(200, json.dumps(body).encode("utf-8"))

    def _reply(self, status: int, payload: bytes) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format, *args):
        return


@pytest.fixture(autouse=True)
def _no_proxy(monkeypatch):
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def server_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.mark.asyncio
async def test_ping_round_trip(server_url: str) -> None:
    out = await JsonRpcHttpClient(timeout=5.0).task(
        Param(url=f"{server_url}/rpc", token="abc", method="ping"), string
    )
    assert flat(out) == RpcResult("pong")
    assert to_result(flat(out)) == Ok("pong")


@pytest.mark.asyncio
async def test_missing_token_gets_rpc_error(server_url: str) -> None:
    out = await JsonRpcHttpClient(timeout=5.0).task(Param(url=f"{server_url}/rpc", method="ping"), string)
    data = flat(out)
    assert isinstance(data, RpcErr)
    assert data.error.code == 401


@pytest.mark.asyncio
async def test_server_500(server_url: str) -> None:
    out = await JsonRpcHttpClient(timeout=5.0).task(
        Param(url=f"{server_url}/fail", token="abc", method="ping"), string
    )
    assert flat(out) == HttpErr(BadStatus(500))
    result = to_result(flat(out))
    assert isinstance(result, Err)
    assert "500" in result.error


@pytest.mark.asyncio
async def test_closed_port_is_network_error() -> None:
    url = f"http://127.0.0.1:{_free_port()}/rpc"
    out = await JsonRpcHttpClient(timeout=5.0).task(Param(url=url, method="ping"), string)
    assert out == Err(NetworkError())

"""Configuration schema using Pydantic.

Persisted to ~/.jsonrpc_http/config.json; every field can be overridden with
JSONRPC_HTTP_* environment variables (nested with "__").
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings

if TYPE_CHECKING:
    from jsonrpc_http.rpc.client import JsonRpcHttpClient


class EndpointConfig(BaseModel):
    """Default JSON-RPC endpoint used by the CLI."""
    url: str = ""
    token: str = ""  # Sent as "Authorization: bearer <token>" when set


class ClientConfig(BaseModel):
    """HTTP client behaviour."""
    timeout_seconds: float | None = None  # None = wait indefinitely
    follow_redirects: bool = True


class LoggingConfig(BaseModel):
    level: str = "INFO"
    file: bool = False  # Also write a rotating log under ~/.jsonrpc_http/logs


class Config(BaseSettings):
    """Root configuration for jsonrpc_http."""
    endpoint: EndpointConfig = Field(default_factory=EndpointConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    locale: str = "en"

    def make_client(self) -> "JsonRpcHttpClient":
        """Build a client honouring the client section."""
        from jsonrpc_http.rpc.client import JsonRpcHttpClient

        return JsonRpcHttpClient(
            timeout=self.client.timeout_seconds,
            follow_redirects=self.client.follow_redirects,
        )

    model_config = ConfigDict(
        env_prefix="JSONRPC_HTTP_",
        env_nested_delimiter="__"
    )

"""CLI commands for jsonrpc_http.

Single entry point `jsonrpc-http`: `call` issues one JSON-RPC request, the
`config` group inspects and edits ~/.jsonrpc_http/config.json.
"""

import asyncio
import json

import typer
from loguru import logger
from rich.console import Console

from jsonrpc_http import __version__
from jsonrpc_http.cli.command_groups.config_commands import register_config_commands
from jsonrpc_http.cli.shared.logging_utils import configure_console_logging, ensure_rotating_log_file
from jsonrpc_http.cli.shared.value_utils import parse_param
from jsonrpc_http.config.access import get_config
from jsonrpc_http.rpc import Err, Param, flat, to_result
from jsonrpc_http.rpc import value as any_json
from jsonrpc_http.utils.exceptions import ConfigError

app = typer.Typer(
    name="jsonrpc-http",
    help="jsonrpc-http - call JSON-RPC 2.0 methods over HTTP",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"jsonrpc-http v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """jsonrpc-http - call JSON-RPC 2.0 methods over HTTP."""
    pass


@app.command()
def call(
    method: str = typer.Argument(..., help="JSON-RPC method name"),
    url: str = typer.Option(None, "--url", "-u", help="Endpoint URL (default: endpoint.url from config)"),
    token: str = typer.Option(None, "--token", "-t", help="Bearer token (default: endpoint.token from config)"),
    param: list[str] = typer.Option(None, "--param", "-p", help="Parameter as key=value; value parsed as JSON when possible"),
    timeout: float = typer.Option(None, "--timeout", help="Seconds to wait (default: client.timeoutSeconds, none = forever)"),
    locale: str = typer.Option(None, "--locale", help="Language for transport error messages (en, zh)"),
):
    """Call METHOD and print its result as JSON."""
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)

    configure_console_logging(config.logging.level)
    if config.logging.file:
        ensure_rotating_log_file("call", level=config.logging.level)

    endpoint = (url or config.endpoint.url).strip()
    if not endpoint:
        err_console.print("[red]No endpoint URL.[/red] Pass --url or run `jsonrpc-http config set endpoint.url <url>`.")
        raise typer.Exit(2)

    try:
        pairs = [parse_param(raw) for raw in (param or [])]
    except ValueError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    bearer = token if token is not None else (config.endpoint.token or None)
    client = config.make_client()
    if timeout is not None:
        client.timeout = timeout

    rpc_param = Param(url=endpoint, method=method, params=pairs, token=bearer)
    logger.debug(f"CLI call {method} with {len(pairs)} params")
    outcome = to_result(flat(asyncio.run(client.task(rpc_param, any_json))), locale or config.locale)
    if isinstance(outcome, Err):
        err_console.print(outcome.error, style="red", markup=False)
        raise typer.Exit(1)
    console.print_json(json.dumps(outcome.value, ensure_ascii=False))


register_config_commands(app, console)


if __name__ == "__main__":
    app()

"""Config command group (show/set)."""

from __future__ import annotations

import json
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console

from jsonrpc_http.cli.shared.value_utils import deep_set, parse_value
from jsonrpc_http.config.loader import (
    camel_to_snake,
    convert_keys,
    convert_to_camel,
    get_config_path,
    load_config,
    save_config,
)
from jsonrpc_http.config.schema import Config
from jsonrpc_http.utils.exceptions import ConfigError


def _load_raw_config() -> dict[str, Any]:
    path = get_config_path()
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Failed to load config from {path}: {e}. "
            "Fix the file or remove it to regenerate defaults.",
            path=str(path),
        ) from e
    return data if isinstance(data, dict) else {}


def register_config_commands(app: typer.Typer, console: Console) -> None:
    """Register the `config` command group."""
    config_app = typer.Typer(help="Config helpers (show/set)")
    app.add_typer(config_app, name="config")

    @config_app.command("show")
    def config_show() -> None:
        """Print the config path and the effective configuration."""
        path = get_config_path()
        try:
            config = load_config()
        except ConfigError as e:
            console.print(f"[red]{e.message}[/red]")
            raise typer.Exit(1)
        data = config.model_dump()
        if data["endpoint"]["token"]:
            data["endpoint"]["token"] = "***"
        console.print(f"Config: {path} {'[green]✓[/green]' if path.exists() else '[dim](defaults)[/dim]'}")
        console.print(json.dumps(convert_to_camel(data), indent=2, ensure_ascii=False))

    @config_app.command("set")
    def config_set(
        key: str = typer.Argument(..., help="Dotted key path, e.g. endpoint.url or client.timeoutSeconds"),
        value: str = typer.Argument(..., help="JSON value or plain string"),
    ) -> None:
        """Set one dotted key in the config file."""
        try:
            data = convert_keys(_load_raw_config())
        except ConfigError as e:
            console.print(f"[red]{e.message}[/red]")
            raise typer.Exit(1)
        snake_key = ".".join(camel_to_snake(part) for part in key.split("."))
        deep_set(data, snake_key, parse_value(value))
        try:
            config = Config.model_validate(data)
        except ValidationError as e:
            console.print(f"[red]Invalid value for {key}:[/red] {e}")
            raise typer.Exit(1)
        save_config(config)
        console.print(f"[green]✓[/green] Set {key}")

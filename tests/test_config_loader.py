"""Tests for config loading, saving and env overrides."""

import json
from pathlib import Path

import pytest

from jsonrpc_http.config.access import clear_config_cache, get_config
from jsonrpc_http.config.loader import (
    camel_to_snake,
    convert_keys,
    convert_to_camel,
    get_config_path,
    load_config,
    save_config,
    snake_to_camel,
)
from jsonrpc_http.config.schema import Config
from jsonrpc_http.utils.exceptions import ConfigError


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.json")
    assert cfg.endpoint.url == ""
    assert cfg.client.timeout_seconds is None
    assert cfg.client.follow_redirects is True
    assert cfg.locale == "en"


def test_load_camel_case_file(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"endpoint": {"url": "http://x/rpc", "token": "abc"}, "client": {"timeoutSeconds": 3.5}}),
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.endpoint.url == "http://x/rpc"
    assert cfg.endpoint.token == "abc"
    assert cfg.client.timeout_seconds == 3.5


def test_save_then_load_round_trips(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    cfg = Config()
    cfg.endpoint.url = "http://x/rpc"
    cfg.client.timeout_seconds = 10.0
    cfg.locale = "zh"
    save_config(cfg, path)

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["client"]["timeoutSeconds"] == 10.0
    assert raw["client"]["followRedirects"] is True

    loaded = load_config(path)
    assert loaded.endpoint.url == "http://x/rpc"
    assert loaded.locale == "zh"


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"client": {"timeoutSeconds": "soon"}}'])
def test_invalid_file_raises_config_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_config(path)
    assert excinfo.value.code == "CONFIG_ERROR"
    assert str(path) in excinfo.value.message


def test_env_overrides_apply_where_file_is_silent(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"endpoint": {"url": "http://file/rpc"}}), encoding="utf-8")
    monkeypatch.setenv("JSONRPC_HTTP_LOCALE", "zh")
    monkeypatch.setenv("JSONRPC_HTTP_CLIENT__TIMEOUT_SECONDS", "4")
    cfg = load_config(path)
    assert cfg.endpoint.url == "http://file/rpc"
    assert cfg.locale == "zh"
    assert cfg.client.timeout_seconds == 4.0


def test_make_client_uses_client_section() -> None:
    cfg = Config()
    cfg.client.timeout_seconds = 1.5
    cfg.client.follow_redirects = False
    client = cfg.make_client()
    assert client.timeout == 1.5
    assert client.follow_redirects is False


def test_get_config_caches_until_cleared() -> None:
    path = get_config_path()
    first = get_config()
    assert get_config() is first

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"locale": "zh"}), encoding="utf-8")
    assert get_config().locale == "en"
    clear_config_cache()
    assert get_config().locale == "zh"


def test_save_config_refreshes_cache() -> None:
    assert get_config().endpoint.url == ""
    cfg = Config()
    cfg.endpoint.url = "http://saved/rpc"
    save_config(cfg)
    assert get_config().endpoint.url == "http://saved/rpc"


def test_key_case_helpers() -> None:
    assert camel_to_snake("timeoutSeconds") == "timeout_seconds"
    assert snake_to_camel("follow_redirects") == "followRedirects"
    assert convert_keys({"client": {"followRedirects": False}}) == {"client": {"follow_redirects": False}}
    assert convert_to_camel({"client": {"timeout_seconds": None}}) == {"client": {"timeoutSeconds": None}}

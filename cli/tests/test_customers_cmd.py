from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

from salescript_cli import config, main
from salescript_cli.commands.customers_cmd import parse_filters

runner = CliRunner()


def test_parse_filters_collects_repeated_keys() -> None:
    assert parse_filters(["name=anna", "tag=a", "tag=b", "tag=c", "note=x=y"]) == {
        "name": "anna",
        "tag": ["a", "b", "c"],
        "note": "x=y",
    }
    assert parse_filters(None) == {}


def test_parse_filters_rejects_missing_separator() -> None:
    with pytest.raises(ValueError):
        parse_filters(["name"])


def test_customers_list_sends_filters_and_prints_table(patch_client) -> None:
    config.save_config(config.AppConfig(server="https://api.test", auth=config.AuthConfig(key="k", secret="s")))
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["path"] = request.url.path
        captured["params"] = dict(request.url.params)
        captured["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json=[{"id": 7, "name": "Anna", "phone": "+7900"}])

    patch_client(handler)
    result = runner.invoke(main.app, ["customers", "list", "--filter", "name=anna"])

    assert result.exit_code == 0, result.output
    assert captured["path"] == "/customer"
    assert captured["params"] == {"name": "anna"}
    assert captured["auth"].startswith("user ")
    assert "Anna" in result.output


def test_customers_list_unauthorized_exits(patch_client) -> None:
    patch_client(lambda request: httpx.Response(401, json={"detail": "login required"}))
    result = runner.invoke(main.app, ["customers", "list"])

    assert result.exit_code == 2
    assert "login required" in result.output

from __future__ import annotations

import json

import httpx
from typer.testing import CliRunner

from salescript_cli import config, main

runner = CliRunner()


def test_login_persists_credentials(patch_client) -> None:
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["path"] = request.url.path
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"key": "k1", "secret": "s1"})

    patch_client(handler)
    result = runner.invoke(main.app, ["auth", "login", "--username", "anna", "--password", "pw"])

    assert result.exit_code == 0, result.output
    assert "Login successful" in result.output
    assert captured == {"path": "/auth/", "body": {"username": "anna", "password": "pw"}}
    cfg = config.load_config()
    assert (cfg.auth.key, cfg.auth.secret) == ("k1", "s1")


def test_login_with_server_override_saves_server(patch_client) -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json={"key": "k1", "secret": "s1"})

    patch_client(handler)
    result = runner.invoke(
        main.app,
        ["auth", "login", "--username", "anna", "--password", "pw", "--server", "https://staging.test/"],
    )

    assert result.exit_code == 0, result.output
    assert seen == ["https://staging.test/auth/"]
    assert config.load_config().server == "https://staging.test"


def test_login_failure_exits_and_keeps_config(patch_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"detail": "invalid credentials"})

    patch_client(handler)
    result = runner.invoke(main.app, ["auth", "login", "--username", "anna", "--password", "bad"])

    assert result.exit_code == 2
    assert "invalid credentials" in result.output
    assert not config.load_config().auth.present


def test_logout_clears_credentials(config_dir) -> None:
    config.save_config(config.AppConfig(server="https://api.test", auth=config.AuthConfig(key="k", secret="s")))

    result = runner.invoke(main.app, ["auth", "logout"])

    assert result.exit_code == 0, result.output
    assert not config.load_config().auth.present

from __future__ import annotations

import json

import httpx
from typer.testing import CliRunner

from salescript_cli import main

runner = CliRunner()


def test_create_interaction_from_file(patch_client, tmp_path) -> None:
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["path"] = request.url.path
        captured["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": 11})

    payload_path = tmp_path / "interaction.json"
    payload_path.write_text(json.dumps({"customer": 7, "result": "callback"}), encoding="utf-8")

    patch_client(handler)
    result = runner.invoke(main.app, ["interactions", "create", "--file", str(payload_path)])

    assert result.exit_code == 0, result.output
    assert captured == {"path": "/interaction/", "body": {"customer": 7, "result": "callback"}}
    assert "Interaction created" in result.output


def test_create_interaction_rejects_invalid_json(patch_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("must not send")

    patch_client(handler)
    result = runner.invoke(main.app, ["interactions", "create", "--data", "{nope"])

    assert result.exit_code == 2
    assert "not valid JSON" in result.output


def test_create_interaction_requires_one_source(patch_client) -> None:
    patch_client(lambda request: httpx.Response(201, json={}))
    result = runner.invoke(main.app, ["interactions", "create"])

    assert result.exit_code == 2
    assert "exactly one" in result.output

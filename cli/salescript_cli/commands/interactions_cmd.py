from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from .. import console
from ..config import load_config
from ..http import run_request, unwrap_or_exit

app = typer.Typer(help="Interaction commands.")


def _load_payload(data: str | None, file: Path | None) -> dict[str, Any]:
    if (data is None) == (file is None):
        raise ValueError("Pass exactly one of --data or --file.")
    raw = data if data is not None else file.read_text(encoding="utf-8")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Interaction payload is not valid JSON: {e}") from e
    if not isinstance(payload, dict) or not payload:
        raise ValueError("Interaction payload must be a non-empty JSON object.")
    return payload


@app.command("create")
def create_interaction(
        data: str | None = typer.Option(None, "--data", help="Interaction as a JSON object."),
        file: Path | None = typer.Option(None, "--file", help="Path to a JSON file with the interaction."),
        server: str | None = typer.Option(None, "--server", help="Override server URL."),
):
    try:
        payload = _load_payload(data, file)
    except (OSError, ValueError) as e:
        console.err(str(e))
        raise typer.Exit(code=2)

    cfg = load_config()
    result = run_request(cfg, lambda client: client.create_interaction(payload), server_override=server)
    created = unwrap_or_exit(result, "Creating interaction")
    console.ok("Interaction created.")
    console.print_json(created)

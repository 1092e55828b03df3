from __future__ import annotations

from typing import Any

import typer
from rich.table import Table

from .. import console
from ..config import load_config
from ..http import run_request, unwrap_or_exit

app = typer.Typer(help="Customer commands.")


def parse_filters(raw: list[str] | None) -> dict[str, Any]:
    """Turn ``key=value`` pairs into query params; repeated keys become lists."""
    params: dict[str, Any] = {}
    for item in raw or []:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Invalid filter {item!r}, expected key=value.")
        if key in params:
            existing = params[key]
            params[key] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            params[key] = value
    return params


def _customer_items(data: Any) -> list[dict]:
    if isinstance(data, list):
        return [c for c in data if isinstance(c, dict)]
    if isinstance(data, dict):
        for key in ("items", "results", "customers"):
            items = data.get(key)
            if isinstance(items, list):
                return [c for c in items if isinstance(c, dict)]
    return []


@app.command("list")
def list_customers(
        filters: list[str] | None = typer.Option(None, "--filter", "-f", help="Query filter key=value (repeatable)."),
        server: str | None = typer.Option(None, "--server", help="Override server URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    try:
        params = parse_filters(filters)
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=2)

    cfg = load_config()
    result = run_request(cfg, lambda client: client.list_customers(params), server_override=server)
    data = unwrap_or_exit(result, "Listing customers")

    if json_out:
        console.print_json(data)
        return

    table = Table(title="Customers")
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("phone")
    table.add_column("email")

    for c in _customer_items(data):
        table.add_row(
            str(c.get("id", "-")),
            str(c.get("name") or "-"),
            str(c.get("phone") or "-"),
            str(c.get("email") or "-"),
        )

    console.print(table)

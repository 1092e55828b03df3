from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import run_request, unwrap_or_exit

app = typer.Typer(help="Sales script commands.")


@app.command("get")
def get_script(
        script_id: str = typer.Argument(..., help="Script ID."),
        server: str | None = typer.Option(None, "--server", help="Override server URL."),
):
    cfg = load_config()
    result = run_request(cfg, lambda client: client.get_script(script_id), server_override=server)
    data = unwrap_or_exit(result, f"Fetching script {script_id}")
    console.print_json(data)


@app.command("mine")
def my_script(
        server: str | None = typer.Option(None, "--server", help="Override server URL."),
):
    cfg = load_config()
    result = run_request(cfg, lambda client: client.get_user_sales_script(), server_override=server)
    data = unwrap_or_exit(result, "Fetching sales script")
    console.print_json(data)

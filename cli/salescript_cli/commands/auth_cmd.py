from __future__ import annotations

import typer

from .. import console
from ..auth_state import resolve_auth_context
from ..config import AuthConfig, config_path, load_config, normalize_base_url, save_config
from ..http import run_request, unwrap_or_exit

app = typer.Typer(help="Auth commands.")


@app.command("login")
def login(
    username: str = typer.Option(..., "--username", prompt=True, help="Username for login."),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True, help="Password for login."),
    server: str | None = typer.Option(None, "--server", help="Override server URL."),
):
    cfg = load_config()
    result = run_request(
        cfg,
        lambda client: client.auth(username=username, password=password),
        server_override=server,
    )
    unwrap_or_exit(result, "Login")
    if server:
        cfg = load_config()
        cfg.server = normalize_base_url(server, warn=True)
        save_config(cfg)
    console.ok(f"Login successful. Credentials saved to {config_path()}.")


@app.command("logout", help="Clear stored API credentials.")
def logout():
    cfg = load_config()
    cfg.auth = AuthConfig()
    save_path = save_config(cfg)
    console.ok(f"Credentials cleared from {save_path}.")


def whoami_impl(
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    ctx = resolve_auth_context()
    if ctx.state == "no_credentials":
        console.err("Not logged in.")
        console.info("Run: salescript auth login")
        raise typer.Exit(code=2)
    if ctx.state == "invalid_credentials":
        console.err("Stored credentials were rejected by the server.")
        console.info("Run: salescript auth login")
        raise typer.Exit(code=2)
    if ctx.state != "authed":
        console.err("Server is unreachable.")
        raise typer.Exit(code=2)

    user = ctx.user or {}
    if json_out:
        console.print_json(user)
        return
    name = user.get("username") or user.get("name") or user.get("email") or "-"
    console.info(f"Logged in as {name}")

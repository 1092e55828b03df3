from __future__ import annotations

import typer

from .. import console
from ..config import ENV_SERVER, config_path, load_config, normalize_base_url, resolve_server, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/salescript/config.toml).")


@app.command("show")
def show_settings():
    cfg = load_config()
    cred_state = "(set)" if cfg.auth.present else "(empty)"
    console.print(f"server={resolve_server(cfg)} credentials={cred_state} path={config_path()}")


@app.command("set-server")
def set_server(
        server: str = typer.Argument(..., help="API server URL like https://api2.absdata.ru"),
):
    cfg = load_config()
    cfg.server = normalize_base_url(server, warn=True)
    if not cfg.server:
        console.err("Server URL cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
    console.info(f"{ENV_SERVER} overrides this value when set.")

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import typer
from salescript_client import ApiError, AuthError, NetworkError, Result, SalescriptClient
from salescript_client.config_types import ClientConfig

from . import console
from .config import AppConfig, resolve_server
from .credential_store import FileCredentialStore


def make_client(cfg: AppConfig, *, server_override: str | None = None) -> SalescriptClient:
    return SalescriptClient(
        ClientConfig(server=resolve_server(cfg, server_override)),
        store=FileCredentialStore(),
    )


def run_request(
    cfg: AppConfig,
    call: Callable[[SalescriptClient], Awaitable[Result]],
    *,
    server_override: str | None = None,
) -> Result:
    async def _run() -> Result:
        async with make_client(cfg, server_override=server_override) as client:
            return await call(client)

    return asyncio.run(_run())


def unwrap_or_exit(result: Result, action: str) -> Any:
    try:
        return result.unwrap()
    except AuthError as e:
        console.err(f"{action} failed: {e}")
        console.info("Run: salescript auth login")
        raise typer.Exit(code=2)
    except ApiError as e:
        console.err(f"{action} failed: {e}")
        raise typer.Exit(code=2)
    except NetworkError as e:
        console.err(f"{action} failed, server unreachable: {e}")
        raise typer.Exit(code=2)

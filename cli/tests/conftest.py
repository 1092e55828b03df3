from __future__ import annotations

import httpx
import pytest

from salescript_cli import config
from salescript_client import ClientConfig, SalescriptClient
from salescript_client.transport import HttpxTransport

SERVER = "https://api2.example.com"


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    monkeypatch.delenv(config.ENV_SERVER, raising=False)
    return tmp_path


def mock_transport(handler) -> HttpxTransport:
    return HttpxTransport(httpx.AsyncClient(transport=httpx.MockTransport(handler)))


def mock_client(handler, *, server: str = SERVER, **kwargs) -> SalescriptClient:
    return SalescriptClient(ClientConfig(server=server), transport=mock_transport(handler), **kwargs)


@pytest.fixture
def patch_client(monkeypatch, config_dir):
    """Route CLI requests through ``handler`` while keeping the file-backed credential store."""
    from salescript_cli import http
    from salescript_cli.credential_store import FileCredentialStore

    def _install(handler):
        def _make_client(cfg, *, server_override=None):
            return SalescriptClient(
                ClientConfig(server=config.resolve_server(cfg, server_override)),
                store=FileCredentialStore(),
                transport=mock_transport(handler),
            )

        monkeypatch.setattr(http, "make_client", _make_client)

    return _install

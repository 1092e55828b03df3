from __future__ import annotations

import asyncio

from salescript_client import Credentials

from .config import AuthConfig, load_config, save_config


class FileCredentialStore:
    """Credential store persisted in the CLI config file.

    File access runs in a worker thread so lookups never block the event loop.
    """

    async def get(self) -> Credentials | None:
        cfg = await asyncio.to_thread(load_config)
        if not cfg.auth.present:
            return None
        return Credentials(key=cfg.auth.key, secret=cfg.auth.secret)

    async def set(self, credentials: Credentials | None) -> None:
        await asyncio.to_thread(self._save, credentials)

    @staticmethod
    def _save(credentials: Credentials | None) -> str:
        cfg = load_config()
        if credentials is None:
            cfg.auth = AuthConfig()
        else:
            cfg.auth = AuthConfig(key=credentials.key, secret=credentials.secret)
        return save_config(cfg)

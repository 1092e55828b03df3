from __future__ import annotations

import inspect
import logging
from typing import Any

from .config_types import ClientConfig
from .credentials import Credentials, CredentialStore, MemoryCredentialStore
from .pipeline import RequestPipeline
from .result import FailureKind, Result
from .transport import HttpxTransport, Transport
from .urls import AUTH_PATH

logger = logging.getLogger(__name__)


class SalescriptClient:
    def __init__(
            self,
            cfg: ClientConfig | None = None,
            *,
            credentials: Credentials | None = None,
            store: CredentialStore | None = None,
            transport: Transport | None = None,
    ):
        self.cfg = cfg or ClientConfig()
        if store is None:
            store = MemoryCredentialStore(credentials)
        elif credentials is not None:
            raise ValueError("pass either credentials or store, not both")
        self.store = store
        self._t = transport or HttpxTransport(user_agent=self.cfg.user_agent)
        self._pipeline = RequestPipeline(self.cfg, self.store, self._t)

    async def request(self, method: str, path: str, data: Any | None = None) -> Result:
        return await self._pipeline.request(method, path, data)

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> SalescriptClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # --- API methods ---
    async def auth(self, *, username: str, password: str) -> Result:
        """Authenticate and, on success, replace the stored credentials."""
        result = await self.request("POST", AUTH_PATH, {"username": username, "password": password})
        if not result.ok:
            return result
        credentials = Credentials.from_mapping(result.value)
        if credentials is None:
            logger.warning("auth response has no key/secret; credentials unchanged")
            return Result.failure(
                status_code=result.status_code,
                kind=FailureKind.MALFORMED,
                message="auth response returned no credentials",
            )
        stored = self.store.set(credentials)
        if inspect.isawaitable(stored):
            await stored
        return result

    async def create_interaction(self, data: dict[str, Any]) -> Result:
        return await self.request("POST", "interaction/", data)

    async def get_script(self, script_id: str | int) -> Result:
        return await self.request("GET", f"script/{script_id}")

    async def list_customers(self, params: dict[str, Any] | None = None) -> Result:
        return await self.request("GET", "customer", params)

    async def get_user_self(self) -> Result:
        return await self.request("GET", "user/self")

    async def get_user_sales_script(self) -> Result:
        return await self.request("GET", "user/self/script")

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any

from .config_types import ClientConfig
from .credentials import CredentialStore, Credentials, authorization_header
from .result import FailureKind, Result
from .transport import Transport, TransportRequest
from .urls import encode_query, is_auth_path, join_uri

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT"})


class RequestPipeline:
    """Single path every API call goes through.

    Builds the URI, attaches authorization and payload, sends with a bounded
    timeout and normalizes the outcome into a ``Result``. The credential
    lookup and the send share one ``timeout_s`` budget. One attempt per
    call, no retries. The credential store is only read here.
    """

    def __init__(self, cfg: ClientConfig, store: CredentialStore, transport: Transport):
        self._cfg = cfg
        self._store = store
        self._transport = transport

    async def request(self, method: str, path: str, data: Any | None = None) -> Result:
        method = (method or "").upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"unsupported method: {method!r}")

        uri = join_uri(self._cfg.server, path)
        req = TransportRequest(method=method, timeout_s=self._cfg.timeout_s)
        if data:
            if method == "GET":
                req.params = encode_query(data)
            else:
                req.headers["Content-Type"] = "application/json"
                req.json_body = data

        try:
            return await asyncio.wait_for(self._dispatch(uri, path, req), timeout=self._cfg.timeout_s)
        except asyncio.TimeoutError:
            logger.warning("%s %s timed out after %.1fs", method, uri, self._cfg.timeout_s)
            return Result.failure(message=f"timed out after {self._cfg.timeout_s}s")

    async def _dispatch(self, uri: str, path: str, req: TransportRequest) -> Result:
        method = req.method
        if not is_auth_path(path):
            credentials = await self._lookup_credentials()
            if credentials is not None:
                req.headers["Authorization"] = authorization_header(credentials)

        logger.debug("%s %s", method, uri)
        resp = await self._transport.send(uri, req)

        if resp.status_code is None:
            if resp.timed_out:
                logger.warning("%s %s timed out after %.1fs", method, uri, self._cfg.timeout_s)
            else:
                logger.warning("%s %s failed: %s", method, uri, resp.error_message)
            return Result.failure(message=resp.error_message)

        status = resp.status_code
        if not 200 <= status < 300:
            logger.debug("%s %s -> %s", method, uri, status)
            body = resp.body if resp.ok else None
            return Result.failure(
                body,
                status_code=status,
                kind=FailureKind.HTTP_STATUS,
                message=f"{method} {path} failed with {status}",
            )
        if not resp.ok:
            logger.warning("%s %s -> %s with an unparsable body", method, uri, status)
            return Result.failure(
                status_code=status,
                kind=FailureKind.MALFORMED,
                message=f"{method} {path} returned a malformed response",
            )

        logger.debug("%s %s -> %s", method, uri, status)
        return Result.success(resp.body, status_code=status)

    async def _lookup_credentials(self) -> Credentials | None:
        try:
            value = self._store.get()
            if inspect.isawaitable(value):
                value = await value
        except Exception as e:  # noqa: BLE001
            logger.warning("credential lookup failed (%s); sending without authorization", e)
            return None
        return value

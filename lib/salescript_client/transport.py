from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx

from .config_types import DEFAULT_TIMEOUT_S, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


@dataclass
class TransportRequest:
    method: str
    headers: dict[str, str] = field(default_factory=dict)
    json_body: Any | None = None
    params: Any | None = None
    timeout_s: float = DEFAULT_TIMEOUT_S


@dataclass
class TransportResponse:
    """Outcome of a single send.

    ``ok`` is the transport-level outcome: False when no usable response
    arrived (network failure, timeout) or the body could not be parsed.
    """

    ok: bool
    status_code: int | None = None
    body: Any | None = None
    timed_out: bool = False
    malformed: bool = False
    error_message: str | None = None


class Transport(Protocol):
    async def send(self, uri: str, request: TransportRequest) -> TransportResponse: ...

    async def aclose(self) -> None: ...


class HttpxTransport:
    def __init__(self, client: httpx.AsyncClient | None = None, *, user_agent: str = DEFAULT_USER_AGENT):
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": user_agent},
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(self, uri: str, request: TransportRequest) -> TransportResponse:
        try:
            r = await self._client.request(
                request.method,
                uri,
                headers=request.headers,
                json=request.json_body,
                params=request.params,
                timeout=request.timeout_s,
            )
        except httpx.TimeoutException as e:
            return TransportResponse(ok=False, timed_out=True, error_message=str(e) or type(e).__name__)
        except httpx.RequestError as e:
            return TransportResponse(ok=False, error_message=str(e) or type(e).__name__)

        if not r.content.strip():
            return TransportResponse(ok=True, status_code=r.status_code)
        try:
            data = r.json()
        except ValueError:
            logger.debug("%s %s: response body is not JSON", request.method, uri)
            return TransportResponse(
                ok=False,
                status_code=r.status_code,
                malformed=True,
                error_message=r.text[:1000],
            )
        return TransportResponse(ok=True, status_code=r.status_code, body=data)

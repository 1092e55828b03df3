from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import ApiError, AuthError, NetworkError


class FailureKind(str, Enum):
    # Timeouts are reported as TRANSPORT; callers treat them the same way.
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class Result:
    """Normalized outcome of one API call.

    Unpacks as ``(error, value)``; exactly one side is not None.
    """

    error: Any | None = None
    value: Any | None = None
    status_code: int | None = None
    kind: FailureKind | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if (self.error is None) == (self.value is None):
            raise ValueError("exactly one of error/value must be set")

    @classmethod
    def success(cls, value: Any, *, status_code: int | None = None) -> Result:
        # falsy scalars (false, 0, "") read as an empty body; [] and {} are kept
        if not value and not isinstance(value, (dict, list)):
            value = {}
        return cls(value=value, status_code=status_code)

    @classmethod
    def failure(
            cls,
            error: Any | None = None,
            *,
            status_code: int | None = None,
            kind: FailureKind = FailureKind.TRANSPORT,
            message: str | None = None,
    ) -> Result:
        return cls(error=error or {}, status_code=status_code, kind=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[Any]:
        yield self.error
        yield self.value

    def unwrap(self) -> Any:
        """Return the value, or raise the matching client error for a failure."""
        if self.ok:
            return self.value
        if self.status_code is None:
            raise NetworkError(self.message or error_message(self.error) or "request failed without a response")
        msg = error_message(self.error) or self.message or f"request failed with {self.status_code}"
        details = None if self.error == {} else json.dumps(self.error, ensure_ascii=False, default=str)
        if self.status_code in (401, 403):
            raise AuthError(self.status_code, msg, details)
        raise ApiError(self.status_code, msg, details)


def error_message(error: Any) -> str:
    if isinstance(error, dict):
        for key in ("detail", "message", "error"):
            value = error.get(key)
            if value:
                return str(value)
        return ""
    if isinstance(error, str):
        return error
    return ""


ResultCallback = Callable[[Any, Any], None]


def add_result_callback(awaitable: Awaitable[Result], callback: ResultCallback) -> asyncio.Task:
    """Schedule ``awaitable`` and call ``callback(error, value)`` once it resolves.

    Must be called with a running event loop.
    """

    async def _run() -> Result:
        return await awaitable

    task = asyncio.ensure_future(_run())

    def _done(t: asyncio.Task) -> None:
        if t.cancelled():
            return
        exc = t.exception()
        if exc is not None:
            callback({"detail": str(exc)}, None)
            return
        err, value = t.result()
        callback(err, value)

    task.add_done_callback(_done)
    return task

from __future__ import annotations

import base64
from collections.abc import Awaitable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

AUTH_SCHEME = "user"


@dataclass(frozen=True)
class Credentials:
    key: str
    secret: str

    @classmethod
    def from_mapping(cls, data: Any) -> Credentials | None:
        """Build credentials from an auth response body, or None when it lacks key/secret."""
        if not isinstance(data, Mapping):
            return None
        key = data.get("key")
        secret = data.get("secret")
        if not isinstance(key, str) or not isinstance(secret, str):
            return None
        return cls(key=key, secret=secret)

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "secret": self.secret}


def authorization_header(credentials: Credentials) -> str:
    token = base64.b64encode(f"{credentials.key}:{credentials.secret}".encode("utf-8")).decode("ascii")
    return f"{AUTH_SCHEME} {token}"


class CredentialStore(Protocol):
    """Holds zero or one credential pair.

    ``get`` and ``set`` may be plain methods or coroutines; the pipeline and
    the client await whatever comes back when it is awaitable.
    """

    def get(self) -> Credentials | None | Awaitable[Credentials | None]: ...

    def set(self, credentials: Credentials | None) -> None | Awaitable[None]: ...


class MemoryCredentialStore:
    def __init__(self, credentials: Credentials | None = None):
        self._credentials = credentials

    def get(self) -> Credentials | None:
        return self._credentials

    def set(self, credentials: Credentials | None) -> None:
        self._credentials = credentials

from __future__ import annotations

from dataclasses import dataclass

from .config import load_config
from .http import run_request


@dataclass
class AuthContext:
    state: str
    user: dict | None = None


def resolve_auth_context() -> AuthContext:
    cfg = load_config()
    if not cfg.auth.present:
        return AuthContext(state="no_credentials")

    result = run_request(cfg, lambda client: client.get_user_self())
    if result.ok:
        user = result.value if isinstance(result.value, dict) else None
        return AuthContext(state="authed", user=user)
    if result.status_code in (401, 403):
        return AuthContext(state="invalid_credentials")
    return AuthContext(state="unreachable")

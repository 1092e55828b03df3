from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir
from salescript_client.config_types import DEFAULT_SERVER

from . import console

APP_NAME = "salescript"
CONFIG_FILENAME = "config.toml"
ENV_SERVER = "SALESCRIPT_SERVER"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AuthConfig:
    key: str = ""
    secret: str = ""

    @property
    def present(self) -> bool:
        return bool(self.key and self.secret)


@dataclass
class AppConfig:
    server: str
    auth: AuthConfig = field(default_factory=AuthConfig)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(server=DEFAULT_SERVER, auth=AuthConfig())


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"server missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {"server": cfg.server}
    if cfg.auth.present:
        data["auth"] = {"key": cfg.auth.key, "secret": cfg.auth.secret}
    return data


def from_toml(data: dict[str, Any]) -> AppConfig:
    server = normalize_base_url(str(data.get("server") or ""), warn=True)
    auth_raw = data.get("auth") or {}
    key = ""
    secret = ""
    if isinstance(auth_raw, dict):
        key = str(auth_raw.get("key") or "")
        secret = str(auth_raw.get("secret") or "")
    return AppConfig(server=server or DEFAULT_SERVER, auth=AuthConfig(key=key, secret=secret))


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def resolve_server(cfg: AppConfig, override: str | None = None) -> str:
    if override:
        return normalize_base_url(override, warn=True)
    env_value = os.getenv(ENV_SERVER, "").strip()
    if env_value:
        return normalize_base_url(env_value, warn=True)
    return normalize_base_url(cfg.server) or DEFAULT_SERVER


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path

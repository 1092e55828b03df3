from __future__ import annotations

from collections.abc import Mapping
from typing import Any

AUTH_PATH = "auth/"


def normalize_path(path: str) -> str:
    return (path or "").lstrip("/")


def join_uri(base: str, path: str) -> str:
    """Join the base URL and a relative path with exactly one slash between them."""
    return f"{(base or '').rstrip('/')}/{normalize_path(path)}"


def is_auth_path(path: str) -> bool:
    return normalize_path(path) == AUTH_PATH


def encode_query(data: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten a mapping into query pairs, bracketing nested keys.

    ``{"filter": {"city": "Moscow"}, "tag": ["a", "b"]}`` becomes
    ``filter[city]=Moscow&tag[]=a&tag[]=b``; lists holding mappings or lists
    are indexed (``items[0][id]=1``).
    """
    if not isinstance(data, Mapping):
        raise ValueError("GET data must be a mapping")
    pairs: list[tuple[str, str]] = []
    for key, value in data.items():
        _encode_value(str(key), value, pairs)
    return pairs


def _encode_value(prefix: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    if isinstance(value, Mapping):
        for key, item in value.items():
            _encode_value(f"{prefix}[{key}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            if isinstance(item, (Mapping, list, tuple)):
                _encode_value(f"{prefix}[{i}]", item, pairs)
            else:
                _encode_value(f"{prefix}[]", item, pairs)
    elif value is None:
        pairs.append((prefix, ""))
    elif isinstance(value, bool):
        pairs.append((prefix, "true" if value else "false"))
    else:
        pairs.append((prefix, str(value)))

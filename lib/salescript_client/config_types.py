from __future__ import annotations
from dataclasses import dataclass

DEFAULT_SERVER = "https://api2.absdata.ru"
DEFAULT_TIMEOUT_S = 5.0
DEFAULT_USER_AGENT = "salescript-client/0.1.0"


@dataclass(frozen=True)
class ClientConfig:
    server: str = DEFAULT_SERVER
    timeout_s: float = DEFAULT_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT

from .client import SalescriptClient
from .config_types import ClientConfig
from .credentials import CredentialStore, Credentials, MemoryCredentialStore
from .errors import ApiError, AuthError, NetworkError
from .result import FailureKind, Result, add_result_callback

__all__ = [
    "SalescriptClient",
    "ClientConfig",
    "CredentialStore",
    "Credentials",
    "MemoryCredentialStore",
    "ApiError",
    "AuthError",
    "NetworkError",
    "FailureKind",
    "Result",
    "add_result_callback",
]

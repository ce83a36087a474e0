"""
HTTP client for the organisation accounts API.

Fetch, create and delete accounts without handling HTTP, JSON or URLs
directly. Every failure is returned as a single OperationError type.
"""
from .types import (
    AccountsTransport,
    ErrorKind,
    HttpMethod,
    Result,
    Serializer,
)
from .errors import OperationError
from .models import (
    AccountAttributes,
    AccountData,
    Envelope,
)
from .config import (
    AccountsClientSettings,
    ClientConfig,
    DefaultSerializer,
    TimeoutConfig,
)
from .adapters.httpx_transport import HttpxTransport
from .core.accounts_client import AccountsClient
from .factory import (
    create_accounts_client,
    create_accounts_client_from_env,
)

__all__ = [
    # Types
    "AccountsTransport",
    "ErrorKind",
    "HttpMethod",
    "Result",
    "Serializer",
    # Errors
    "OperationError",
    # Models
    "AccountAttributes",
    "AccountData",
    "Envelope",
    # Config
    "AccountsClientSettings",
    "ClientConfig",
    "DefaultSerializer",
    "TimeoutConfig",
    # Transport
    "HttpxTransport",
    # Client
    "AccountsClient",
    # Factory
    "create_accounts_client",
    "create_accounts_client_from_env",
]

__version__ = "0.1.0"

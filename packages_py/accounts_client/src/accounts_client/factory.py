"""
Factory functions for creating accounts clients.
"""
from typing import Dict, Optional, Union

import httpx

from .adapters.httpx_transport import HttpxTransport
from .config import AccountsClientSettings, ClientConfig, TimeoutConfig
from .core.accounts_client import AccountsClient
from .types import AccountsTransport


def create_accounts_client(
    base_url: str,
    *,
    timeout: Union[TimeoutConfig, float, None] = None,
    headers: Optional[Dict[str, str]] = None,
    transport: Optional[AccountsTransport] = None,
    httpx_client: Optional[httpx.Client] = None,
) -> AccountsClient:
    """
    Create an accounts client.

    Args:
        base_url: Absolute base address of the service, e.g. "http://localhost:8080".
        timeout: Seconds, or a TimeoutConfig. Ignored when transport or httpx_client is given.
        headers: Extra default headers for every request.
        transport: Replacement transport (fault injection, custom stacks).
        httpx_client: Pre-configured httpx.Client to wrap in the default transport.

    Raises:
        OperationError: kind InvalidConfiguration when base_url is not absolute.

    Example:
        with create_accounts_client("http://localhost:8080") as client:
            result = client.fetch("ad27e265-9605-4b4b-a0e5-3003ea9cc4dc")
    """
    config = ClientConfig(base_url=base_url, timeout=timeout, headers=dict(headers or {}))

    if transport is None and httpx_client is not None:
        transport = HttpxTransport(httpx_client=httpx_client)

    return AccountsClient(config, transport=transport)


def create_accounts_client_from_env(
    settings: Optional[AccountsClientSettings] = None,
    *,
    transport: Optional[AccountsTransport] = None,
) -> AccountsClient:
    """
    Create an accounts client from ACCOUNTS_SERVICE_* environment variables.

    Example:
        # ACCOUNTS_SERVICE_BASE_URL=http://accountapi:8080
        client = create_accounts_client_from_env()
    """
    settings = settings or AccountsClientSettings()
    return AccountsClient(settings.to_client_config(), transport=transport)

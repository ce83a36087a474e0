"""
Default transport for accounts_client, built on httpx.
"""
import logging
import os
from typing import Any, Dict, Optional

import httpx

from ..config import DEFAULT_TIMEOUT, TimeoutConfig, default_serializer
from ..types import HttpMethod, Serializer

logger = logging.getLogger("accounts_client.httpx_transport")


def _is_ssl_verify_disabled_by_env() -> bool:
    """
    Check if SSL verification is disabled via environment variables.

    Returns True if any of these are set:
    - NODE_TLS_REJECT_UNAUTHORIZED=0
    - SSL_CERT_VERIFY=0
    """
    node_tls = os.environ.get("NODE_TLS_REJECT_UNAUTHORIZED", "")
    ssl_cert_verify = os.environ.get("SSL_CERT_VERIFY", "")
    return node_tls == "0" or ssl_cert_verify == "0"


class HttpxTransport:
    """Transport primitives over a synchronous ``httpx.Client``.

    Responses are sent with ``stream=True`` so the body is only read by
    ``read_all``. Callers own the returned responses and must close them.
    """

    def __init__(
        self,
        httpx_client: Optional[httpx.Client] = None,
        timeout: Optional[TimeoutConfig] = None,
        headers: Optional[Dict[str, str]] = None,
        serializer: Optional[Serializer] = None,
    ):
        self._serializer = serializer or default_serializer
        self._owns_client = httpx_client is None
        if httpx_client is not None:
            self._client = httpx_client
        else:
            timeout = timeout or DEFAULT_TIMEOUT
            # NODE_TLS_REJECT_UNAUTHORIZED=0 or SSL_CERT_VERIFY=0 will disable SSL verification
            verify_ssl = not _is_ssl_verify_disabled_by_env()
            self._client = httpx.Client(
                timeout=httpx.Timeout(
                    connect=timeout.connect,
                    read=timeout.read,
                    write=timeout.write,
                    pool=timeout.connect,
                ),
                headers={"accept": "application/json", **(headers or {})},
                verify=verify_ssl,
            )

    def get(self, url: str) -> httpx.Response:
        """GET request."""
        return self._send(self._client.build_request("GET", url))

    def post(self, url: str, content_type: str, body: bytes) -> httpx.Response:
        """POST request."""
        request = self._client.build_request(
            "POST", url, content=body, headers={"content-type": content_type}
        )
        return self._send(request)

    def build_request(
        self, method: HttpMethod, url: str, body: Optional[bytes] = None
    ) -> httpx.Request:
        return self._client.build_request(method, url, content=body)

    def execute(self, request: httpx.Request) -> httpx.Response:
        return self._send(request)

    def _send(self, request: httpx.Request) -> httpx.Response:
        logger.debug(f"HttpxTransport: {request.method} {request.url}")
        return self._client.send(request, stream=True)

    def read_all(self, response: httpx.Response) -> bytes:
        return response.read()

    def serialize(self, payload: Any) -> bytes:
        return self._serializer.serialize(payload)

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

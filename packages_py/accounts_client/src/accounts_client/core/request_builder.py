"""
Request builder utilities for accounts_client.
"""
import re
from typing import Any, Dict, Optional, Union
from urllib.parse import urlencode

from ..config import SERVICE_PATH

_HEX_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
UUID_PATTERN = re.compile(
    rf"{_HEX_UUID}|\{{{_HEX_UUID}\}}|urn:uuid:{_HEX_UUID}|[0-9a-f]{{32}}",
    re.IGNORECASE,
)


def is_valid_uuid(value: Any) -> bool:
    """Accepts the canonical form plus braces, ``urn:uuid:`` and bare hex."""
    return isinstance(value, str) and UUID_PATTERN.fullmatch(value) is not None


def build_url(
    base_url: str,
    path: str,
    query: Optional[Dict[str, Union[str, int, bool]]] = None,
) -> str:
    """Build full URL from base and path."""
    url = base_url.rstrip("/")
    if path:
        url = f"{url}/{path.lstrip('/')}"

    if query:
        query_str = urlencode({k: str(v) for k, v in query.items()})
        separator = "&" if "?" in url else "?"
        url = f"{url}{separator}{query_str}"

    return url


def accounts_url(base_url: str) -> str:
    """``{base}/v1/organisation/accounts``"""
    return build_url(base_url, SERVICE_PATH)


def account_url(
    base_url: str,
    account_id: str,
    version: Optional[int] = None,
) -> str:
    """``{base}/v1/organisation/accounts/{id}``, optionally with ``?version=``."""
    query = {"version": version} if version is not None else None
    return build_url(base_url, f"{SERVICE_PATH}/{account_id}", query)

"""
Response pipeline shared by the accounts operations.

Each step returns ``(value, None)`` on success or ``(None, OperationError)``
so the operations can stop at the first failure.
"""
import logging
from typing import Optional, Tuple

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config import JSON_CONTENT_TYPE
from ..errors import (
    OperationError,
    body_read_failure,
    deserialization_failure,
    empty_payload,
    unexpected_content_type,
    unexpected_status_code,
)
from ..models import AccountData, Envelope
from ..types import AccountsTransport

logger = logging.getLogger("accounts_client.pipeline")

BODY_READ_ERRORS = (httpx.HTTPError, httpx.StreamError, OSError)

# a top-level json null decodes to None rather than failing
ENVELOPE_ADAPTER = TypeAdapter(Optional[Envelope[AccountData]])


def _preview(payload: bytes, limit: int = 200) -> str:
    """Short printable form of a body for debug logs."""
    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError:
        return f"<binary data: {len(payload)} bytes>"
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def read_payload(
    transport: AccountsTransport, response: httpx.Response
) -> Tuple[Optional[bytes], Optional[OperationError]]:
    """Read the whole body through the transport."""
    try:
        payload = transport.read_all(response)
    except BODY_READ_ERRORS as e:
        logger.debug(f"read_payload: failed reading body: {e!r}")
        return None, body_read_failure(e)
    logger.debug(f"read_payload: status={response.status_code}, body={_preview(payload)}")
    return payload, None


def check_status(
    response: httpx.Response, expected: int, operation: str, payload: bytes
) -> Optional[OperationError]:
    if response.status_code != expected:
        return unexpected_status_code(expected, response.status_code, operation, payload)
    return None


def check_content_type(
    response: httpx.Response, payload: bytes
) -> Optional[OperationError]:
    content_type = response.headers.get("content-type", "")
    if not content_type.startswith(JSON_CONTENT_TYPE):
        return unexpected_content_type(
            JSON_CONTENT_TYPE, content_type, response.status_code, payload
        )
    return None


def deserialize_envelope(
    payload: bytes,
) -> Tuple[Optional[Envelope[AccountData]], Optional[OperationError]]:
    try:
        envelope = ENVELOPE_ADAPTER.validate_json(payload)
    except ValidationError as e:
        return None, deserialization_failure(e, payload)
    return envelope, None


def account_or_error(
    envelope: Optional[Envelope[AccountData]], payload: bytes
) -> Tuple[Optional[AccountData], Optional[OperationError]]:
    """Never hand back an empty account in place of an error."""
    if envelope is None or envelope.data is None or envelope.data.is_empty():
        return None, empty_payload(payload)
    return envelope.data, None


def parse_account(
    payload: bytes,
) -> Tuple[Optional[AccountData], Optional[OperationError]]:
    """Deserialize an envelope and extract its account."""
    envelope, error = deserialize_envelope(payload)
    if error is not None:
        return None, error
    return account_or_error(envelope, payload)

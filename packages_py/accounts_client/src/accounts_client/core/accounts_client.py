"""
Accounts client: fetch, create and delete organisation accounts.
"""
import logging
from typing import Optional

import httpx

from ..adapters.httpx_transport import HttpxTransport
from ..config import ClientConfig, resolve_config
from ..errors import (
    INVALID_UUID_MESSAGE,
    OperationError,
    invalid_argument,
    request_build_failure,
    serialization_failure,
    transport_failure,
)
from ..models import AccountData, Envelope
from ..types import AccountsTransport, Result
from .request_builder import account_url, accounts_url, is_valid_uuid
from .response_pipeline import (
    check_content_type,
    check_status,
    parse_account,
    read_payload,
)

logger = logging.getLogger("accounts_client.client")

TRANSPORT_ERRORS = (httpx.HTTPError, OSError)
REQUEST_BUILD_ERRORS = (httpx.InvalidURL, ValueError, TypeError)
SERIALIZE_ERRORS = (TypeError, ValueError)


class AccountsClient:
    """Client for the ``v1/organisation/accounts`` resource.

    Operations never raise for remote or transport failures. ``fetch`` and
    ``create`` return a ``Result``; ``delete`` returns an ``OperationError``
    or ``None``. Construction raises ``OperationError`` with kind
    ``InvalidConfiguration`` when the base URL is not absolute.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[AccountsTransport] = None,
    ):
        self._config = resolve_config(config)
        self._owns_transport = transport is None
        if transport is not None:
            self._transport = transport
        else:
            self._transport = HttpxTransport(
                timeout=self._config.timeout,
                headers=self._config.headers,
            )

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def fetch(self, account_id: str) -> Result[AccountData]:
        """Fetch an account by id. Expects 200 and a JSON body."""
        if not is_valid_uuid(account_id):
            return Result.failure(invalid_argument(INVALID_UUID_MESSAGE))

        url = account_url(self._config.base_url, account_id)
        logger.debug(f"AccountsClient.fetch: GET {url}")
        try:
            response = self._transport.get(url)
        except TRANSPORT_ERRORS as e:
            return Result.failure(self._failed("Get", transport_failure("Get", e)))

        try:
            payload, error = read_payload(self._transport, response)
            if error is None:
                error = check_status(response, 200, "Get", payload)
            if error is None:
                error = check_content_type(response, payload)
            if error is None:
                account, error = parse_account(payload)
        finally:
            response.close()

        if error is not None:
            return Result.failure(self._failed("Get", error))
        return Result.success(account)

    def create(self, account: AccountData) -> Result[AccountData]:
        """Create an account. Expects 201; the created account is returned."""
        if not isinstance(account, AccountData):
            return Result.failure(
                invalid_argument("account must be an AccountData instance")
            )

        envelope = Envelope[AccountData](data=account)
        try:
            # absent fields are left out of the body, not sent as null
            body = self._transport.serialize(
                envelope.model_dump(mode="json", exclude_none=True)
            )
        except SERIALIZE_ERRORS as e:
            return Result.failure(self._failed("Post", serialization_failure(e)))

        url = accounts_url(self._config.base_url)
        logger.debug(f"AccountsClient.create: POST {url}")
        try:
            response = self._transport.post(url, self._config.content_type, body)
        except TRANSPORT_ERRORS as e:
            return Result.failure(self._failed("Post", transport_failure("Post", e)))

        try:
            payload, error = read_payload(self._transport, response)
            if error is None:
                error = check_status(response, 201, "Post", payload)
            if error is None:
                created, error = parse_account(payload)
        finally:
            response.close()

        if error is not None:
            return Result.failure(self._failed("Post", error))
        return Result.success(created)

    def delete(self, account_id: str, version: int) -> Optional[OperationError]:
        """Delete an account at the given version. Expects 204."""
        if not is_valid_uuid(account_id):
            return invalid_argument(INVALID_UUID_MESSAGE)
        if not isinstance(version, int) or isinstance(version, bool):
            return invalid_argument("version must be an integer")

        url = account_url(self._config.base_url, account_id, version)
        logger.debug(f"AccountsClient.delete: DELETE {url}")
        try:
            request = self._transport.build_request("DELETE", url)
        except REQUEST_BUILD_ERRORS as e:
            return self._failed("Delete", request_build_failure("Delete", e))

        try:
            response = self._transport.execute(request)
        except TRANSPORT_ERRORS as e:
            return self._failed("Delete", transport_failure("Delete", e))

        try:
            if response.status_code == 204:
                return None
            payload, error = read_payload(self._transport, response)
            if error is None:
                error = check_status(response, 204, "Delete", payload)
        finally:
            response.close()

        return self._failed("Delete", error)

    def _failed(self, operation: str, error: OperationError) -> OperationError:
        logger.warning(
            f"{operation} failed: kind={error.kind.value}, "
            f"status={error.status_code}, message={error}"
        )
        return error

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> "AccountsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

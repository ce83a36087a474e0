"""
Shared fixtures for accounts_client tests.
"""
import json
from typing import Callable, List, Optional

import httpx
import pytest

from accounts_client import AccountAttributes, AccountData, AccountsClient, ClientConfig
from accounts_client.adapters.httpx_transport import HttpxTransport

BASE_URL = "http://accounts.test"
ACCOUNT_ID = "0d209d7f-d07a-4542-947f-5885fddddae2"
ORGANISATION_ID = "ba61483c-d5c5-4f50-ae81-6b8c039bea43"

FETCH_PAYLOAD = {
    "data": {
        "id": ACCOUNT_ID,
        "organisation_id": ORGANISATION_ID,
        "type": "accounts",
        "version": 32,
        "attributes": {
            "account_classification": "Class Zero",
            "account_matching_opt_out": True,
            "alternative_names": ["a", "b", "c", "d"],
            "bank_id": "400300",
            "bank_id_code": "GBDSC",
            "bic": "NWBKGB22",
            "country": "Canada",
            "base_currency": "CAD",
            "iban": "GB11NWBK40030041426819",
            "account_number": "41426819",
            "customer_id": "123",
            "joint_account": False,
            "status": "Pending",
            "switched": True,
            "secondary_identification": "Driver's License 123456",
            "name": ["x", "y", "z"],
        },
    }
}


class RecordingTransport(HttpxTransport):
    """HttpxTransport over an httpx.MockTransport that keeps every request and response."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        super().__init__(httpx_client=httpx.Client(transport=httpx.MockTransport(handler)))
        self.requests: List[httpx.Request] = []
        self.responses: List[httpx.Response] = []

    def _send(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = super()._send(request)
        self.responses.append(response)
        return response


class ChunkStream(httpx.SyncByteStream):
    """Unread body, so tests can tell whether the client closed the response."""

    def __init__(self, content: bytes) -> None:
        self._content = content

    def __iter__(self):
        yield self._content


def respond(
    status_code: int,
    content: bytes = b"",
    content_type: Optional[str] = "application/json",
) -> Callable[[httpx.Request], httpx.Response]:
    """Handler that always answers with the same response."""
    headers = {"content-type": content_type} if content_type else {}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, headers=headers, stream=ChunkStream(content))

    return handler


def raiser(error: Exception) -> Callable[..., None]:
    """Stand-in for a transport primitive that always fails."""

    def fail(*args, **kwargs):
        raise error

    return fail


def make_client(transport: HttpxTransport) -> AccountsClient:
    return AccountsClient(ClientConfig(base_url=BASE_URL), transport=transport)


@pytest.fixture
def fetch_payload() -> bytes:
    return json.dumps(FETCH_PAYLOAD).encode("utf-8")


@pytest.fixture
def expected_account() -> AccountData:
    return AccountData(
        id=ACCOUNT_ID,
        organisation_id=ORGANISATION_ID,
        type="accounts",
        version=32,
        attributes=AccountAttributes(
            account_classification="Class Zero",
            account_matching_opt_out=True,
            alternative_names=["a", "b", "c", "d"],
            bank_id="400300",
            bank_id_code="GBDSC",
            bic="NWBKGB22",
            country="Canada",
            base_currency="CAD",
            iban="GB11NWBK40030041426819",
            account_number="41426819",
            customer_id="123",
            joint_account=False,
            status="Pending",
            switched=True,
            secondary_identification="Driver's License 123456",
            name=["x", "y", "z"],
        ),
    )


@pytest.fixture
def new_account() -> AccountData:
    """Account as a caller would build it for create: no version yet."""
    return AccountData(
        id="ad27e265-9605-4b4b-a0e5-3003ea9cc4dc",
        organisation_id="eb0bd6f5-c3f5-44b2-b677-acd23cdde73c",
        type="accounts",
        attributes=AccountAttributes(
            account_matching_opt_out=False,
            account_number="A1234567",
            alternative_names=["x", "y", "z"],
            bank_id="GBDSC",
            bank_id_code="BIDC",
            base_currency="CAD",
            bic="AAAAAABB",
            country="CA",
            iban="",
            joint_account=True,
            name=["a", "b", "c"],
            secondary_identification="Driver's License",
            status="pending",
            switched=True,
        ),
    )

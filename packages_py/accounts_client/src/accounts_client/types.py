"""
Type definitions for accounts_client.
"""
from dataclasses import dataclass
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Literal,
    Optional,
    Protocol,
    TypeVar,
)

import httpx

if TYPE_CHECKING:
    from .errors import OperationError


T = TypeVar("T")

# HTTP methods used against the accounts service
HttpMethod = Literal["GET", "POST", "DELETE"]


class ErrorKind(str, Enum):
    """Failure categories of an accounts operation."""

    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_CONFIGURATION = "InvalidConfiguration"
    TRANSPORT_FAILURE = "TransportFailure"
    REQUEST_BUILD_FAILURE = "RequestBuildFailure"
    BODY_READ_FAILURE = "BodyReadFailure"
    UNEXPECTED_STATUS = "UnexpectedStatus"
    UNEXPECTED_CONTENT_TYPE = "UnexpectedContentType"
    SERIALIZATION_FAILURE = "SerializationFailure"
    DESERIALIZATION_FAILURE = "DeserializationFailure"
    EMPTY_PAYLOAD = "EmptyPayload"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a fetch/create operation.

    Exactly one of ``value`` and ``error`` is set.
    """

    value: Optional[T] = None
    error: Optional["OperationError"] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Result requires exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: "OperationError") -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the error."""
        if self.error is not None:
            raise self.error
        return self.value


class Serializer(Protocol):
    """Serializer protocol for request payloads."""

    def serialize(self, data: Any) -> bytes:
        """Serialize data to bytes."""
        ...


class AccountsTransport(Protocol):
    """Transport primitives the accounts client is built on.

    Every method may be swapped out individually, which is how each failure
    branch of the client is exercised without a live server.
    """

    def get(self, url: str) -> httpx.Response:
        """Issue a GET request."""
        ...

    def post(self, url: str, content_type: str, body: bytes) -> httpx.Response:
        """Issue a POST request with a body."""
        ...

    def build_request(
        self, method: HttpMethod, url: str, body: Optional[bytes] = None
    ) -> httpx.Request:
        """Build a request without sending it."""
        ...

    def execute(self, request: httpx.Request) -> httpx.Response:
        """Send a built request."""
        ...

    def read_all(self, response: httpx.Response) -> bytes:
        """Read the whole response body."""
        ...

    def serialize(self, payload: Any) -> bytes:
        """Encode a payload as JSON bytes."""
        ...

    def close(self) -> None:
        """Release pooled connections."""
        ...

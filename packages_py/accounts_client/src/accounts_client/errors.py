"""
Error type shared by all accounts operations, and the helpers that shape it.
"""
from typing import Optional

from .types import ErrorKind

INVALID_UUID_MESSAGE = "id must be a valid uuid"
INVALID_URL_MESSAGE = "invalid URL provided"
READ_BODY_MESSAGE = "Error processing response body"
DESERIALIZE_MESSAGE = "Error deserializing json"
EMPTY_PAYLOAD_MESSAGE = (
    "Got an empty object after deserialization, json payload was an empty object?"
)
SERIALIZE_MESSAGE = "Unable to serialize payload"


class OperationError(Exception):
    """Normalized failure of an accounts operation.

    Attributes:
        kind: failure category
        message: human-readable description
        status_code: HTTP status, 0 when no response was involved
        cause: underlying exception, if any
        payload: raw response body, when one was read before failing
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status_code: int = 0,
        cause: Optional[BaseException] = None,
        payload: Optional[bytes] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.cause = cause
        self.payload = payload
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} : {self.cause}"

    def __repr__(self) -> str:
        return (
            f"OperationError(kind={self.kind.value!r}, "
            f"message={self.message!r}, "
            f"status_code={self.status_code!r}, "
            f"cause={self.cause!r}, "
            f"payload={self.payload!r})"
        )


def invalid_argument(message: str) -> OperationError:
    return OperationError(ErrorKind.INVALID_ARGUMENT, message)


def invalid_configuration(cause: Optional[BaseException] = None) -> OperationError:
    return OperationError(ErrorKind.INVALID_CONFIGURATION, INVALID_URL_MESSAGE, cause=cause)


def transport_failure(operation: str, cause: BaseException) -> OperationError:
    """Request could not be placed; no response was received."""
    if operation == "Delete":
        message = "Error placing Delete Http request"
    else:
        message = f"Error placing a {operation} Http request"
    return OperationError(ErrorKind.TRANSPORT_FAILURE, message, cause=cause)


def request_build_failure(operation: str, cause: BaseException) -> OperationError:
    return OperationError(
        ErrorKind.REQUEST_BUILD_FAILURE,
        f"Error preparing {operation} Http request",
        cause=cause,
    )


def body_read_failure(cause: BaseException) -> OperationError:
    return OperationError(ErrorKind.BODY_READ_FAILURE, READ_BODY_MESSAGE, cause=cause)


def unexpected_status_code(
    expected: int, actual: int, operation: str, payload: bytes
) -> OperationError:
    return OperationError(
        ErrorKind.UNEXPECTED_STATUS,
        f"Unexpected response code returned for {operation} operation, "
        f"expected {expected}, got {actual}",
        status_code=actual,
        payload=payload,
    )


def unexpected_content_type(
    expected: str, actual: str, status_code: int, payload: bytes
) -> OperationError:
    return OperationError(
        ErrorKind.UNEXPECTED_CONTENT_TYPE,
        f"Unexpected Content-Type, expecting {expected}, got {actual}",
        status_code=status_code,
        payload=payload,
    )


def serialization_failure(cause: BaseException) -> OperationError:
    return OperationError(ErrorKind.SERIALIZATION_FAILURE, SERIALIZE_MESSAGE, cause=cause)


def deserialization_failure(cause: BaseException, payload: bytes) -> OperationError:
    return OperationError(
        ErrorKind.DESERIALIZATION_FAILURE,
        DESERIALIZE_MESSAGE,
        cause=cause,
        payload=payload,
    )


def empty_payload(payload: bytes) -> OperationError:
    return OperationError(ErrorKind.EMPTY_PAYLOAD, EMPTY_PAYLOAD_MESSAGE, payload=payload)

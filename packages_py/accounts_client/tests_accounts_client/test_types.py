"""
Tests for types.py and errors.py
Logic testing: State, Decision/Branch
"""
import httpx
import pytest

from accounts_client import AccountData, ErrorKind, OperationError, Result
from accounts_client.errors import (
    transport_failure,
    unexpected_status_code,
)


class TestResult:
    """Tests for Result value/error exclusivity."""

    # Happy Path: value side
    def test_success(self):
        account = AccountData(id="ad27e265-9605-4b4b-a0e5-3003ea9cc4dc")
        result = Result.success(account)

        assert result.ok is True
        assert result.error is None
        assert result.unwrap() is account

    # Error Path: error side raises on unwrap
    def test_failure_unwrap_raises(self):
        error = OperationError(ErrorKind.EMPTY_PAYLOAD, "empty", payload=b"{}")
        result = Result.failure(error)

        assert result.ok is False
        assert result.value is None
        with pytest.raises(OperationError) as exc_info:
            result.unwrap()
        assert exc_info.value is error

    # Boundary: neither set
    def test_neither_rejected(self):
        with pytest.raises(ValueError, match="exactly one"):
            Result()

    # Boundary: both set
    def test_both_rejected(self):
        with pytest.raises(ValueError, match="exactly one"):
            Result(
                value=AccountData(),
                error=OperationError(ErrorKind.EMPTY_PAYLOAD, "empty"),
            )


class TestOperationError:
    """Tests for OperationError formatting and helpers."""

    # Decision: no cause
    def test_str_without_cause(self):
        error = OperationError(ErrorKind.INVALID_ARGUMENT, "id must be a valid uuid")

        assert str(error) == "id must be a valid uuid"
        assert error.status_code == 0
        assert error.payload is None

    # Decision: with cause
    def test_str_with_cause(self):
        cause = httpx.ConnectError("connection refused")
        error = transport_failure("Get", cause)

        assert str(error) == "Error placing a Get Http request : connection refused"
        assert error.__cause__ is cause

    # Path: delete wording differs from get/post
    def test_transport_failure_messages(self):
        cause = OSError("down")

        assert transport_failure("Post", cause).message == "Error placing a Post Http request"
        assert transport_failure("Delete", cause).message == "Error placing Delete Http request"

    # Path: status helper fills status and payload
    def test_unexpected_status_code(self):
        error = unexpected_status_code(204, 409, "Delete", b'{"error_message":"invalid version"}')

        assert error.kind == ErrorKind.UNEXPECTED_STATUS
        assert error.status_code == 409
        assert error.payload == b'{"error_message":"invalid version"}'
        assert "expected 204, got 409" in error.message

    # Path: kind values are the documented names
    def test_kind_values(self):
        assert ErrorKind.UNEXPECTED_CONTENT_TYPE.value == "UnexpectedContentType"
        assert ErrorKind("EmptyPayload") is ErrorKind.EMPTY_PAYLOAD

    def test_repr(self):
        error = OperationError(ErrorKind.UNEXPECTED_STATUS, "bad", status_code=500, payload=b"")

        assert "UnexpectedStatus" in repr(error)
        assert "status_code=500" in repr(error)

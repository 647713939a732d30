"""Unit tests for the error kind to status code mapping."""

import pytest

from shared.api import status_code_for
from shared.errors import (
    BookstoreError,
    InternalError,
    InvalidStateError,
    InvalidStatusError,
    NotFoundError,
    ValidationError,
)


class UnmappedError(BookstoreError):
    pass


class StrictValidationError(ValidationError):
    pass


@pytest.mark.parametrize(
    "error,expected",
    [
        (ValidationError("bad"), 400),
        (NotFoundError(), 404),
        (InvalidStatusError(), 400),
        (InvalidStateError(), 400),
        (InternalError(), 500),
        (UnmappedError(), 500),
        (StrictValidationError(), 400),
    ],
)
def test_status_code_for(error: BookstoreError, expected: int) -> None:
    """Test that each kind maps to its status and unknown kinds default to 500."""
    assert status_code_for(error) == expected


def test_default_messages() -> None:
    """Test that errors fall back to a per-kind message."""
    assert InvalidStatusError().message == "Invalid status"
    assert NotFoundError("Order not found").message == "Order not found"
    assert str(InternalError()) == "Internal server error"

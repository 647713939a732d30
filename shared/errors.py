"""
Domain error taxonomy shared by every resource service.

Entities and services raise these; only the HTTP layer
(shared/api/handlers.py) decides which status code each kind maps to.
"""


class BookstoreError(Exception):
    """Base class for errors raised by the resource services."""

    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BookstoreError):
    """Bad input shape or values supplied by the caller."""

    default_message = "Validation error"


class NotFoundError(BookstoreError):
    """Referenced record does not exist."""

    default_message = "Resource not found"


class InvalidStatusError(BookstoreError):
    """Status value outside the legal set."""

    default_message = "Invalid status"


class InvalidStateError(BookstoreError):
    """Mutation attempted while the record is in a state that forbids it."""

    default_message = "Cannot modify order that is not pending"


class InternalError(BookstoreError):
    """Unexpected failure. The message is safe to show to callers."""

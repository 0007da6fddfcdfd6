"""Domain exceptions for the PolicyVault application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PolicyVaultException(Exception):
    """Base exception for all PolicyVault application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for a JSON error body."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(PolicyVaultException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class StoreUnavailableException(PolicyVaultException):
    """Raised when the record store backend is not configured."""

    def __init__(self, backend: str) -> None:
        super().__init__(
            message="The record store is not configured.",
            error_code="SERVICE_UNAVAILABLE",
            details={"backend": backend},
        )


class SearchBackendException(PolicyVaultException):
    """Raised when a record store query fails during search or filtering.

    The cause is chained (raise ... from) and logged server-side; details
    carry only the record kind so no store internals reach the caller.
    """

    def __init__(self, kind: str, operation: str) -> None:
        super().__init__(
            f"Record store query failed while running {operation} on {kind}",
            "SEARCH_BACKEND_ERROR",
            {"kind": kind, "operation": operation},
        )

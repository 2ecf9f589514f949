"""
Exception hierarchy for the course marketplace.

Provides layered exception structure for domain-specific errors.
Each exception carries the HTTP status it maps to at the API boundary
plus a details dict for observability.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class MarketplaceError(Exception):
    """Base exception for all marketplace errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message, returned to the client
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(MarketplaceError):
    """Raised when input is malformed or missing."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class ConflictError(MarketplaceError):
    """Raised when a uniqueness constraint would be violated."""

    status_code = 409


class AuthError(MarketplaceError):
    """Raised when presented credentials do not match."""

    status_code = 401


class NotFoundError(MarketplaceError):
    """Raised when a referenced entity does not exist."""

    status_code = 404

    def __init__(
        self,
        message: str,
        entity: str | None = None,
        entity_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            message: Error message
            entity: Entity kind (admin, user, course, post, review)
            entity_id: Identifier that failed to resolve
            details: Additional context
        """
        details = details or {}
        if entity:
            details["entity"] = entity
        if entity_id:
            details["entity_id"] = entity_id
        super().__init__(message, details)


class InvalidCodeError(MarketplaceError):
    """Raised when a reset or recovery code does not match or has expired."""

    status_code = 400


class InvalidTokenError(MarketplaceError):
    """Raised when a signed token fails signature, expiry or purpose checks."""

    status_code = 401


class UpstreamError(MarketplaceError):
    """Raised when the mailer or the media host fails."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream error.

        Args:
            message: Error message
            service: Upstream service name (mailer, media)
            details: Additional context
        """
        details = details or {}
        if service:
            details["service"] = service
        super().__init__(message, details)

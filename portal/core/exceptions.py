"""
Custom exceptions for the portal backend.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Request errors
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_ADDRESS_MODE = "INVALID_ADDRESS_MODE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Provider errors
    PROVIDER_UNAVAILABLE = "PROVIDER_UNAVAILABLE"
    NOTIFICATION_FAILED = "NOTIFICATION_FAILED"

    # Authentication errors
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    FORBIDDEN = "FORBIDDEN"

    # Generic errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class PortalException(Exception):
    """Base exception for the portal backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class InvalidInputError(PortalException):
    """Raised when a required field is missing or empty."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_INPUT,
            details={"field": field} if field else None,
            status_code=400
        )


class InvalidAddressModeError(PortalException):
    """Raised when a notification target kind is not token, topic or content."""

    def __init__(self, mode: Any):
        super().__init__(
            message="Invalid notification type",
            error_code=ErrorCode.INVALID_ADDRESS_MODE,
            details={"mode": str(mode), "supported_modes": ["token", "topic", "content"]},
            status_code=400
        )


class ProviderUnavailableError(PortalException):
    """
    Raised by provider adapters on transport or provider failure.

    Services absorb it: translation degrades to the original text and
    notifications report ``False``.
    """

    def __init__(self, provider: str, reason: str, details: Optional[Dict[str, Any]] = None):
        merged = {"provider": provider, "reason": reason}
        if details:
            merged.update(details)
        super().__init__(
            message=f"Provider '{provider}' unavailable: {reason}",
            error_code=ErrorCode.PROVIDER_UNAVAILABLE,
            details=merged,
            status_code=503
        )


class NotificationDeliveryError(PortalException):
    """Raised by the HTTP layer when a push operation reports failure."""

    def __init__(self, message: str = "Failed to send notification", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.NOTIFICATION_FAILED,
            details=details,
            status_code=500
        )


class AuthenticationError(PortalException):
    """Raised when a request carries no valid session token."""

    def __init__(self, message: str = "Authentication required",
                 error_code: ErrorCode = ErrorCode.AUTHENTICATION_REQUIRED):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=401
        )


class AuthorizationError(PortalException):
    """Raised when a valid session lacks the required scope."""

    def __init__(self, scope: str):
        super().__init__(
            message=f"Scope '{scope}' required",
            error_code=ErrorCode.FORBIDDEN,
            details={"required_scope": scope},
            status_code=403
        )

"""
Core infrastructure for the portal backend.
Provides exceptions, error handling, persistence, security and dependency wiring.
"""

from .exceptions import (
    ErrorCode,
    PortalException,
    InvalidInputError,
    InvalidAddressModeError,
    ProviderUnavailableError,
    NotificationDeliveryError,
    AuthenticationError,
    AuthorizationError,
)

__all__ = [
    "ErrorCode",
    "PortalException",
    "InvalidInputError",
    "InvalidAddressModeError",
    "ProviderUnavailableError",
    "NotificationDeliveryError",
    "AuthenticationError",
    "AuthorizationError",
]

"""
Persistence models for the portal backend.
"""

from .device import DeviceRegistration
from .notification_log import NotificationLog

__all__ = [
    "DeviceRegistration",
    "NotificationLog",
]

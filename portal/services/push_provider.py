"""
Push-messaging provider adapters.

The notification service talks to BasePushProvider only; the Firebase
adapter turns PushMessage objects into Firebase Admin SDK messages.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import firebase_admin
from firebase_admin import credentials, exceptions, messaging

from portal.config.settings import PushSettings, get_settings
from portal.core.exceptions import ProviderUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PushMessage:
    """One notification addressed to exactly one token or one topic."""
    title: str
    body: str
    token: Optional[str] = None
    topic: Optional[str] = None
    image: Optional[str] = None
    link: Optional[str] = None
    icon: Optional[str] = None
    badge: Optional[str] = None
    data: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if bool(self.token) == bool(self.topic):
            raise ValueError("PushMessage needs exactly one of token or topic")


@dataclass(frozen=True)
class BatchResult:
    success_count: int
    failure_count: int = 0

    @property
    def any_succeeded(self) -> bool:
        return self.success_count > 0


class BasePushProvider(ABC):
    """Abstract base class for push-messaging providers"""

    name = "base"

    @abstractmethod
    async def send(self, message: PushMessage) -> str:
        """Send one message and return the provider message id."""

    @abstractmethod
    async def send_each(self, messages: List[PushMessage]) -> BatchResult:
        """Send several messages in one provider call."""

    @abstractmethod
    async def subscribe_to_topic(self, tokens: List[str], topic: str) -> BatchResult:
        """Register device tokens with a topic."""

    @abstractmethod
    async def unsubscribe_from_topic(self, tokens: List[str], topic: str) -> BatchResult:
        """Remove device tokens from a topic."""


class FirebasePushProvider(BasePushProvider):
    """Firebase Cloud Messaging through the Firebase Admin SDK."""

    name = "firebase"

    def __init__(self, config: Optional[PushSettings] = None):
        self.config = config or get_settings().push
        self._app: Optional[firebase_admin.App] = None

    def _get_app(self) -> firebase_admin.App:
        """Initialize the default Firebase app on first use."""
        if self._app is not None:
            return self._app
        try:
            self._app = firebase_admin.get_app()
        except ValueError:
            if not self.config.service_account_path:
                raise ProviderUnavailableError(self.name, "PUSH_SERVICE_ACCOUNT_PATH is not configured")
            try:
                cred = credentials.Certificate(self.config.service_account_path)
            except (IOError, ValueError) as e:
                raise ProviderUnavailableError(self.name, f"invalid service account: {e}")
            self._app = firebase_admin.initialize_app(cred, {"projectId": self.config.project_id})
            logger.info("Firebase Admin initialized successfully")
        return self._app

    def _to_firebase(self, message: PushMessage) -> messaging.Message:
        data = dict(message.data)
        data.setdefault("url", message.link or self.config.default_link)

        # FCM only accepts absolute HTTPS click-through links
        fcm_options = None
        if message.link and message.link.startswith("https://"):
            fcm_options = messaging.WebpushFCMOptions(link=message.link)

        return messaging.Message(
            token=message.token,
            topic=message.topic,
            notification=messaging.Notification(
                title=message.title,
                body=message.body,
                image=message.image,
            ),
            data=data,
            webpush=messaging.WebpushConfig(
                notification=messaging.WebpushNotification(
                    title=message.title,
                    body=message.body,
                    icon=message.icon or self.config.default_icon,
                    badge=message.badge or self.config.badge,
                    image=message.image,
                    actions=[
                        messaging.WebpushNotificationAction("open", "Open"),
                        messaging.WebpushNotificationAction("close", "Close"),
                    ],
                ),
                fcm_options=fcm_options,
            ),
        )

    async def send(self, message: PushMessage) -> str:
        app = self._get_app()
        try:
            message_id = await asyncio.to_thread(messaging.send, self._to_firebase(message), False, app)
        except exceptions.FirebaseError as e:
            raise ProviderUnavailableError(self.name, str(e), {"code": e.code})
        logger.info(f"Successfully sent message: {message_id}")
        return message_id

    async def send_each(self, messages: List[PushMessage]) -> BatchResult:
        app = self._get_app()
        batch = [self._to_firebase(m) for m in messages]
        try:
            response = await asyncio.to_thread(messaging.send_each, batch, False, app)
        except exceptions.FirebaseError as e:
            raise ProviderUnavailableError(self.name, str(e), {"code": e.code})
        logger.info(
            f"Sent {response.success_count}/{len(batch)} messages",
            extra={"failure_count": response.failure_count},
        )
        return BatchResult(response.success_count, response.failure_count)

    async def subscribe_to_topic(self, tokens: List[str], topic: str) -> BatchResult:
        app = self._get_app()
        try:
            response = await asyncio.to_thread(messaging.subscribe_to_topic, tokens, topic, app)
        except exceptions.FirebaseError as e:
            raise ProviderUnavailableError(self.name, str(e), {"code": e.code})
        return BatchResult(response.success_count, response.failure_count)

    async def unsubscribe_from_topic(self, tokens: List[str], topic: str) -> BatchResult:
        app = self._get_app()
        try:
            response = await asyncio.to_thread(messaging.unsubscribe_from_topic, tokens, topic, app)
        except exceptions.FirebaseError as e:
            raise ProviderUnavailableError(self.name, str(e), {"code": e.code})
        return BatchResult(response.success_count, response.failure_count)

"""
Notification dispatch for admin actions and content alerts.

An intent pairs bilingual content with one of three address variants:
a single device token, a named topic, or a content type whose topic is
derived automatically. Each dispatch makes exactly one provider call and
reports the outcome as a boolean; provider errors never propagate.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from sqlalchemy import select
from sqlalchemy.orm import Session

from portal.config.settings import PushSettings, get_settings
from portal.core.exceptions import InvalidAddressModeError, InvalidInputError
from portal.core.metrics import record_notification_outcome
from portal.models.device import DeviceRegistration
from portal.services.language import Language
from portal.services.push_provider import BasePushProvider, PushMessage


logger = logging.getLogger(__name__)


class ContentType(str, Enum):
    """Content categories; the value doubles as the topic name."""
    NEWS = "news"
    EVENTS = "events"
    JOBS = "jobs"
    EMERGENCY = "emergency"

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        lowered = value.strip().lower()
        for member in cls:
            if member.value == lowered:
                return member
        return {"event": cls.EVENTS, "job": cls.JOBS}.get(lowered)

    @property
    def topic(self) -> str:
        return self.value


@dataclass(frozen=True)
class TokenAddress:
    token: str
    locale: Language = Language.ENGLISH

    def __post_init__(self):
        if not self.token:
            raise InvalidInputError("Missing token", field="target")


@dataclass(frozen=True)
class TopicAddress:
    topic: str

    def __post_init__(self):
        if not self.topic:
            raise InvalidInputError("Missing topic", field="target")


@dataclass(frozen=True)
class ContentAddress:
    content_type: ContentType

    def __post_init__(self):
        if not self.content_type:
            raise InvalidInputError("Missing contentType", field="contentType")


Address = Union[TokenAddress, TopicAddress, ContentAddress]


@dataclass(frozen=True)
class NotificationContent:
    title: str
    body: str
    title_ta: Optional[str] = None
    body_ta: Optional[str] = None
    image: Optional[str] = None
    link: Optional[str] = None
    data: Dict[str, str] = field(default_factory=dict)

    @property
    def has_tamil(self) -> bool:
        return bool(self.title_ta and self.body_ta)

    def localized(self, locale: Language) -> tuple:
        """(title, body) for a locale, falling back to English per field."""
        if locale == Language.TAMIL:
            return (self.title_ta or self.title, self.body_ta or self.body)
        return (self.title, self.body)


@dataclass(frozen=True)
class NotificationIntent:
    address: Address
    content: NotificationContent


def build_address(
    mode: str,
    value: Optional[str] = None,
    content_type: Optional[str] = None,
    locale: Language = Language.ENGLISH,
) -> Address:
    """
    Parse the wire form of a notification target into an address variant.

    Raises:
        InvalidAddressModeError: If mode is not token, topic or content
        InvalidInputError: If the value the mode needs is missing or unknown
    """
    if mode == "token":
        return TokenAddress(value or "", locale)
    if mode == "topic":
        return TopicAddress(value or "")
    if mode == "content":
        if not content_type:
            raise InvalidInputError("Missing contentType", field="contentType")
        try:
            return ContentAddress(ContentType(content_type))
        except ValueError:
            raise InvalidInputError(f"Unknown contentType '{content_type}'", field="contentType")
    raise InvalidAddressModeError(mode)


class NotificationService:
    """
    Sends bilingual notifications and manages topic subscriptions.
    """

    def __init__(self, provider: BasePushProvider, config: Optional[PushSettings] = None):
        self.provider = provider
        self.config = config or get_settings().push

    def _message(
        self,
        title: str,
        body: str,
        content: NotificationContent,
        token: Optional[str] = None,
        topic: Optional[str] = None,
        data: Optional[Dict[str, str]] = None,
    ) -> PushMessage:
        return PushMessage(
            title=title,
            body=body,
            token=token,
            topic=topic,
            image=content.image,
            link=content.link or self.config.default_link,
            icon=self.config.default_icon,
            badge=self.config.badge,
            data=dict(data if data is not None else content.data),
        )

    def _topic_messages(
        self,
        topic: str,
        content: NotificationContent,
        data: Optional[Dict[str, str]] = None,
    ) -> List[PushMessage]:
        """English message for <topic>_en plus Tamil for <topic>_ta when available."""
        messages = [
            self._message(content.title, content.body, content, topic=f"{topic}_en", data=data)
        ]
        if content.has_tamil:
            messages.append(
                self._message(content.title_ta, content.body_ta, content, topic=f"{topic}_ta", data=data)
            )
        return messages

    async def _send_single(self, message: PushMessage) -> bool:
        await self.provider.send(message)
        return True

    async def _send_batch(self, messages: List[PushMessage]) -> bool:
        result = await self.provider.send_each(messages)
        return result.any_succeeded

    async def dispatch(self, intent: NotificationIntent) -> bool:
        """
        Deliver a notification intent.

        Returns:
            True when the provider accepted the message (or at least one of
            a batch), False on missing title/body or provider failure

        Raises:
            InvalidAddressModeError: If the address is not a known variant
        """
        content = intent.content
        if not content.title or not content.body:
            logger.warning("Notification rejected: missing title or body")
            return False

        match intent.address:
            case TokenAddress(token=token, locale=locale):
                mode = "token"
                title, body = content.localized(locale)
                delivery = self._send_single(self._message(title, body, content, token=token))
            case TopicAddress(topic=topic):
                mode = "topic"
                delivery = self._send_batch(self._topic_messages(topic, content))
            case ContentAddress(content_type=content_type):
                mode = "content"
                data = dict(content.data)
                data.update({"type": content_type.value, "url": content.link or self.config.default_link})
                messages = self._topic_messages(content_type.topic, content, data)
                broadcast = self.config.content_broadcast_topic
                if broadcast and broadcast != content_type.topic:
                    messages.extend(self._topic_messages(broadcast, content, data))
                delivery = self._send_batch(messages)
            case other:
                raise InvalidAddressModeError(type(other).__name__)

        try:
            success = await delivery
        except Exception as e:
            logger.error(f"Error sending {mode} notification: {e}", exc_info=True)
            success = False

        record_notification_outcome(mode, success)
        return success


    async def subscribe(self, token: str, topic: str) -> bool:
        """Register a device token with a topic."""
        self._require_subscription_fields(token, topic)
        try:
            result = await self.provider.subscribe_to_topic([token], topic)
        except Exception as e:
            logger.error(f"Error subscribing to topic '{topic}': {e}")
            return False
        logger.info(f"Subscribed token to topic '{topic}'", extra={"success_count": result.success_count})
        return result.any_succeeded

    async def unsubscribe(self, token: str, topic: str) -> bool:
        """Remove a device token from a topic."""
        self._require_subscription_fields(token, topic)
        try:
            result = await self.provider.unsubscribe_from_topic([token], topic)
        except Exception as e:
            logger.error(f"Error unsubscribing from topic '{topic}': {e}")
            return False
        logger.info(f"Unsubscribed token from topic '{topic}'", extra={"success_count": result.success_count})
        return result.any_succeeded

    async def register_device(
        self,
        session: Session,
        user_id: str,
        token: str,
        locale: Language = Language.ENGLISH,
    ) -> bool:
        """
        Store a device token for a user and subscribe it to the broadcast topics.

        The registration is upserted on (user_id, token); the caller owns the
        session and its commit.
        """
        if not user_id or not token:
            raise InvalidInputError("Missing userId or token")

        existing = session.execute(
            select(DeviceRegistration).where(
                DeviceRegistration.user_id == user_id,
                DeviceRegistration.token == token,
            )
        ).scalar_one_or_none()
        previous_locale = None
        if existing:
            if existing.locale != locale.value:
                previous_locale = existing.locale
            existing.locale = locale.value
        else:
            session.add(DeviceRegistration(user_id=user_id, token=token, locale=locale.value))
        session.flush()

        subscribed_all = await self.subscribe(token, "all")
        subscribed_locale = await self.subscribe(token, f"all_{locale.value}")
        # a device gets one language copy of each broadcast
        left_previous = True
        if previous_locale:
            left_previous = await self.unsubscribe(token, f"all_{previous_locale}")
        return subscribed_all and subscribed_locale and left_previous

    @staticmethod
    def _require_subscription_fields(token: str, topic: str) -> None:
        if not token or not topic:
            raise InvalidInputError("Missing token or topic")


def locale_for_token(session: Session, token: str) -> Language:
    """Locale the device registered with, English when unknown."""
    registration = session.execute(
        select(DeviceRegistration)
        .where(DeviceRegistration.token == token)
        .order_by(DeviceRegistration.updated_at.desc())
        .limit(1)
    ).scalar_one_or_none()
    if registration is None:
        return Language.ENGLISH
    try:
        return Language(registration.locale)
    except ValueError:
        return Language.ENGLISH

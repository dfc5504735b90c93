"""Push notification endpoints: admin sends, topic subscriptions, device tokens."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
import logging

from portal.core.db import get_db
from portal.core.dependencies import get_notification_service, require_admin
from portal.core.exceptions import InvalidInputError, NotificationDeliveryError
from portal.models.notification_log import NotificationLog
from portal.schemas.base import SuccessResponse
from portal.schemas.notification import (
    ContentPublishedRequest,
    ContentPublishedResponse,
    EmergencyAlertRequest,
    EventRemindersRequest,
    EventRemindersResponse,
    SendNotificationRequest,
    StoreTokenRequest,
    SubscriptionRequest,
    WeatherAlertRequest,
)
from portal.services import alerts
from portal.services.notification_service import (
    NotificationContent,
    NotificationIntent,
    NotificationService,
    TokenAddress,
    TopicAddress,
    build_address,
    locale_for_token,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _log_dispatch(
    db: Session,
    intent: NotificationIntent,
    success: bool,
    sent_by: Optional[str],
) -> None:
    address = intent.address
    if isinstance(address, TokenAddress):
        target_type, target_value, content_type = "token", address.token, None
    elif isinstance(address, TopicAddress):
        target_type, target_value, content_type = "topic", address.topic, None
    else:
        target_type, target_value, content_type = "content", address.content_type.topic, address.content_type.value

    db.add(NotificationLog(
        title=intent.content.title,
        body=intent.content.body,
        target_type=target_type,
        target_value=target_value,
        content_type=content_type,
        sent_by=sent_by,
        success=success,
    ))
    db.commit()
    logger.info(
        f"Admin {target_type} notification {'sent' if success else 'failed'}",
        extra={"target_value": target_value, "sent_by": sent_by},
    )


@router.post("/send", response_model=SuccessResponse)
async def send_notification(
    request: SendNotificationRequest,
    admin: Dict[str, Any] = Depends(require_admin),
    service: NotificationService = Depends(get_notification_service),
    db: Session = Depends(get_db),
):
    """
    Send a notification to a device token, a topic, or a content-type topic.
    """
    if not request.title or not request.body:
        raise InvalidInputError("Missing title or body")

    locale = request.locale
    if request.type == "token" and request.target and "locale" not in request.model_fields_set:
        locale = locale_for_token(db, request.target)

    address = build_address(request.type, request.target, request.content_type, locale)
    intent = NotificationIntent(
        address=address,
        content=NotificationContent(
            title=request.title,
            body=request.body,
            title_ta=request.title_ta,
            body_ta=request.body_ta,
            image=request.image,
            link=request.link,
        ),
    )

    success = await service.dispatch(intent)
    _log_dispatch(db, intent, success, admin.get("sub"))

    if not success:
        raise NotificationDeliveryError()
    return SuccessResponse(success=True)


@router.post("/subscribe", response_model=SuccessResponse)
async def subscribe(
    request: SubscriptionRequest,
    service: NotificationService = Depends(get_notification_service),
):
    if not await service.subscribe(request.token or "", request.topic or ""):
        raise NotificationDeliveryError("Failed to subscribe to topic")
    return SuccessResponse(success=True)


@router.post("/unsubscribe", response_model=SuccessResponse)
async def unsubscribe(
    request: SubscriptionRequest,
    service: NotificationService = Depends(get_notification_service),
):
    if not await service.unsubscribe(request.token or "", request.topic or ""):
        raise NotificationDeliveryError("Failed to unsubscribe from topic")
    return SuccessResponse(success=True)


@router.post("/store-token", response_model=SuccessResponse)
async def store_token(
    request: StoreTokenRequest,
    service: NotificationService = Depends(get_notification_service),
    db: Session = Depends(get_db),
):
    """
    Remember a device token for a user and subscribe it to the broadcast topics.
    """
    subscribed = await service.register_device(db, request.user_id or "", request.token or "", request.locale)
    db.commit()
    if not subscribed:
        # the token is stored; topic membership is retried on the next registration
        logger.warning("Device token stored but topic subscription failed", extra={"user_id": request.user_id})
    return SuccessResponse(success=True)


@router.post("/content-published", response_model=ContentPublishedResponse)
async def content_published(
    request: ContentPublishedRequest,
    admin: Dict[str, Any] = Depends(require_admin),
    service: NotificationService = Depends(get_notification_service),
    db: Session = Depends(get_db),
):
    """
    Notify subscribers when a news, event or job row becomes published.
    Rows that were already published or belong to other tables are ignored.
    """
    try:
        intent = alerts.content_published(request.table, request.record, request.old_record)
    except KeyError as e:
        raise InvalidInputError(f"Record is missing field {e}", field="record")
    except ValueError as e:
        raise InvalidInputError(f"Record has an invalid value: {e}", field="record")

    if intent is None:
        return ContentPublishedResponse(success=True, dispatched=False)

    success = await service.dispatch(intent)
    _log_dispatch(db, intent, success, admin.get("sub"))
    return ContentPublishedResponse(success=success, dispatched=True)


@router.post("/emergency", response_model=SuccessResponse)
async def send_emergency(
    request: EmergencyAlertRequest,
    admin: Dict[str, Any] = Depends(require_admin),
    service: NotificationService = Depends(get_notification_service),
    db: Session = Depends(get_db),
):
    """
    Broadcast an emergency alert to emergency subscribers.
    """
    if not request.title or not request.message:
        raise InvalidInputError("Missing title or message")

    intent = alerts.emergency_alert(
        request.title,
        request.message,
        title_ta=request.title_ta,
        message_ta=request.message_ta,
        link=request.link,
    )
    success = await service.dispatch(intent)
    _log_dispatch(db, intent, success, admin.get("sub"))

    if not success:
        raise NotificationDeliveryError("Failed to send emergency alert")
    return SuccessResponse(success=True)


@router.post("/weather", response_model=SuccessResponse)
async def send_weather(
    request: WeatherAlertRequest,
    admin: Dict[str, Any] = Depends(require_admin),
    service: NotificationService = Depends(get_notification_service),
    db: Session = Depends(get_db),
):
    if not request.condition:
        raise InvalidInputError("Missing condition", field="condition")

    intent = alerts.weather_alert(
        request.condition,
        condition_ta=request.condition_ta,
        description=request.description,
        description_ta=request.description_ta,
    )
    success = await service.dispatch(intent)
    _log_dispatch(db, intent, success, admin.get("sub"))

    if not success:
        raise NotificationDeliveryError("Failed to send weather alert")
    return SuccessResponse(success=True)


@router.post("/event-reminders", response_model=EventRemindersResponse)
async def send_event_reminders(
    request: EventRemindersRequest,
    admin: Dict[str, Any] = Depends(require_admin),
    service: NotificationService = Depends(get_notification_service),
    db: Session = Depends(get_db),
):
    """
    Send a reminder for every published event taking place tomorrow.

    Events on other days are skipped. ``success`` is false when any reminder
    failed to send.
    """
    try:
        intents = alerts.due_event_reminders(request.events, request.today)
    except KeyError as e:
        raise InvalidInputError(f"Event is missing field {e}", field="events")
    except ValueError as e:
        raise InvalidInputError(f"Event has an invalid value: {e}", field="events")

    sent = 0
    for intent in intents:
        success = await service.dispatch(intent)
        _log_dispatch(db, intent, success, admin.get("sub"))
        sent += int(success)

    logger.info(f"Event reminders sent: {sent}/{len(intents)}")
    return EventRemindersResponse(success=sent == len(intents), sent=sent)

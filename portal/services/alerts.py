"""
Builders that turn published portal content into notification intents.

Records are plain mappings as delivered by the database change hook; only
the fields named below are read.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Iterable, List, Mapping, Optional

from portal.services.notification_service import (
    ContentAddress,
    ContentType,
    NotificationContent,
    NotificationIntent,
)

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "Madurai"
DEFAULT_LOCATION_TA = "மதுரை"


def _content_intent(
    content_type: ContentType,
    title: str,
    body: str,
    title_ta: Optional[str] = None,
    body_ta: Optional[str] = None,
    link: Optional[str] = None,
) -> NotificationIntent:
    return NotificationIntent(
        address=ContentAddress(content_type),
        content=NotificationContent(
            title=title,
            body=body,
            title_ta=title_ta,
            body_ta=body_ta,
            link=link,
        ),
    )


def _format_day(value: Any) -> str:
    """Short day label such as '14 Jan'."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, (datetime, date)):
        return f"{value.day} {value.strftime('%b')}"
    return str(value)


def news_published(record: Mapping[str, Any]) -> NotificationIntent:
    title_ta = record.get("title_ta")
    return _content_intent(
        ContentType.NEWS,
        f"📰 {record['title']}",
        record.get("excerpt") or "New article published",
        f"📰 {title_ta}" if title_ta else None,
        record.get("excerpt_ta") or "புதிய கட்டுரை வெளியிடப்பட்டுள்ளது",
        f"/news/{record['id']}",
    )


def event_published(record: Mapping[str, Any]) -> NotificationIntent:
    day = _format_day(record["event_date"])
    title_ta = record.get("title_ta")
    return _content_intent(
        ContentType.EVENTS,
        f"🎉 {record['title']}",
        f"{day} - {record.get('location') or DEFAULT_LOCATION}",
        f"🎉 {title_ta}" if title_ta else None,
        f"{day} - {record.get('location_ta') or record.get('location') or DEFAULT_LOCATION_TA}",
        f"/events/{record['id']}",
    )


def job_published(record: Mapping[str, Any]) -> NotificationIntent:
    title_ta = record.get("title_ta")
    company = record.get("company_name") or ""
    location = record.get("location") or DEFAULT_LOCATION
    return _content_intent(
        ContentType.JOBS,
        f"💼 {record['title']}",
        f"{company} - {location}",
        f"💼 {title_ta}" if title_ta else None,
        f"{record.get('company_name_ta') or company} - {record.get('location_ta') or location}",
        f"/jobs/{record['id']}",
    )


def emergency_alert(
    title: str,
    message: str,
    title_ta: Optional[str] = None,
    message_ta: Optional[str] = None,
    link: Optional[str] = None,
) -> NotificationIntent:
    return _content_intent(
        ContentType.EMERGENCY,
        f"🚨 {title}",
        message,
        f"🚨 {title_ta}" if title_ta else None,
        message_ta,
        link,
    )


def weather_alert(
    condition: str,
    condition_ta: Optional[str] = None,
    description: Optional[str] = None,
    description_ta: Optional[str] = None,
) -> NotificationIntent:
    body = f"{condition} - {description}" if description else condition
    body_ta = condition_ta or condition
    if description_ta:
        body_ta = f"{body_ta} - {description_ta}"
    return _content_intent(
        ContentType.EMERGENCY,
        "🌦️ Weather Alert",
        body,
        "🌦️ வானிலை எச்சரிக்கை",
        body_ta,
        "/weather",
    )


def event_reminder(record: Mapping[str, Any]) -> NotificationIntent:
    """Day-before reminder for a published event."""
    title_ta = record.get("title_ta")
    return _content_intent(
        ContentType.EVENTS,
        f"⏰ Event Reminder: {record['title']}",
        f"Tomorrow at {record.get('location') or DEFAULT_LOCATION}",
        f"⏰ நிகழ்வு நினைவூட்டல்: {title_ta}" if title_ta else None,
        f"நாளை {record.get('location_ta') or record.get('location') or 'மதுரையில்'}",
        f"/events/{record['id']}",
    )


def _calendar_day(value: Any) -> Optional[date]:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def due_event_reminders(
    records: Iterable[Mapping[str, Any]],
    today: Optional[date] = None,
) -> List[NotificationIntent]:
    """
    Reminders for published events that take place tomorrow.

    Records without a status are treated as published; records without an
    event date are skipped.
    """
    tomorrow = (today or date.today()) + timedelta(days=1)
    return [
        event_reminder(record)
        for record in records
        if record.get("status", "published") == "published"
        and _calendar_day(record.get("event_date")) == tomorrow
    ]


_PUBLISH_BUILDERS = {
    "news": news_published,
    "events": event_published,
    "jobs": job_published,
}


def content_published(
    table: str,
    record: Mapping[str, Any],
    old_record: Optional[Mapping[str, Any]] = None,
) -> Optional[NotificationIntent]:
    """
    Intent for a row whose status just became 'published', else None.

    Tables without a builder are ignored.
    """
    if record.get("status") != "published":
        return None
    if old_record is not None and old_record.get("status") == "published":
        return None

    builder = _PUBLISH_BUILDERS.get(table)
    if builder is None:
        logger.info(f"No notification handler for table: {table}")
        return None
    return builder(record)

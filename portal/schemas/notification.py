from datetime import date
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

from portal.services.language import Language


class SendNotificationRequest(BaseModel):
    """Admin send request; ``type`` is token, topic or content."""
    model_config = ConfigDict(populate_by_name=True)

    type: str
    target: Optional[str] = None
    title: Optional[str] = None
    body: Optional[str] = None
    title_ta: Optional[str] = None
    body_ta: Optional[str] = None
    image: Optional[str] = None
    link: Optional[str] = None
    content_type: Optional[str] = Field(default=None, alias="contentType")
    locale: Language = Language.ENGLISH


class SubscriptionRequest(BaseModel):
    token: Optional[str] = None
    topic: Optional[str] = None


class StoreTokenRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId")
    token: Optional[str] = None
    locale: Language = Language.ENGLISH


class ContentPublishedRequest(BaseModel):
    """Change record forwarded by a database trigger."""
    model_config = ConfigDict(populate_by_name=True)

    table: str
    record: Dict[str, Any]
    old_record: Optional[Dict[str, Any]] = Field(default=None, alias="oldRecord")


class ContentPublishedResponse(BaseModel):
    success: bool
    dispatched: bool


class EmergencyAlertRequest(BaseModel):
    title: Optional[str] = None
    message: Optional[str] = None
    title_ta: Optional[str] = None
    message_ta: Optional[str] = None
    link: Optional[str] = None


class WeatherAlertRequest(BaseModel):
    condition: Optional[str] = None
    condition_ta: Optional[str] = None
    description: Optional[str] = None
    description_ta: Optional[str] = None


class EventRemindersRequest(BaseModel):
    """Upcoming event rows; only those dated the day after ``today`` get a reminder."""
    events: List[Dict[str, Any]] = Field(default_factory=list)
    today: Optional[date] = None


class EventRemindersResponse(BaseModel):
    success: bool
    sent: int

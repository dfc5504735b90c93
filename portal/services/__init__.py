# Business logic services

from .language import Language, detect_language, is_english
from .translation_provider import BaseTranslationProvider, MyMemoryTranslationProvider
from .translation_service import TranslationService, TranslationResult
from .push_provider import BasePushProvider, FirebasePushProvider, PushMessage, BatchResult
from .notification_service import (
    NotificationService,
    NotificationIntent,
    NotificationContent,
    ContentType,
    TokenAddress,
    TopicAddress,
    ContentAddress,
    build_address,
)

__all__ = [
    "Language",
    "detect_language",
    "is_english",
    "BaseTranslationProvider",
    "MyMemoryTranslationProvider",
    "TranslationService",
    "TranslationResult",
    "BasePushProvider",
    "FirebasePushProvider",
    "PushMessage",
    "BatchResult",
    "NotificationService",
    "NotificationIntent",
    "NotificationContent",
    "ContentType",
    "TokenAddress",
    "TopicAddress",
    "ContentAddress",
    "build_address",
]

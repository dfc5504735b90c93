"""
Dependency injection setup for FastAPI.
Provides the service container and request dependencies for handlers.
"""

from fastapi import Request
from typing import Any, Dict, Optional
import asyncio
import logging

import httpx

from portal.config.settings import get_settings
from portal.core.exceptions import AuthenticationError, AuthorizationError, ErrorCode
from portal.core.jwt import ADMIN_SCOPE, decode_token
from portal.services.notification_service import NotificationService
from portal.services.push_provider import BasePushProvider, FirebasePushProvider
from portal.services.translation_provider import BaseTranslationProvider, MyMemoryTranslationProvider
from portal.services.translation_service import TranslationService


logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Owns the provider clients and the services built on them.

    Providers may be injected (tests pass fakes); otherwise the production
    adapters are created from settings.
    """

    def __init__(
        self,
        translation_provider: Optional[BaseTranslationProvider] = None,
        push_provider: Optional[BasePushProvider] = None,
    ):
        self._injected_translation_provider = translation_provider
        self._injected_push_provider = push_provider
        self._http_client: Optional[httpx.AsyncClient] = None
        self._translation_service: Optional[TranslationService] = None
        self._notification_service: Optional[NotificationService] = None
        self._initialized = False
        self._initialization_lock = asyncio.Lock()

    async def initialize_services(self) -> None:
        """
        Create the shared HTTP client, provider adapters and services.
        """
        async with self._initialization_lock:
            if self._initialized:
                return

            logger.info("Initializing service container")
            settings = get_settings()

            translation_provider = self._injected_translation_provider
            if translation_provider is None:
                self._http_client = httpx.AsyncClient(
                    base_url=settings.translation.provider_url,
                    headers={"User-Agent": settings.translation.user_agent},
                    timeout=settings.translation.timeout_seconds,
                )
                translation_provider = MyMemoryTranslationProvider(
                    client=self._http_client,
                    config=settings.translation,
                )

            push_provider = self._injected_push_provider or FirebasePushProvider(settings.push)

            self._translation_service = TranslationService(translation_provider)
            self._notification_service = NotificationService(push_provider, settings.push)

            self._initialized = True
            logger.info("Service container initialization completed")

    async def cleanup_services(self) -> None:
        """
        Close the shared HTTP client and drop service references.
        """
        logger.info("Cleaning up service container")
        try:
            if self._http_client is not None:
                await self._http_client.aclose()
        except Exception as e:
            logger.error(f"Service container cleanup failed: {e}", exc_info=True)
        finally:
            self._http_client = None
            self._translation_service = None
            self._notification_service = None
            self._initialized = False

    def get_translation_service(self) -> TranslationService:
        """Get translation service instance."""
        if not self._initialized or self._translation_service is None:
            raise RuntimeError("Service container not initialized")
        return self._translation_service

    def get_notification_service(self) -> NotificationService:
        """Get notification service instance."""
        if not self._initialized or self._notification_service is None:
            raise RuntimeError("Service container not initialized")
        return self._notification_service

    def get_status(self) -> Dict[str, Any]:
        return {
            "initialized": self._initialized,
            "translation_provider": (
                self._translation_service.provider.name if self._translation_service else None
            ),
            "push_provider": (
                self._notification_service.provider.name if self._notification_service else None
            ),
        }


# Global service container
service_container = ServiceContainer()


def get_service_container(request: Request) -> ServiceContainer:
    """Service container stored on the application during lifespan startup."""
    container = getattr(request.app.state, "service_container", None)
    if container is None:
        raise RuntimeError("Service container not initialized")
    return container


def get_translation_service(request: Request) -> TranslationService:
    return get_service_container(request).get_translation_service()


def get_notification_service(request: Request) -> NotificationService:
    return get_service_container(request).get_notification_service()


async def require_admin(request: Request) -> Dict[str, Any]:
    """
    Validate the bearer session token and require the admin scope.

    Returns:
        Decoded token payload

    Raises:
        AuthenticationError: If the header is missing, malformed or the token is invalid
        AuthorizationError: If the token lacks the admin scope
    """
    auth_header = request.headers.get("Authorization", "")
    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError("Missing or malformed authorization header")

    payload = decode_token(parts[1])
    if not payload or "sub" not in payload:
        raise AuthenticationError("Invalid or expired token", ErrorCode.INVALID_CREDENTIALS)

    if ADMIN_SCOPE not in payload.get("scopes", []):
        raise AuthorizationError(ADMIN_SCOPE)

    request.state.admin_subject = payload["sub"]
    return payload

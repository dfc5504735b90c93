"""
External translation provider adapters.

Only the MyMemory free API is wired up. Adapters raise
ProviderUnavailableError for every failure; the translation service decides
how to degrade.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from portal.config.settings import TranslationSettings, get_settings
from portal.core.exceptions import ProviderUnavailableError
from portal.services.language import Language

logger = logging.getLogger(__name__)


class BaseTranslationProvider(ABC):
    """Abstract base class for translation providers"""

    name = "base"

    @abstractmethod
    async def translate(self, text: str, source: Language, target: Language) -> str:
        """
        Return the provider's raw translated string.

        Raises:
            ProviderUnavailableError: On transport or provider failure
        """


class MyMemoryTranslationProvider(BaseTranslationProvider):
    """Client for https://api.mymemory.translated.net (daily quota applies)."""

    name = "mymemory"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        config: Optional[TranslationSettings] = None,
    ):
        self.config = config or get_settings().translation
        self.client = client or httpx.AsyncClient(
            base_url=self.config.provider_url,
            headers={"User-Agent": self.config.user_agent},
            timeout=self.config.timeout_seconds,
        )

    async def translate(self, text: str, source: Language, target: Language) -> str:
        params = {
            "q": text,
            "langpair": f"{source.value}|{target.value}",
        }
        try:
            response = await self.client.get("/get", params=params)
        except httpx.HTTPError as e:
            raise ProviderUnavailableError(self.name, f"transport error: {e}")

        if response.status_code != 200:
            raise ProviderUnavailableError(
                self.name,
                "non-success status",
                {"status_code": response.status_code},
            )

        try:
            data = response.json()
        except ValueError:
            raise ProviderUnavailableError(self.name, "response is not JSON")

        if not isinstance(data, dict) or data.get("responseStatus") != 200:
            status = data.get("responseStatus") if isinstance(data, dict) else None
            raise ProviderUnavailableError(
                self.name,
                "provider reported failure",
                {"response_status": status},
            )

        translated = (data.get("responseData") or {}).get("translatedText")
        if not isinstance(translated, str):
            raise ProviderUnavailableError(self.name, "translatedText missing")

        logger.debug(f"MyMemory translated {len(text)} chars {source.value}->{target.value}")
        return translated

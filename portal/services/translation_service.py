"""
Translation service for the portal backend.

Resolves English/Tamil text in three steps: the static phrase dictionary,
a no-op when source and target agree, and finally a single best-effort call
to the external provider. Provider failures never reach the caller; the
original text is returned instead.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from portal.core.exceptions import InvalidInputError, ProviderUnavailableError
from portal.core.metrics import record_translation_latency, record_translation_outcome
from portal.services import phrase_dictionary
from portal.services.language import Language, detect_language
from portal.services.translation_provider import BaseTranslationProvider


# Substrings the provider puts in translatedText instead of failing the request
PROVIDER_ERROR_MARKERS = (
    "MYMEMORY WARNING",
    "QUOTA EXCEEDED",
    "INVALID LANGUAGE PAIR",
)

MAX_LENGTH_RATIO = 3


@dataclass(frozen=True)
class TranslationResult:
    original_text: str
    translated_text: str
    target_language: Language
    source_language: Optional[Language]

    @property
    def source_label(self) -> str:
        return self.source_language.value if self.source_language else "auto"


class TranslationService:
    """
    Translation service backed by the phrase dictionary and an external provider.
    """

    def __init__(self, provider: BaseTranslationProvider):
        """
        Initialize the translation service.

        Args:
            provider: External provider consulted when the dictionary has no match.
        """
        self.logger = logging.getLogger(__name__)
        self.provider = provider

        self.logger.info(f"TranslationService initialized with provider '{provider.name}'")

    async def resolve(
        self,
        text: str,
        target_language: Language,
        source_language: Optional[Language] = None
    ) -> str:
        """
        Translate ``text`` into ``target_language``.

        Args:
            text: The text to translate
            target_language: Language to translate into
            source_language: Trusted source language; detected when None

        Returns:
            The translation, or ``text`` itself when no usable translation exists

        Raises:
            InvalidInputError: If text is empty or whitespace
        """
        if not text or not text.strip():
            raise InvalidInputError("Text is required", field="text")

        with record_translation_latency():
            dictionary_hit = phrase_dictionary.lookup(text, target_language)
            if dictionary_hit is not None:
                record_translation_outcome("dictionary")
                return dictionary_hit

            resolved_source = source_language or detect_language(text)
            if resolved_source == target_language:
                record_translation_outcome("noop")
                return text

            try:
                candidate = await self.provider.translate(text, resolved_source, target_language)
            except ProviderUnavailableError as e:
                self.logger.warning(f"Translation provider unavailable: {e.message}", extra={"details": e.details})
                record_translation_outcome("fallback")
                return text
            except Exception as e:
                self.logger.error(f"Translation provider call failed for text '{text[:50]}': {e}", exc_info=True)
                record_translation_outcome("fallback")
                return text

            if not self.is_acceptable(text, candidate):
                self.logger.info(f"Rejected provider translation for text '{text[:50]}'")
                record_translation_outcome("fallback")
                return text

            record_translation_outcome("provider")
            return candidate.strip()

    async def translate(
        self,
        text: str,
        target_language: Language,
        source_language: Optional[Language] = None
    ) -> TranslationResult:
        """Resolve ``text`` and wrap the outcome in a TranslationResult."""
        translated = await self.resolve(text, target_language, source_language)
        return TranslationResult(
            original_text=text,
            translated_text=translated,
            target_language=target_language,
            source_language=source_language,
        )

    @staticmethod
    def is_acceptable(original: str, candidate: Optional[str]) -> bool:
        """Quality filter for provider output."""
        if not candidate:
            return False
        translated = candidate.strip()
        if not translated or translated == original:
            return False
        if any(marker in translated for marker in PROVIDER_ERROR_MARKERS):
            return False
        return len(translated) < len(original) * MAX_LENGTH_RATIO

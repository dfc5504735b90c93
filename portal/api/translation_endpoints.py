"""Text translation endpoint used by the admin editor and public pages."""
from fastapi import APIRouter, Depends
import logging
import time

from portal.core.dependencies import get_translation_service
from portal.core.exceptions import InvalidInputError
from portal.schemas.translation import TranslateRequest, TranslateResponse
from portal.services.translation_service import TranslationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["translation"])


@router.post("/translate")
async def translate_text(
    request: TranslateRequest,
    service: TranslationService = Depends(get_translation_service),
):
    """
    Translate text between English and Tamil.
    Falls back to the original text when no translation is available.
    """
    if not request.text or not request.target_language:
        raise InvalidInputError("Text and target language are required")

    start = time.perf_counter()
    result = await service.translate(
        request.text,
        target_language=request.target_language,
        source_language=request.source_language,
    )
    latency_ms = (time.perf_counter() - start) * 1000.0
    logger.info(f"Text translation completed in {latency_ms:.2f}ms")

    response = TranslateResponse(
        original_text=result.original_text,
        translated_text=result.translated_text,
        target_language=result.target_language.value,
        source_language=result.source_label,
    )
    return response.model_dump(by_alias=True)

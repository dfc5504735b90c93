import pytest
import httpx

from portal.core.exceptions import InvalidInputError, ProviderUnavailableError
from portal.core.metrics import snapshot_outcomes
from portal.services.language import Language
from portal.services.translation_service import TranslationService


@pytest.mark.asyncio
async def test_dictionary_hit_skips_provider(make_translation_provider):
    provider = make_translation_provider(reply="unused")
    service = TranslationService(provider)
    assert await service.resolve("News", Language.TAMIL) == "செய்திகள்"
    assert provider.calls == []


@pytest.mark.asyncio
async def test_provider_translation_is_returned(make_translation_provider):
    provider = make_translation_provider(reply="வணக்கம் உலகம்")
    service = TranslationService(provider)
    result = await service.resolve("Hello World", Language.TAMIL, Language.ENGLISH)
    assert result == "வணக்கம் உலகம்"
    assert provider.calls == [("Hello World", Language.ENGLISH, Language.TAMIL)]


@pytest.mark.asyncio
async def test_empty_provider_reply_falls_back_to_input(make_translation_provider):
    service = TranslationService(make_translation_provider(reply=""))
    assert await service.resolve("Hello World", Language.TAMIL) == "Hello World"


@pytest.mark.asyncio
async def test_same_language_is_a_noop(make_translation_provider):
    provider = make_translation_provider(reply="unused")
    service = TranslationService(provider)
    assert await service.resolve("Good morning", Language.ENGLISH) == "Good morning"
    assert provider.calls == []


@pytest.mark.asyncio
async def test_explicit_source_language_is_trusted(make_translation_provider):
    provider = make_translation_provider(reply="Good morning")
    service = TranslationService(provider)
    # ASCII text declared as Tamil still goes to the provider
    result = await service.resolve("Kaalai vanakkam", Language.ENGLISH, Language.TAMIL)
    assert result == "Good morning"
    assert provider.calls[0][1] == Language.TAMIL


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [
    ProviderUnavailableError("fake", "down"),
    RuntimeError("boom"),
    httpx.ConnectError("refused"),
])
async def test_provider_errors_fall_back_to_input(error, make_translation_provider):
    service = TranslationService(make_translation_provider(error=error))
    assert await service.resolve("Good morning", Language.TAMIL) == "Good morning"
    assert snapshot_outcomes()["translation"]["fallback"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("reply", [
    "Good morning",
    "MYMEMORY WARNING: YOU USED ALL AVAILABLE FREE TRANSLATIONS FOR TODAY",
    "QUOTA EXCEEDED",
    "INVALID LANGUAGE PAIR SPECIFIED",
    "x" * 40,
    "   ",
])
async def test_unacceptable_replies_are_rejected(reply, make_translation_provider):
    service = TranslationService(make_translation_provider(reply=reply))
    assert await service.resolve("Good morning", Language.TAMIL) == "Good morning"


@pytest.mark.asyncio
@pytest.mark.parametrize("reply, accepted", [
    ("த" * 35, True),
    ("த" * 36, False),
])
async def test_reply_length_limit_is_three_times_input(reply, accepted, make_translation_provider):
    # "Good morning" is 12 characters
    service = TranslationService(make_translation_provider(reply=reply))
    expected = reply if accepted else "Good morning"
    assert await service.resolve("Good morning", Language.TAMIL) == expected


@pytest.mark.asyncio
async def test_reply_is_stripped(make_translation_provider):
    service = TranslationService(make_translation_provider(reply="  காலை வணக்கம் "))
    assert await service.resolve("Good morning", Language.TAMIL) == "காலை வணக்கம்"


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   "])
async def test_blank_text_is_rejected(text, make_translation_provider):
    service = TranslationService(make_translation_provider())
    with pytest.raises(InvalidInputError):
        await service.resolve(text, Language.TAMIL)


@pytest.mark.asyncio
async def test_translate_reports_auto_source(make_translation_provider):
    service = TranslationService(make_translation_provider())
    result = await service.translate("News", Language.TAMIL)
    assert result.translated_text == "செய்திகள்"
    assert result.source_label == "auto"

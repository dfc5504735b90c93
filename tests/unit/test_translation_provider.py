import httpx
import pytest

from portal.core.exceptions import ProviderUnavailableError
from portal.services.language import Language
from portal.services.translation_provider import MyMemoryTranslationProvider


def _provider(handler) -> MyMemoryTranslationProvider:
    client = httpx.AsyncClient(base_url="http://mymemory.test", transport=httpx.MockTransport(handler))
    return MyMemoryTranslationProvider(client=client)


@pytest.mark.asyncio
async def test_mymemory_request_and_reply():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.url.path, dict(request.url.params)))
        return httpx.Response(200, json={
            "responseStatus": 200,
            "responseData": {"translatedText": "காலை வணக்கம்"},
        })

    provider = _provider(handler)
    assert await provider.translate("Good morning", Language.ENGLISH, Language.TAMIL) == "காலை வணக்கம்"
    await provider.client.aclose()

    assert calls == [("/get", {"q": "Good morning", "langpair": "en|ta"})]


@pytest.mark.asyncio
async def test_http_error_status_raises():
    provider = _provider(lambda request: httpx.Response(503, text="unavailable"))
    with pytest.raises(ProviderUnavailableError) as exc_info:
        await provider.translate("Good morning", Language.ENGLISH, Language.TAMIL)
    assert exc_info.value.details["status_code"] == 503
    await provider.client.aclose()


@pytest.mark.asyncio
async def test_provider_failure_status_raises():
    provider = _provider(lambda request: httpx.Response(200, json={
        "responseStatus": 403,
        "responseData": {"translatedText": "INVALID LANGUAGE PAIR SPECIFIED"},
    }))
    with pytest.raises(ProviderUnavailableError):
        await provider.translate("Good morning", Language.ENGLISH, Language.TAMIL)
    await provider.client.aclose()


@pytest.mark.asyncio
async def test_non_json_body_raises():
    provider = _provider(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(ProviderUnavailableError):
        await provider.translate("Good morning", Language.ENGLISH, Language.TAMIL)
    await provider.client.aclose()


@pytest.mark.asyncio
async def test_transport_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider = _provider(handler)
    with pytest.raises(ProviderUnavailableError):
        await provider.translate("Good morning", Language.ENGLISH, Language.TAMIL)
    await provider.client.aclose()


@pytest.mark.asyncio
async def test_missing_translated_text_raises():
    provider = _provider(lambda request: httpx.Response(200, json={"responseStatus": 200, "responseData": {}}))
    with pytest.raises(ProviderUnavailableError):
        await provider.translate("Good morning", Language.ENGLISH, Language.TAMIL)
    await provider.client.aclose()

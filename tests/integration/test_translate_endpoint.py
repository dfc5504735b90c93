def test_translate_dictionary_phrase(client, translation_provider):
    r = client.post("/translate", json={"text": "News", "targetLanguage": "ta"})
    assert r.status_code == 200, r.text
    assert r.json() == {
        "originalText": "News",
        "translatedText": "செய்திகள்",
        "targetLanguage": "ta",
        "sourceLanguage": "auto",
    }
    assert translation_provider.calls == []


def test_translate_through_provider(client, translation_provider):
    r = client.post("/translate", json={"text": "Hello World", "targetLanguage": "ta", "sourceLanguage": "en"})
    assert r.status_code == 200
    data = r.json()
    assert data["translatedText"] == "வணக்கம் உலகம்"
    assert data["sourceLanguage"] == "en"
    assert len(translation_provider.calls) == 1


def test_translate_falls_back_when_provider_fails(client, translation_provider):
    translation_provider.error = RuntimeError("provider down")
    r = client.post("/translate", json={"text": "Good morning", "targetLanguage": "ta"})
    assert r.status_code == 200
    assert r.json()["translatedText"] == "Good morning"


def test_translate_requires_text_and_target(client):
    r = client.post("/translate", json={"text": "", "targetLanguage": "ta"})
    assert r.status_code == 400
    assert r.json()["error"] == "Text and target language are required"

    r = client.post("/translate", json={"text": "News"})
    assert r.status_code == 400


def test_translate_rejects_unsupported_language(client):
    r = client.post("/translate", json={"text": "News", "targetLanguage": "fr"})
    assert r.status_code == 422

from portal.config.loader import ConfigLoader
from portal.config.settings import PushSettings, SecuritySettings, Settings


def test_defaults_follow_environment():
    settings = Settings()
    assert settings.database.url == "sqlite://"
    assert settings.environment.value == "testing"


def test_empty_broadcast_topic_disables_broadcast():
    assert PushSettings(content_broadcast_topic="  ").content_broadcast_topic is None
    assert PushSettings(content_broadcast_topic="all").content_broadcast_topic == "all"


def test_web_config_shape():
    config = PushSettings(project_id="demo", web_app_id="1:2:web:3").get_web_config()
    assert config["projectId"] == "demo"
    assert config["appId"] == "1:2:web:3"
    assert set(config) == {"apiKey", "authDomain", "projectId", "storageBucket", "messagingSenderId", "appId"}


def test_cors_origins_accept_comma_list():
    assert SecuritySettings(cors_origins="https://a.test, https://b.test").cors_origins == [
        "https://a.test",
        "https://b.test",
    ]


def test_production_requires_secrets(monkeypatch):
    monkeypatch.delenv("SECURITY_ADMIN_PASSWORD_HASH", raising=False)
    assert ConfigLoader.validate_environment_config("testing")
    assert not ConfigLoader.validate_environment_config("production")


def test_unknown_environment_is_invalid():
    assert not ConfigLoader.validate_environment_config("qa")


def test_reload_settings_picks_up_environment(monkeypatch):
    from portal.config.settings import get_settings, reload_settings

    monkeypatch.setenv("APP_VERSION", "9.9.9")
    try:
        assert reload_settings().app_version == "9.9.9"
        assert get_settings().app_version == "9.9.9"
    finally:
        monkeypatch.delenv("APP_VERSION")
        reload_settings()

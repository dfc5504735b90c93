"""
Shared fixtures: in-memory database, fake providers and an app client.
"""

import os

# Must be set before any portal module builds settings or the engine
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_FORMAT"] = "text"
os.environ["PUSH_CONTENT_BROADCAST_TOPIC"] = "all"

from collections import defaultdict
from typing import Dict, List, Optional, Set

import pytest
from fastapi.testclient import TestClient

from portal.config.settings import get_settings
from portal.core.db import Base, SessionLocal, engine, init_db
from portal.core.dependencies import ServiceContainer
from portal.core.exceptions import ProviderUnavailableError
from portal.core.jwt import ADMIN_SCOPE, create_access_token
from portal.core.metrics import reset_metrics
from portal.core.security import hash_password
from portal.services.language import Language
from portal.services.push_provider import BasePushProvider, BatchResult, PushMessage
from portal.services.translation_provider import BaseTranslationProvider


ADMIN_PASSWORD = "madurai-admin-test"


class FakeTranslationProvider(BaseTranslationProvider):
    """Returns a canned reply and records every call."""

    name = "fake-translation"

    def __init__(self, reply: Optional[str] = None, error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[tuple] = []

    async def translate(self, text: str, source: Language, target: Language) -> str:
        self.calls.append((text, source, target))
        if self.error is not None:
            raise self.error
        return self.reply if self.reply is not None else ""


class FakePushProvider(BasePushProvider):
    """In-memory push provider keeping subscription state per topic."""

    name = "fake-push"

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[PushMessage] = []
        self.batches: List[List[PushMessage]] = []
        self.subscriptions: Dict[str, Set[str]] = defaultdict(set)
        self.calls = 0

    def _check(self) -> None:
        self.calls += 1
        if self.fail:
            raise ProviderUnavailableError(self.name, "simulated outage")

    def subscription_state(self) -> Dict[str, Set[str]]:
        return {topic: set(tokens) for topic, tokens in self.subscriptions.items() if tokens}

    async def send(self, message: PushMessage) -> str:
        self._check()
        self.sent.append(message)
        return f"projects/test/messages/{len(self.sent)}"

    async def send_each(self, messages: List[PushMessage]) -> BatchResult:
        self._check()
        self.batches.append(list(messages))
        return BatchResult(success_count=len(messages))

    async def subscribe_to_topic(self, tokens: List[str], topic: str) -> BatchResult:
        self._check()
        self.subscriptions[topic].update(tokens)
        return BatchResult(success_count=len(tokens))

    async def unsubscribe_from_topic(self, tokens: List[str], topic: str) -> BatchResult:
        self._check()
        self.subscriptions[topic].difference_update(tokens)
        return BatchResult(success_count=len(tokens))


@pytest.fixture(autouse=True)
def _clean_state():
    reset_metrics()
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def translation_provider():
    return FakeTranslationProvider(reply="வணக்கம் உலகம்")


@pytest.fixture
def push_provider():
    return FakePushProvider()


@pytest.fixture
def client(translation_provider, push_provider):
    from portal.main import app

    app.state.service_container = ServiceContainer(
        translation_provider=translation_provider,
        push_provider=push_provider,
    )
    with TestClient(app) as test_client:
        yield test_client
    del app.state.service_container


@pytest.fixture(scope="session")
def admin_password_hash():
    return hash_password(ADMIN_PASSWORD)


@pytest.fixture
def admin_password(monkeypatch, admin_password_hash):
    monkeypatch.setattr(get_settings().security, "admin_password_hash", admin_password_hash)
    return ADMIN_PASSWORD


@pytest.fixture
def admin_headers():
    token = create_access_token("admin", scopes=[ADMIN_SCOPE])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_translation_provider():
    return FakeTranslationProvider


@pytest.fixture
def make_push_provider():
    return FakePushProvider

import pytest

from portal.core import metrics
from portal.services.language import Language
from portal.services.translation_service import TranslationService


def test_latency_samples_are_bounded():
    for _ in range(metrics.MAX_LATENCY_SAMPLES + 500):
        with metrics.record_translation_latency():
            pass

    stats = metrics.snapshot_latency_stats()
    assert stats["count"] == metrics.MAX_LATENCY_SAMPLES
    assert stats["p95_ms"] is not None


@pytest.mark.asyncio
async def test_repeated_resolves_keep_sample_count_bounded(make_translation_provider):
    service = TranslationService(make_translation_provider(reply="unused"))
    for _ in range(5000):
        await service.resolve("News", Language.TAMIL)

    assert len(metrics._translation_timings_ms) <= metrics.MAX_LATENCY_SAMPLES
    assert metrics.snapshot_outcomes()["translation"]


def test_reset_clears_samples():
    with metrics.record_translation_latency():
        pass
    metrics.reset_metrics()
    assert metrics.snapshot_latency_stats() == {"count": 0, "p95_ms": None, "p99_ms": None}

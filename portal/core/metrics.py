"""Translation latency and outcome instrumentation.

Provides a timing context manager plus counters surfaced on /health.
"""
import time
from collections import Counter, deque
from contextlib import contextmanager

MAX_LATENCY_SAMPLES = 1000

# most recent samples only
_translation_timings_ms: deque = deque(maxlen=MAX_LATENCY_SAMPLES)
_translation_outcomes: Counter = Counter()
_notification_outcomes: Counter = Counter()


@contextmanager
def record_translation_latency():
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        _translation_timings_ms.append(elapsed_ms)


def record_translation_outcome(outcome: str) -> None:
    _translation_outcomes[outcome] += 1


def record_notification_outcome(mode: str, success: bool) -> None:
    _notification_outcomes[f"{mode}:{'ok' if success else 'failed'}"] += 1


def snapshot_latency_stats() -> dict:
    if not _translation_timings_ms:
        return {"count": 0, "p95_ms": None, "p99_ms": None}
    sorted_vals = sorted(_translation_timings_ms)
    count = len(sorted_vals)

    def _percentile(p: float) -> float:
        idx = int(round(p * (count - 1)))
        return sorted_vals[idx]
    return {
        "count": count,
        "p95_ms": _percentile(0.95),
        "p99_ms": _percentile(0.99),
    }


def snapshot_outcomes() -> dict:
    return {
        "translation": dict(_translation_outcomes),
        "notification": dict(_notification_outcomes),
    }


def reset_metrics() -> None:
    _translation_timings_ms.clear()
    _translation_outcomes.clear()
    _notification_outcomes.clear()

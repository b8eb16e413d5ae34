from __future__ import annotations

import prometheus_client as prom

from pg_replicate.infrastructure.observability.metrics import (
    get_numeric_conversion_errors_total,
    get_numeric_conversions_total,
    get_numeric_digit_groups,
)


def test_accessors_return_singletons(registry: prom.CollectorRegistry) -> None:
    assert get_numeric_conversions_total() is get_numeric_conversions_total()
    assert get_numeric_conversion_errors_total() is get_numeric_conversion_errors_total()
    assert get_numeric_digit_groups() is get_numeric_digit_groups()


def test_collectors_record_on_active_registry(registry: prom.CollectorRegistry) -> None:
    get_numeric_conversions_total().labels(result="success").inc()
    get_numeric_conversion_errors_total().labels(reason="INVALID_NUMERIC_SIGN").inc(2)
    get_numeric_digit_groups().observe(3)

    assert (
        registry.get_sample_value("pg_replicate_numeric_conversions_total", {"result": "success"})
        == 1.0
    )
    assert (
        registry.get_sample_value(
            "pg_replicate_numeric_conversion_errors_total", {"reason": "INVALID_NUMERIC_SIGN"}
        )
        == 2.0
    )
    assert registry.get_sample_value("pg_replicate_numeric_digit_groups_count") == 1.0


def test_registry_swap_resets_cache(monkeypatch) -> None:
    first = prom.CollectorRegistry()
    monkeypatch.setattr(prom, "REGISTRY", first)
    c1 = get_numeric_conversions_total()

    second = prom.CollectorRegistry()
    monkeypatch.setattr(prom, "REGISTRY", second)
    c2 = get_numeric_conversions_total()

    assert c1 is not c2
    c2.labels(result="error").inc()
    assert second.get_sample_value("pg_replicate_numeric_conversions_total", {"result": "error"}) == 1.0
    assert first.get_sample_value("pg_replicate_numeric_conversions_total", {"result": "error"}) is None


def test_namespaces_are_independent(registry: prom.CollectorRegistry) -> None:
    assert get_numeric_conversions_total("a") is not get_numeric_conversions_total("b")

"""Tests for the Prometheus metrics collector."""

import pytest
from prometheus_client import CollectorRegistry

from sentiment_arc.observability.metrics import MetricsCollector


@pytest.fixture
def registry():
    return CollectorRegistry()


@pytest.fixture
def metrics(registry):
    return MetricsCollector(registry=registry)


class TestMetricsCollector:
    def test_record_analysis(self, metrics, registry):
        metrics.record_analysis("contextual", "positive", latency=0.002)
        metrics.record_analysis("contextual", "positive")

        assert registry.get_sample_value(
            "sentiment_arc_analyses_total",
            {"analyzer": "contextual", "label": "positive"},
        ) == 2.0
        assert registry.get_sample_value(
            "sentiment_arc_analysis_latency_seconds_count",
            {"analyzer": "contextual"},
        ) == 1.0

    def test_record_error(self, metrics, registry):
        metrics.record_error("lexical", "RuntimeError")

        assert registry.get_sample_value(
            "sentiment_arc_analysis_errors_total",
            {"analyzer": "lexical", "error_type": "RuntimeError"},
        ) == 1.0

    def test_lexicon_sizes(self, metrics, registry, basic_lexicon):
        metrics.set_lexicon_sizes(basic_lexicon.summary())

        assert registry.get_sample_value(
            "sentiment_arc_lexicon_entries", {"table": "positive_words"}
        ) == 3.0
        assert registry.get_sample_value(
            "sentiment_arc_lexicon_entries", {"table": "idiom_patterns"}
        ) == 0.0

    def test_registries_are_independent(self, metrics):
        other_registry = CollectorRegistry()
        MetricsCollector(registry=other_registry)
        metrics.record_error("lexical", "ValueError")

        assert other_registry.get_sample_value(
            "sentiment_arc_analysis_errors_total",
            {"analyzer": "lexical", "error_type": "ValueError"},
        ) is None

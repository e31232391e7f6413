"""
Prometheus metrics for monitoring sentiment analyses.

Defines and exposes metrics for:
- Analyses performed per analyzer and resulting label
- Analysis latency
- Lexicon table sizes

Metrics are recorded by the API and CLI layers; the scoring core stays
free of side effects. They are exposed via HTTP endpoint for Prometheus
scraping.
"""

import logging
from typing import Mapping

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    start_http_server,
)

from sentiment_arc.config.settings import get_settings

logger = logging.getLogger(__name__)

# Buckets for latency histograms (in seconds)
LATENCY_BUCKETS = (0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 1.0)


class MetricsCollector:
    """
    Prometheus metrics collector for sentiment analyses.

    Usage:
        metrics = MetricsCollector()
        metrics.start_server()

        metrics.record_analysis("contextual", "positive", latency=0.003)
    """

    def __init__(self, registry: CollectorRegistry | None = None):
        """
        Initialize Prometheus metrics.

        Args:
            registry: Registry to register metrics in (defaults to the global one)
        """
        self._registry = registry or REGISTRY

        self.analyses = Counter(
            "sentiment_arc_analyses_total",
            "Total number of texts analyzed",
            ["analyzer", "label"],  # analyzer: lexical, contextual
            registry=self._registry,
        )

        self.analysis_latency = Histogram(
            "sentiment_arc_analysis_latency_seconds",
            "Time spent analyzing a single text",
            ["analyzer"],
            buckets=LATENCY_BUCKETS,
            registry=self._registry,
        )

        self.analysis_errors = Counter(
            "sentiment_arc_analysis_errors_total",
            "Total analysis requests that failed",
            ["analyzer", "error_type"],
            registry=self._registry,
        )

        self.lexicon_entries = Gauge(
            "sentiment_arc_lexicon_entries",
            "Number of entries per lexicon table",
            ["table"],
            registry=self._registry,
        )

        logger.info("Prometheus metrics initialized")

    def start_server(self, port: int | None = None) -> None:
        """
        Start Prometheus metrics HTTP server.

        Args:
            port: Port to expose metrics on (default from settings)
        """
        settings = get_settings()
        port = port or settings.metrics_port

        start_http_server(port, registry=self._registry)
        logger.info(f"Prometheus metrics server started on port {port}")

    def record_analysis(
        self,
        analyzer: str,
        label: str,
        latency: float | None = None,
    ) -> None:
        """
        Record a completed analysis.

        Args:
            analyzer: Analyzer name (lexical, contextual, compare)
            label: Resulting sentiment label
            latency: Optional latency in seconds
        """
        self.analyses.labels(analyzer=analyzer, label=label).inc()

        if latency is not None:
            self.analysis_latency.labels(analyzer=analyzer).observe(latency)

    def record_error(self, analyzer: str, error_type: str) -> None:
        """Record a failed analysis request."""
        self.analysis_errors.labels(analyzer=analyzer, error_type=error_type).inc()

    def set_lexicon_sizes(self, sizes: Mapping[str, int]) -> None:
        """
        Publish lexicon table sizes.

        Args:
            sizes: Mapping of table name to entry count (see Lexicon.summary())
        """
        for table, count in sizes.items():
            self.lexicon_entries.labels(table=table).set(count)


# Global metrics instance
_metrics: MetricsCollector | None = None


def get_metrics() -> MetricsCollector:
    """Get global metrics collector instance."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics

"""Observability layer - logging and metrics."""

from sentiment_arc.observability.logging import setup_logging
from sentiment_arc.observability.metrics import MetricsCollector, get_metrics

__all__ = ["setup_logging", "MetricsCollector", "get_metrics"]

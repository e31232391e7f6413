"""Shared fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry

from sentiment_arc.api.app import create_app
from sentiment_arc.api.auth import verify_api_key
from sentiment_arc.api.dependencies import (
    get_analyzer,
    get_evaluator,
    get_lexicon,
    get_scorer,
)
from sentiment_arc.evaluation.evaluator import SentimentEvaluator
from sentiment_arc.observability.metrics import MetricsCollector, get_metrics


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep host environment from enabling auth or metrics in tests."""
    for name in ("API_KEYS", "METRICS_ENABLED", "MAX_TEXT_LENGTH", "LEXICON_PATH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry():
    """Private Prometheus registry."""
    return CollectorRegistry()


@pytest.fixture
def metrics(registry):
    return MetricsCollector(registry=registry)


@pytest.fixture
def app(basic_lexicon, scorer, analyzer, metrics):
    """Application wired to the hand-built lexicon."""
    app = create_app()

    app.dependency_overrides[verify_api_key] = lambda: "test-key"
    app.dependency_overrides[get_lexicon] = lambda: basic_lexicon
    app.dependency_overrides[get_scorer] = lambda: scorer
    app.dependency_overrides[get_analyzer] = lambda: analyzer
    app.dependency_overrides[get_evaluator] = lambda: SentimentEvaluator(scorer, analyzer)
    app.dependency_overrides[get_metrics] = lambda: metrics

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """FastAPI TestClient with dependency overrides."""
    with TestClient(app) as c:
        yield c

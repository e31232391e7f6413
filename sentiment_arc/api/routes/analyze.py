"""
Analysis endpoints: lexical, contextual, comparison, and built-in samples.
"""

import time

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from sentiment_arc.api.auth import verify_api_key
from sentiment_arc.api.dependencies import get_analyzer, get_evaluator, get_scorer
from sentiment_arc.api.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    SampleAnalysis,
    SamplesResponse,
)
from sentiment_arc.config.settings import get_settings
from sentiment_arc.evaluation.evaluator import SentimentEvaluator
from sentiment_arc.lexical.scorer import LexicalScorer
from sentiment_arc.observability.logging import text_preview
from sentiment_arc.observability.metrics import MetricsCollector, get_metrics
from sentiment_arc.structure.analyzer import StructuralAnalyzer

router = APIRouter()
logger = structlog.get_logger(__name__)

SAMPLE_TEXTS = (
    "Ce film était vraiment excellent, j'ai adoré !",
    "Je suis très déçu de ce produit, il ne fonctionne pas correctement.",
    (
        "Bonjour aujourd'hui je me suis levé un petit peu tard j'avoue que "
        "j'ai des cernes sous les yeux et côté heureux c'est bof bof"
    ),
    (
        "Au début j'étais inquiet à propos de ce changement, mais finalement "
        "le résultat est vraiment satisfaisant."
    ),
)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing, empty, or oversized text"},
    401: {"model": ErrorResponse, "description": "Invalid API key"},
    500: {"model": ErrorResponse, "description": "Analysis error"},
}


def _require_text(body: AnalyzeRequest) -> str:
    """Return the request text or raise 400 if it is missing, empty, or too long."""
    if not body.text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No text provided",
        )

    limit = get_settings().max_text_length
    if len(body.text) > limit:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Text exceeds the maximum length of {limit} characters",
        )

    return body.text


@router.post(
    "/api/analyze",
    response_model=AnalyzeResponse,
    responses=_ERROR_RESPONSES,
    summary="Lexical sentiment of a text",
)
def analyze(
    body: AnalyzeRequest,
    api_key: str = Depends(verify_api_key),
    scorer: LexicalScorer = Depends(get_scorer),
    metrics: MetricsCollector = Depends(get_metrics),
) -> AnalyzeResponse:
    """Score a text from its words, idioms, and emojis."""
    text = _require_text(body)
    start_time = time.perf_counter()

    try:
        result = scorer.analyze(text)
    except Exception as e:
        metrics.record_error("lexical", type(e).__name__)
        raise

    latency = time.perf_counter() - start_time
    metrics.record_analysis("lexical", result.sentiment, latency=latency)
    logger.debug(
        "Text analyzed",
        analyzer="lexical",
        text=text_preview(text),
        score=result.score,
        label=result.sentiment,
        evidence=result.details.evidence_count,
    )
    return AnalyzeResponse(result=result.to_dict())


@router.post(
    "/api/analyze-contextual",
    response_model=AnalyzeResponse,
    responses=_ERROR_RESPONSES,
    summary="Contextual sentiment of a text",
)
def analyze_contextual(
    body: AnalyzeRequest,
    api_key: str = Depends(verify_api_key),
    analyzer: StructuralAnalyzer = Depends(get_analyzer),
    metrics: MetricsCollector = Depends(get_metrics),
) -> AnalyzeResponse:
    """Score a text and adjust for its structure: progression, conclusion, transitions."""
    text = _require_text(body)
    start_time = time.perf_counter()

    try:
        result = analyzer.analyze(text)
    except Exception as e:
        metrics.record_error("contextual", type(e).__name__)
        raise

    latency = time.perf_counter() - start_time
    metrics.record_analysis("contextual", result.contextual_sentiment, latency=latency)
    logger.debug(
        "Text analyzed",
        analyzer="contextual",
        text=text_preview(text),
        base_score=result.base_score,
        contextual_score=result.contextual_score,
        label=result.contextual_sentiment,
    )
    return AnalyzeResponse(result=result.to_dict())


@router.post(
    "/api/compare",
    response_model=AnalyzeResponse,
    responses=_ERROR_RESPONSES,
    summary="Compare lexical and contextual results",
)
def compare(
    body: AnalyzeRequest,
    api_key: str = Depends(verify_api_key),
    evaluator: SentimentEvaluator = Depends(get_evaluator),
    metrics: MetricsCollector = Depends(get_metrics),
) -> AnalyzeResponse:
    """Run both scorers and list the contextual factors that moved the score."""
    text = _require_text(body)
    start_time = time.perf_counter()

    try:
        comparison = evaluator.compare(text)
    except Exception as e:
        metrics.record_error("compare", type(e).__name__)
        raise

    latency = time.perf_counter() - start_time
    metrics.record_analysis(
        "compare", comparison.contextual.contextual_sentiment, latency=latency
    )
    logger.debug(
        "Text compared",
        text=text_preview(text),
        score_difference=comparison.score_difference,
        sentiment_change=comparison.sentiment_change,
        impact_factors=len(comparison.impact_factors),
    )
    return AnalyzeResponse(result=comparison.to_dict())


@router.get(
    "/test",
    response_model=SamplesResponse,
    responses={401: _ERROR_RESPONSES[401]},
    summary="Analyze the built-in sample texts",
)
def samples(
    api_key: str = Depends(verify_api_key),
    scorer: LexicalScorer = Depends(get_scorer),
    analyzer: StructuralAnalyzer = Depends(get_analyzer),
) -> SamplesResponse:
    """Both scorers over a fixed set of French sample texts."""
    return SamplesResponse(
        standard=[
            SampleAnalysis(text=text, analysis=scorer.analyze(text).to_dict())
            for text in SAMPLE_TEXTS
        ],
        contextual=[
            SampleAnalysis(text=text, analysis=analyzer.analyze(text).to_dict())
            for text in SAMPLE_TEXTS
        ],
    )

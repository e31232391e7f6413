"""Accuracy evaluation and side-by-side comparison of the two scorers."""

from sentiment_arc.evaluation.evaluator import SentimentEvaluator, load_cases
from sentiment_arc.evaluation.schemas import (
    CaseOutcome,
    Comparison,
    EvaluationReport,
    ImpactFactor,
    LabeledCase,
    Verdict,
)

__all__ = [
    "SentimentEvaluator",
    "load_cases",
    "CaseOutcome",
    "Comparison",
    "EvaluationReport",
    "ImpactFactor",
    "LabeledCase",
    "Verdict",
]

"""
Dependency injection for FastAPI endpoints.

The lexicon is loaded once and shared by reference; scorers are built
lazily on first request and reused for the life of the process.
"""

from sentiment_arc.evaluation.evaluator import SentimentEvaluator
from sentiment_arc.lexical.scorer import LexicalScorer
from sentiment_arc.lexicon.loader import load_default_lexicon
from sentiment_arc.lexicon.schemas import Lexicon
from sentiment_arc.structure.analyzer import StructuralAnalyzer

# Global instances (initialized on first request)
_scorer: LexicalScorer | None = None
_analyzer: StructuralAnalyzer | None = None
_evaluator: SentimentEvaluator | None = None


def get_lexicon() -> Lexicon:
    """Get the process-wide lexicon (configured path or bundled)."""
    return load_default_lexicon()


def get_scorer() -> LexicalScorer:
    """Get the lexical scorer singleton."""
    global _scorer

    if _scorer is None:
        _scorer = LexicalScorer(get_lexicon())

    return _scorer


def get_analyzer() -> StructuralAnalyzer:
    """Get the structural analyzer singleton, sharing the lexical scorer."""
    global _analyzer

    if _analyzer is None:
        _analyzer = StructuralAnalyzer(get_scorer(), get_lexicon())

    return _analyzer


def get_evaluator() -> SentimentEvaluator:
    """Get the evaluator singleton."""
    global _evaluator

    if _evaluator is None:
        _evaluator = SentimentEvaluator(get_scorer(), get_analyzer())

    return _evaluator


def reset_dependencies() -> None:
    """Drop cached instances so the next request rebuilds them."""
    global _scorer, _analyzer, _evaluator

    _scorer = None
    _analyzer = None
    _evaluator = None
    load_default_lexicon.cache_clear()

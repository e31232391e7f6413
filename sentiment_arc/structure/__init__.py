"""Structural analysis: segmentation, contextual signals, and their combination."""

from sentiment_arc.structure.analyzer import MIN_STRUCTURED_LENGTH, StructuralAnalyzer
from sentiment_arc.structure.schemas import (
    ConclusionFactor,
    ContextFactors,
    ContextualResult,
    IntensityFactor,
    NarrativePattern,
    ProgressionFactor,
    Segment,
    SegmentAnalysis,
    SegmentScore,
    TransitionFactor,
    TrendSummary,
)
from sentiment_arc.structure.segmentation import (
    Segmenter,
    segment_units,
    split_clauses,
    split_sentences,
)
from sentiment_arc.structure.signals import (
    SupportsLexicalScoring,
    combine_signals,
    narrative_pattern,
    summarize_trend,
)

__all__ = [
    "MIN_STRUCTURED_LENGTH",
    "StructuralAnalyzer",
    "SupportsLexicalScoring",
    "ConclusionFactor",
    "ContextFactors",
    "ContextualResult",
    "IntensityFactor",
    "NarrativePattern",
    "ProgressionFactor",
    "Segment",
    "SegmentAnalysis",
    "SegmentScore",
    "TransitionFactor",
    "TrendSummary",
    "Segmenter",
    "segment_units",
    "split_clauses",
    "split_sentences",
    "combine_signals",
    "narrative_pattern",
    "summarize_trend",
]

"""
Structural signals derived from a segmented passage.

Each function is pure given its inputs and returns one factor with its
impact on the contextual score. ``combine_signals`` sums the itemized
impacts, so the contextual score can be recomputed from the factors.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Protocol

import numpy as np

from sentiment_arc.labels import trend_label
from sentiment_arc.lexical.schemas import BaseResult
from sentiment_arc.lexicon.schemas import LexiconTuning, TransitionMarker
from sentiment_arc.structure.schemas import (
    BEGINNING,
    END,
    ConclusionFactor,
    IntensityFactor,
    NarrativePattern,
    ProgressionFactor,
    Segment,
    SegmentAnalysis,
    SegmentScore,
    TransitionFactor,
    TrendSummary,
)

# Progression and narrative bands
STRONG_PROGRESSION = 0.3
NARRATIVE_SWING = 0.25
NARRATIVE_SCALE = 0.5
CONSISTENCY_BAND = 0.1

# Transition with nothing analyzable on one side
MINIMAL_TRANSITION_RATIO = 0.05

NARRATIVE_DESCRIPTIONS = {
    "redemption": (
        "Positive evolution: the text starts negatively and moves toward "
        "a more positive conclusion"
    ),
    "downfall": (
        "Degradation: the text starts positively and moves toward a more "
        "negative conclusion"
    ),
    "consistency": "Consistency: the text keeps a relatively constant sentiment",
    "mixed": (
        "Mixed sentiment: the text varies in sentiment without a strong trend"
    ),
}


class SupportsLexicalScoring(Protocol):
    """Anything that scores a passage into a ``BaseResult``."""

    def analyze(self, text: object) -> BaseResult: ...


def score_segments(
    segments: Sequence[Segment],
    scorer: SupportsLexicalScoring,
    tuning: LexiconTuning,
) -> SegmentAnalysis:
    """
    Score each segment and compute their weighted mean.

    A segment's weight is its position weight (1.0 for unknown types)
    scaled down when it holds fewer than ``min_segment_size`` words.
    """
    scored: list[SegmentScore] = []
    weighted_sum = 0.0
    total_weight = 0.0

    for segment in segments:
        result = scorer.analyze(segment.content)
        word_count = len(segment.content.split())
        size_weight = min(1.0, word_count / tuning.min_segment_size)
        weight = tuning.position_weights.get(segment.type, 1.0) * size_weight

        scored.append(
            SegmentScore(
                type=segment.type,
                content=segment.content,
                score=result.score,
                confidence=result.confidence,
                weight=weight,
                word_count=word_count,
            )
        )
        weighted_sum += result.score * weight
        total_weight += weight

    return SegmentAnalysis(
        segments=scored,
        weighted_score=weighted_sum / total_weight if total_weight > 0 else 0.5,
        total_weight=total_weight,
    )


def progression_factor(analysis: SegmentAnalysis) -> ProgressionFactor:
    """Sentiment change from the beginning (or first) to the end (or last) segment."""
    segments = analysis.segments
    if len(segments) <= 1:
        return ProgressionFactor(progression=0.0, impact=0.0)

    first = analysis.first_of(BEGINNING) or segments[0]
    last = analysis.first_of(END) or segments[-1]
    progression = last.score - first.score

    if progression > STRONG_PROGRESSION:
        impact = progression * 0.5
    elif progression < -STRONG_PROGRESSION:
        impact = progression * 0.4
    else:
        impact = progression * 0.2

    return ProgressionFactor(
        start_score=first.score,
        end_score=last.score,
        progression=round(progression, 2),
        impact=round(impact, 2),
    )


def conclusion_factor(analysis: SegmentAnalysis) -> ConclusionFactor:
    """
    Weight of the end segment against the mean of the other segments.

    Segment scores are reused as-is: the scorer is deterministic, so
    re-scoring the same content would give the same values.
    """
    conclusion = analysis.first_of(END)
    if conclusion is None:
        return ConclusionFactor(impact=0.0)

    others = [s.score for s in analysis.segments if s.type != END]
    others_score = sum(others) / len(others) if others else 0.5
    difference = conclusion.score - others_score

    if difference > 0.3:
        impact = difference * 0.7
    elif difference > 0.1:
        impact = difference * 0.5
    elif difference < -0.3:
        impact = difference * 0.5
    elif difference < -0.1:
        impact = difference * 0.3
    else:
        impact = difference * 0.1

    return ConclusionFactor(
        score=conclusion.score,
        difference=round(difference, 2),
        impact=round(impact, 2),
    )


def intensity_factor(base: BaseResult) -> IntensityFactor:
    """Dispersion of the post-modifier word scores of the whole passage."""
    scores = np.array([w.modified_score for w in base.details.words], dtype=float)
    if scores.size < 2:
        return IntensityFactor(std_dev=0.0, range=0.0, intensity=0.0, impact=0.0)

    std_dev = float(np.std(scores))
    spread = float(scores.max() - scores.min())
    intensity = (std_dev * 2 + spread * 0.5) / 2.5

    if base.score > 0.6:
        impact = intensity * 0.15
    elif base.score < 0.4:
        impact = -intensity * 0.15
    else:
        impact = (0.5 - base.score) * intensity * 0.1

    return IntensityFactor(
        std_dev=round(std_dev, 2),
        range=round(spread, 2),
        intensity=round(intensity, 2),
        impact=round(impact, 2),
    )


def compile_markers(
    markers: Sequence[TransitionMarker],
) -> list[tuple[TransitionMarker, re.Pattern[str]]]:
    """Whole-word patterns for each marker, in configured order."""
    return [
        (marker, re.compile(rf"\b{re.escape(marker.word)}\b"))
        for marker in markers
        if marker.word
    ]


def transition_factor(
    text: str,
    scorer: SupportsLexicalScoring,
    markers: Sequence[tuple[TransitionMarker, re.Pattern[str]]],
) -> TransitionFactor:
    """
    Sentiment shift around the highest-weight transition marker present.

    The lowercased text is split on every whole-word occurrence of that
    marker; the first fragment is "before" and the rest, rejoined with the
    marker, is "after". Ties on weight go to the first configured marker.
    """
    lowered = text.lower()
    found = [(marker, pattern) for marker, pattern in markers if pattern.search(lowered)]
    if not found:
        return TransitionFactor(found=False, impact=0.0)

    marker, pattern = max(found, key=lambda item: item[0].weight)
    parts = pattern.split(lowered)
    before = parts[0]
    after = marker.word.join(parts[1:])

    if not before.strip() or not after.strip():
        return TransitionFactor(
            found=True,
            marker=marker.word,
            weight=marker.weight,
            impact=marker.weight * MINIMAL_TRANSITION_RATIO,
        )

    before_result = scorer.analyze(before)
    after_result = scorer.analyze(after)
    shift = after_result.score - before_result.score
    after_ratio = len(after) / (len(before) + len(after))
    impact = shift * marker.weight * min(1.0, after_ratio * 2)

    return TransitionFactor(
        found=True,
        marker=marker.word,
        weight=marker.weight,
        before_score=before_result.score,
        after_score=after_result.score,
        shift=round(shift, 2),
        impact=round(impact, 2),
    )


def narrative_pattern(
    progression: float, base_impacts: Mapping[str, float]
) -> NarrativePattern:
    """Classify the arc from the (rounded) progression."""
    magnitude = abs(progression)
    if progression > NARRATIVE_SWING:
        pattern = "redemption"
        impact = base_impacts["redemption"] * (magnitude / NARRATIVE_SCALE)
    elif progression < -NARRATIVE_SWING:
        pattern = "downfall"
        impact = base_impacts["downfall"] * (magnitude / NARRATIVE_SCALE)
    elif magnitude < CONSISTENCY_BAND:
        pattern = "consistency"
        impact = base_impacts["consistency"]
    else:
        pattern = "mixed"
        impact = base_impacts["mixed"]

    return NarrativePattern(
        pattern=pattern,
        impact=round(impact, 2),
        description=NARRATIVE_DESCRIPTIONS[pattern],
    )


def combine_signals(
    base_score: float,
    progression: ProgressionFactor,
    conclusion: ConclusionFactor,
    intensity: IntensityFactor,
    transitions: TransitionFactor,
    narrative: NarrativePattern,
    weights: Mapping[str, float],
) -> float:
    """
    Linear combination of the base score and factor impacts, clamped to [0, 1].

    The narrative impact is added unweighted. The ``baseline`` weight is
    accepted in configuration but not part of the sum.
    """
    score = (
        base_score
        + progression.impact * weights["progression"]
        + conclusion.impact * weights["conclusion"]
        + intensity.impact * weights["intensity"]
        + transitions.impact * weights["transitions"]
        + narrative.impact
    )
    return max(0.0, min(1.0, score))


def summarize_trend(
    analysis: SegmentAnalysis, progression: ProgressionFactor
) -> TrendSummary:
    """Trend bucket and a sentence describing the starting tone and direction."""
    if len(analysis.segments) <= 1:
        return TrendSummary(
            trend=trend_label(0.0),
            evolution=0.0,
            description="Text too short to determine an evolution.",
        )

    evolution = progression.progression
    start = progression.start_score

    if abs(evolution) < 0.05:
        description = "The sentiment remains stable throughout the text."
    elif evolution > 0:
        if start < 0.4:
            tone = "It starts negatively but improves afterwards."
        elif start < 0.55:
            tone = "It starts on a neutral tone and evolves positively."
        else:
            tone = "It is positive from the start and reinforces this sentiment."
        description = (
            f"The text moves toward a more positive sentiment "
            f"(+{evolution * 100:.0f}%). {tone}"
        )
    else:
        if start > 0.6:
            tone = "It starts positively but degrades afterwards."
        elif start > 0.45:
            tone = "It starts on a neutral tone and evolves negatively."
        else:
            tone = "It is negative from the start and reinforces this sentiment."
        description = (
            f"The text moves toward a more negative sentiment "
            f"(-{abs(evolution) * 100:.0f}%). {tone}"
        )

    return TrendSummary(
        trend=trend_label(evolution),
        evolution=round(evolution, 2),
        starting_point=round(start, 2),
        ending_point=round(progression.end_score, 2),
        description=description,
    )

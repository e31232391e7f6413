"""
Score-to-label mappings shared by the lexical scorer and structural analyzer.

Sentiment labels use nine fixed buckets over [0, 1] with a dedicated
neutral band at [0.45, 0.55). Trend labels use seven buckets over the
signed start-to-end progression.
"""

VERY_POSITIVE = "very positive"
POSITIVE = "positive"
FAIRLY_POSITIVE = "fairly positive"
SLIGHTLY_POSITIVE = "slightly positive"
NEUTRAL = "neutral"
SLIGHTLY_NEGATIVE = "slightly negative"
FAIRLY_NEGATIVE = "fairly negative"
NEGATIVE = "negative"
VERY_NEGATIVE = "very negative"

SENTIMENT_LABELS = (
    VERY_POSITIVE,
    POSITIVE,
    FAIRLY_POSITIVE,
    SLIGHTLY_POSITIVE,
    NEUTRAL,
    SLIGHTLY_NEGATIVE,
    FAIRLY_NEGATIVE,
    NEGATIVE,
    VERY_NEGATIVE,
)

# Lower bounds, checked top-down
_SENTIMENT_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (0.85, VERY_POSITIVE),
    (0.70, POSITIVE),
    (0.60, FAIRLY_POSITIVE),
    (0.55, SLIGHTLY_POSITIVE),
    (0.45, NEUTRAL),
    (0.40, SLIGHTLY_NEGATIVE),
    (0.30, FAIRLY_NEGATIVE),
    (0.15, NEGATIVE),
)

MARKED_IMPROVEMENT = "marked improvement"
IMPROVEMENT = "improvement"
SLIGHT_IMPROVEMENT = "slight improvement"
STABLE = "stable"
SLIGHT_DEGRADATION = "slight degradation"
DEGRADATION = "degradation"
MARKED_DEGRADATION = "marked degradation"


def sentiment_label(score: float) -> str:
    """Map a score in [0, 1] to one of the nine sentiment labels."""
    for lower_bound, label in _SENTIMENT_THRESHOLDS:
        if score >= lower_bound:
            return label
    return VERY_NEGATIVE


def trend_label(evolution: float) -> str:
    """Map a signed progression to a trend label."""
    if evolution > 0.2:
        return MARKED_IMPROVEMENT
    if evolution > 0.1:
        return IMPROVEMENT
    if evolution > 0.05:
        return SLIGHT_IMPROVEMENT
    if evolution < -0.2:
        return MARKED_DEGRADATION
    if evolution < -0.1:
        return DEGRADATION
    if evolution < -0.05:
        return SLIGHT_DEGRADATION
    return STABLE

"""Schema definitions for structural (contextual) analysis.

Every factor records the impact it contributes to the contextual score,
so a ``ContextualResult`` can be traced back to its base score and the
itemized impacts.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

from sentiment_arc.lexical.schemas import BaseResult, LexicalDetails

SegmentType = Literal["beginning", "middle", "end", "singleSentence"]
PatternName = Literal["redemption", "downfall", "consistency", "mixed"]

BEGINNING: SegmentType = "beginning"
MIDDLE: SegmentType = "middle"
END: SegmentType = "end"
SINGLE_SENTENCE: SegmentType = "singleSentence"


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class Segment:
    """One structural zone of a passage."""

    type: SegmentType
    content: str


@dataclass
class SegmentScore:
    """Lexical score of one segment and its weight in the segment mean."""

    type: SegmentType
    content: str
    score: float
    confidence: float
    weight: float
    word_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "content": self.content,
            "score": self.score,
            "confidence": self.confidence,
            "weight": self.weight,
            "wordCount": self.word_count,
        }


@dataclass
class SegmentAnalysis:
    """Scored segments and their weighted mean (diagnostic only)."""

    segments: list[SegmentScore] = field(default_factory=list)
    weighted_score: float = 0.5
    total_weight: float = 0.0

    def first_of(self, segment_type: SegmentType) -> SegmentScore | None:
        return next((s for s in self.segments if s.type == segment_type), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "segments": [s.to_dict() for s in self.segments],
            "weightedScore": self.weighted_score,
            "totalWeight": self.total_weight,
        }


@dataclass
class ProgressionFactor:
    """Sentiment change from the beginning segment to the end segment."""

    progression: float
    impact: float
    start_score: float | None = None
    end_score: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "startScore": self.start_score,
            "endScore": self.end_score,
            "progression": self.progression,
            "impact": self.impact,
        })


@dataclass
class ConclusionFactor:
    """How far the conclusion diverges from the rest of the passage."""

    impact: float
    score: float | None = None
    difference: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "score": self.score,
            "difference": self.difference,
            "impact": self.impact,
        })


@dataclass
class IntensityFactor:
    """Dispersion of per-word scores."""

    std_dev: float
    range: float
    intensity: float
    impact: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "stdDev": self.std_dev,
            "range": self.range,
            "intensity": self.intensity,
            "impact": self.impact,
        }


@dataclass
class TransitionFactor:
    """Sentiment shift around the strongest contrastive marker."""

    found: bool
    impact: float
    marker: str | None = None
    weight: float | None = None
    before_score: float | None = None
    after_score: float | None = None
    shift: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "found": self.found,
            "marker": self.marker,
            "weight": self.weight,
            "beforeScore": self.before_score,
            "afterScore": self.after_score,
            "shift": self.shift,
            "impact": self.impact,
        })


@dataclass
class NarrativePattern:
    """Coarse classification of the passage's sentiment arc."""

    pattern: PatternName
    impact: float
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "pattern": self.pattern,
            "impact": self.impact,
            "description": self.description,
        }


@dataclass
class ContextFactors:
    """The signals combined into the contextual score. Empty for short texts."""

    segments: SegmentAnalysis | None = None
    progression: ProgressionFactor | None = None
    conclusion: ConclusionFactor | None = None
    intensity: IntensityFactor | None = None
    transitions: TransitionFactor | None = None
    narrative: NarrativePattern | None = None

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.segments,
                self.progression,
                self.conclusion,
                self.intensity,
                self.transitions,
                self.narrative,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            name: value.to_dict()
            for name, value in (
                ("segments", self.segments),
                ("progression", self.progression),
                ("conclusion", self.conclusion),
                ("intensity", self.intensity),
                ("transitions", self.transitions),
                ("narrative", self.narrative),
            )
            if value is not None
        }


@dataclass
class TrendSummary:
    """Textual account of how sentiment evolves across the passage."""

    trend: str
    evolution: float
    description: str
    starting_point: float | None = None
    ending_point: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "trend": self.trend,
            "evolution": self.evolution,
            "startingPoint": self.starting_point,
            "endingPoint": self.ending_point,
            "description": self.description,
        })


@dataclass
class ContextualResult:
    """
    Lexical result enriched with structural signals.

    ``contextual_score`` equals ``base_score`` plus the weighted factor
    impacts (narrative at full scale), clamped to [0, 1].
    """

    score: float
    sentiment: str
    confidence: float
    details: LexicalDetails
    base_score: float
    contextual_score: float
    contextual_sentiment: str
    context_factors: ContextFactors = field(default_factory=ContextFactors)
    trends: TrendSummary | None = None

    @classmethod
    def from_base(cls, base: BaseResult) -> "ContextualResult":
        """Wrap a lexical result without structural analysis."""
        return cls(
            score=base.score,
            sentiment=base.sentiment,
            confidence=base.confidence,
            details=base.details,
            base_score=base.score,
            contextual_score=base.score,
            contextual_sentiment=base.sentiment,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "sentiment": self.sentiment,
            "confidence": self.confidence,
            "details": self.details.to_dict(),
            "baseScore": self.base_score,
            "contextualScore": self.contextual_score,
            "contextualSentiment": self.contextual_sentiment,
            "contextFactors": self.context_factors.to_dict(),
            "trends": self.trends.to_dict() if self.trends is not None else None,
        }

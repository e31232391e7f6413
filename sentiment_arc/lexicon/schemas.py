"""
Schema definitions for the sentiment lexicon.

The on-disk document uses camelCase keys (``positiveWords``,
``compounds.modifierPrefixes``...) and is validated with Pydantic models.
Validated documents are converted into an immutable ``Lexicon`` value that
the scorers share by reference for the lifetime of the process.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

Polarity = Annotated[float, Field(ge=0.0, le=1.0)]

DEFAULT_POSITION_WEIGHTS = {"beginning": 0.7, "middle": 1.0, "end": 1.5}
DEFAULT_NARRATIVE_IMPACTS = {
    "redemption": 0.2,
    "downfall": -0.15,
    "consistency": 0.05,
    "mixed": -0.05,
}
DEFAULT_SIGNAL_WEIGHTS = {
    "progression": 0.25,
    "conclusion": 0.25,
    "intensity": 0.15,
    "transitions": 0.2,
    "baseline": 0.15,
}
DEFAULT_TRANSITION_MARKERS = (("mais", 0.7), ("cependant", 0.7))


class LexicalCategory(str, Enum):
    """Word table a token resolved against."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


# ---------------------------------------------------------------------------
# On-disk document models
# ---------------------------------------------------------------------------


class _Section(BaseModel):
    """Base for document sections: camelCase aliases, nulls mean absent."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class TransitionMarkerModel(_Section):
    word: str = Field(..., min_length=1)
    weight: float


class ConfigSection(_Section):
    """The ``config`` section. Zero or missing values fall back to defaults."""

    negation_window: int | None = Field(default=None, ge=0, alias="negationWindow")
    context_window: int | None = Field(default=None, ge=0, alias="contextWindow")
    idiom_detection_radius: int | None = Field(
        default=None, ge=0, alias="idiomDetectionRadius"
    )
    segment_count: int | None = Field(default=None, ge=0, alias="segmentCount")
    min_segment_size: int | None = Field(default=None, ge=0, alias="minSegmentSize")
    clause_segmentation: bool = Field(default=True, alias="clauseSegmentation")
    position_weights: dict[str, float] | None = Field(
        default=None, alias="positionWeights"
    )
    transition_markers: list[TransitionMarkerModel] | None = Field(
        default=None, alias="transitionMarkers"
    )
    narrative_patterns: dict[str, float] | None = Field(
        default=None, alias="narrativePatterns"
    )
    analysis_weights: dict[str, float] | None = Field(
        default=None, alias="analysisWeights"
    )


class CompoundsSection(_Section):
    modifier_prefixes: dict[str, float] = Field(
        default_factory=dict, alias="modifierPrefixes"
    )
    idioms: dict[str, Polarity] = Field(default_factory=dict)
    idiom_patterns: dict[str, list[str]] = Field(
        default_factory=dict, alias="idiomPatterns"
    )
    negation_words: list[str] = Field(default_factory=list, alias="negationWords")


class LexiconDocument(_Section):
    """Full lexicon document as stored on disk. Every section is optional."""

    positive_words: dict[str, Polarity] = Field(
        default_factory=dict, alias="positiveWords"
    )
    neutral_words: dict[str, Polarity] = Field(
        default_factory=dict, alias="neutralWords"
    )
    negative_words: dict[str, Polarity] = Field(
        default_factory=dict, alias="negativeWords"
    )
    compounds: CompoundsSection = Field(default_factory=CompoundsSection)
    emoji_sentiments: dict[str, Polarity] = Field(
        default_factory=dict, alias="emojiSentiments"
    )
    config: ConfigSection = Field(default_factory=ConfigSection)


# ---------------------------------------------------------------------------
# Immutable runtime values
# ---------------------------------------------------------------------------


def _frozen(mapping: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class TransitionMarker:
    """A contrastive discourse marker and the weight of the shift around it."""

    word: str
    weight: float


@dataclass(frozen=True)
class LexiconTuning:
    """
    Engine tuning carried by the lexicon's ``config`` section.

    Attributes:
        negation_window: Tokens after a negation trigger over which it decays.
        context_window: Radius of the local-context re-scoring window.
        idiom_detection_radius: Tokens scanned backward for an idiom's verb.
        segment_count: Number of structural zones (informational).
        min_segment_size: Word count at which a segment gets full weight.
        clause_segmentation: Split a lone sentence into clauses for structure.
        position_weights: Weight per segment type.
        transition_markers: Contrastive markers, in configured order.
        narrative_patterns: Base impact per narrative pattern.
        analysis_weights: Linear coefficients per contextual signal.
    """

    negation_window: int = 5
    context_window: int = 3
    idiom_detection_radius: int = 5
    segment_count: int = 3
    min_segment_size: int = 3
    clause_segmentation: bool = True
    position_weights: Mapping[str, float] = field(
        default_factory=lambda: _frozen(DEFAULT_POSITION_WEIGHTS)
    )
    transition_markers: tuple[TransitionMarker, ...] = tuple(
        TransitionMarker(word, weight) for word, weight in DEFAULT_TRANSITION_MARKERS
    )
    narrative_patterns: Mapping[str, float] = field(
        default_factory=lambda: _frozen(DEFAULT_NARRATIVE_IMPACTS)
    )
    analysis_weights: Mapping[str, float] = field(
        default_factory=lambda: _frozen(DEFAULT_SIGNAL_WEIGHTS)
    )

    @classmethod
    def from_section(cls, section: ConfigSection) -> "LexiconTuning":
        """Build tuning from a validated ``config`` section, applying defaults."""
        defaults = cls()
        markers = defaults.transition_markers
        if section.transition_markers:
            markers = tuple(
                TransitionMarker(m.word.lower(), m.weight)
                for m in section.transition_markers
            )

        return cls(
            negation_window=section.negation_window or defaults.negation_window,
            context_window=section.context_window or defaults.context_window,
            idiom_detection_radius=(
                section.idiom_detection_radius or defaults.idiom_detection_radius
            ),
            segment_count=section.segment_count or defaults.segment_count,
            min_segment_size=section.min_segment_size or defaults.min_segment_size,
            clause_segmentation=section.clause_segmentation,
            position_weights=_frozen(
                section.position_weights or DEFAULT_POSITION_WEIGHTS
            ),
            transition_markers=markers,
            narrative_patterns=_frozen(
                {**DEFAULT_NARRATIVE_IMPACTS, **(section.narrative_patterns or {})}
            ),
            analysis_weights=_frozen(
                {**DEFAULT_SIGNAL_WEIGHTS, **(section.analysis_weights or {})}
            ),
        )


@dataclass(frozen=True)
class Lexicon:
    """
    Immutable reference data driving all scoring.

    Built once (usually by ``LexiconLoader``) and shared by reference with
    ``LexicalScorer`` and ``StructuralAnalyzer``. An empty lexicon is valid:
    every lookup misses and every score degrades to neutral.

    Example:
        >>> lexicon = Lexicon.from_document({"positiveWords": {"bon": 0.7}})
        >>> lexicon.resolve("bon")
        (<LexicalCategory.POSITIVE: 'positive'>, 0.7)
    """

    positive_words: Mapping[str, float] = field(default_factory=_frozen)
    neutral_words: Mapping[str, float] = field(default_factory=_frozen)
    negative_words: Mapping[str, float] = field(default_factory=_frozen)
    modifier_prefixes: Mapping[str, float] = field(default_factory=_frozen)
    idioms: Mapping[str, float] = field(default_factory=_frozen)
    idiom_patterns: Mapping[str, tuple[str, ...]] = field(default_factory=_frozen)
    negation_words: frozenset[str] = frozenset()
    emoji_sentiments: Mapping[str, float] = field(default_factory=_frozen)
    tuning: LexiconTuning = field(default_factory=LexiconTuning)

    @classmethod
    def from_document(cls, data: Mapping[str, Any]) -> "Lexicon":
        """
        Validate a parsed lexicon document and build a Lexicon.

        Args:
            data: Parsed JSON document (camelCase keys)

        Returns:
            Immutable Lexicon

        Raises:
            pydantic.ValidationError: If the document shape is invalid
        """
        doc = LexiconDocument.model_validate(data)
        compounds = doc.compounds
        return cls(
            positive_words=_frozen(doc.positive_words),
            neutral_words=_frozen(doc.neutral_words),
            negative_words=_frozen(doc.negative_words),
            modifier_prefixes=_frozen(compounds.modifier_prefixes),
            idioms=_frozen(compounds.idioms),
            idiom_patterns=_frozen(
                {key: tuple(forms) for key, forms in compounds.idiom_patterns.items()}
            ),
            negation_words=frozenset(compounds.negation_words),
            emoji_sentiments=_frozen(doc.emoji_sentiments),
            tuning=LexiconTuning.from_section(doc.config),
        )

    @classmethod
    def empty(cls) -> "Lexicon":
        """Lexicon with no entries and default tuning."""
        return cls()

    def resolve(self, token: str) -> tuple[LexicalCategory, float] | None:
        """
        Resolve a token against the word tables.

        Checks positive, neutral, then negative; the first table containing
        the token wins.

        Returns:
            (category, base score) or None if the token is unknown
        """
        if token in self.positive_words:
            return LexicalCategory.POSITIVE, self.positive_words[token]
        if token in self.neutral_words:
            return LexicalCategory.NEUTRAL, self.neutral_words[token]
        if token in self.negative_words:
            return LexicalCategory.NEGATIVE, self.negative_words[token]
        return None

    def polarity(self, token: str) -> float | None:
        """Base score of a token, or None if it is not in any word table."""
        resolved = self.resolve(token)
        return resolved[1] if resolved is not None else None

    @property
    def has_idiom_patterns(self) -> bool:
        """Whether inflection data for pattern-aware idiom matching is present."""
        return len(self.idiom_patterns) > 0

    @property
    def is_empty(self) -> bool:
        """Whether no table holds any entry."""
        return not any(self.summary().values())

    def summary(self) -> dict[str, int]:
        """Entry count per table."""
        return {
            "positive_words": len(self.positive_words),
            "neutral_words": len(self.neutral_words),
            "negative_words": len(self.negative_words),
            "modifier_prefixes": len(self.modifier_prefixes),
            "idioms": len(self.idioms),
            "idiom_patterns": len(self.idiom_patterns),
            "negation_words": len(self.negation_words),
            "emoji_sentiments": len(self.emoji_sentiments),
        }

"""Schema definitions for lexical scoring evidence and results.

Evidence dataclasses itemize every unit that contributed to a score.
``to_dict()`` produces the JSON wire format (camelCase keys) served by the
API and printed by the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

from sentiment_arc.labels import NEUTRAL


@dataclass
class WordEvidence:
    """
    A word resolved against the word tables.

    Attributes:
        word: Token as it appears in the normalized text.
        original_score: Polarity from the lexicon.
        modified_score: Score after negation and prefix modifiers.
        context_score: Score after local-context re-scoring (used in the average).
        negated: Whether the word fell inside an active negation scope.
    """

    word: str
    original_score: float
    modified_score: float
    context_score: float
    negated: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "originalScore": self.original_score,
            "modifiedScore": self.modified_score,
            "contextScore": self.context_score,
            "negated": self.negated,
        }


@dataclass
class ModifierEvidence:
    """
    Either a prefix modifier applied to a word, or a negation scope boundary.

    Prefix modifiers carry ``target`` and ``modification``; negation markers
    carry ``type="negation"`` and ``scope`` ("starts" or "ends").
    """

    phrase: str
    target: str | None = None
    modification: float | None = None
    type: Literal["negation"] | None = None
    scope: Literal["starts", "ends"] | None = None

    @classmethod
    def prefix(cls, phrase: str, target: str, modification: float) -> "ModifierEvidence":
        return cls(phrase=phrase, target=target, modification=modification)

    @classmethod
    def negation(cls, phrase: str, scope: Literal["starts", "ends"]) -> "ModifierEvidence":
        return cls(phrase=phrase, type="negation", scope=scope)

    @property
    def is_negation(self) -> bool:
        return self.type == "negation"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"phrase": self.phrase}
        for key in ("target", "modification", "type", "scope"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class IdiomSpan:
    """Token span (inclusive) of the keyword that located an idiom."""

    start: int
    end: int


@dataclass
class IdiomEvidence:
    """An idiom occurrence; its literal score overrides word-level scoring."""

    phrase: str
    score: float
    position: IdiomSpan | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"phrase": self.phrase, "score": self.score}
        if self.position is not None:
            data["position"] = {"start": self.position.start, "end": self.position.end}
        return data


@dataclass
class EmojiEvidence:
    """An emoji found in the raw text and scored by the lexicon."""

    emoji: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {"emoji": self.emoji, "score": self.score}


@dataclass
class LexicalDetails:
    """Itemized evidence behind a lexical score."""

    words: list[WordEvidence] = field(default_factory=list)
    modifiers: list[ModifierEvidence] = field(default_factory=list)
    idioms: list[IdiomEvidence] = field(default_factory=list)
    emojis: list[EmojiEvidence] = field(default_factory=list)

    @property
    def evidence_count(self) -> int:
        """Number of units averaged into the score (idioms, emojis, words)."""
        return len(self.words) + len(self.idioms) + len(self.emojis)

    def to_dict(self) -> dict[str, Any]:
        return {
            "words": [w.to_dict() for w in self.words],
            "modifiers": [m.to_dict() for m in self.modifiers],
            "idioms": [i.to_dict() for i in self.idioms],
            "emojis": [e.to_dict() for e in self.emojis],
        }


@dataclass
class BaseResult:
    """
    Result of lexical scoring.

    Attributes:
        score: Mean evidence score in [0, 1], rounded to two decimals.
        sentiment: Nine-bucket label.
        confidence: Heuristic certainty in [0, 1], rounded to two decimals.
        details: Itemized evidence.
    """

    score: float
    sentiment: str
    confidence: float
    details: LexicalDetails = field(default_factory=LexicalDetails)

    def __post_init__(self) -> None:
        """Validate fields after initialization."""
        if not (0.0 <= self.score <= 1.0):
            raise ValueError(f"Score must be 0-1, got {self.score}")
        if not (0.0 <= self.confidence <= 1.0):
            raise ValueError(f"Confidence must be 0-1, got {self.confidence}")

    @classmethod
    def neutral(cls) -> "BaseResult":
        """Fixed result for empty or non-string input."""
        return cls(score=0.5, sentiment=NEUTRAL, confidence=0.0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "sentiment": self.sentiment,
            "confidence": self.confidence,
            "details": self.details.to_dict(),
        }

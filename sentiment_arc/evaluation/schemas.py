"""Schema definitions for evaluating the two scorers against labeled text."""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sentiment_arc.lexical.schemas import BaseResult
from sentiment_arc.structure.schemas import ContextualResult


class LabeledCase(BaseModel):
    """A text and the sentiment label it is expected to receive."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    text: str
    expected_sentiment: str = Field(alias="expectedSentiment", min_length=1)


@dataclass
class Verdict:
    """One scorer's output for a labeled case."""

    sentiment: str
    score: float
    correct: bool

    def to_dict(self) -> dict[str, Any]:
        return {"sentiment": self.sentiment, "score": self.score, "correct": self.correct}


@dataclass
class CaseOutcome:
    text: str
    expected: str
    base: Verdict
    contextual: Verdict

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "expected": self.expected,
            "basicResult": self.base.to_dict(),
            "contextualResult": self.contextual.to_dict(),
        }


@dataclass
class EvaluationReport:
    """Label accuracy of the lexical and contextual scorers over a case set."""

    total: int = 0
    correct: int = 0
    contextual_correct: int = 0
    details: list[CaseOutcome] = field(default_factory=list)

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total > 0 else 0.0

    @property
    def contextual_accuracy(self) -> float:
        return self.contextual_correct / self.total if self.total > 0 else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "correct": self.correct,
            "contextualCorrect": self.contextual_correct,
            "accuracy": self.accuracy,
            "contextualAccuracy": self.contextual_accuracy,
            "details": [d.to_dict() for d in self.details],
        }


@dataclass
class ImpactFactor:
    """A contextual factor that moved the score noticeably."""

    name: str
    impact: float
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "impact": self.impact, "description": self.description}


@dataclass
class Comparison:
    """Side-by-side lexical and contextual results for one text."""

    base: BaseResult
    contextual: ContextualResult
    score_difference: float
    sentiment_change: bool
    description: str
    impact_factors: list[ImpactFactor] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "basicAnalysis": self.base.to_dict(),
            "contextualAnalysis": self.contextual.to_dict(),
            "comparison": {
                "scoreDifference": self.score_difference,
                "sentimentChange": self.sentiment_change,
                "description": self.description,
                "impactFactors": [f.to_dict() for f in self.impact_factors],
            },
        }

"""
Evaluation of the lexical and contextual scorers.

Runs both scorers over labeled cases to measure label accuracy, and
compares them on a single text to show which contextual factors moved
the score.
"""

from pathlib import Path

from pydantic import TypeAdapter

from sentiment_arc.evaluation.schemas import (
    CaseOutcome,
    Comparison,
    EvaluationReport,
    ImpactFactor,
    LabeledCase,
    Verdict,
)
from sentiment_arc.lexical.scorer import LexicalScorer
from sentiment_arc.observability.logging import get_logger
from sentiment_arc.structure.analyzer import StructuralAnalyzer
from sentiment_arc.structure.schemas import ContextualResult

logger = get_logger(__name__)

# Score differences below this are reported as similar
SIMILARITY_THRESHOLD = 0.05
# Factors at or below this absolute impact are not listed in a comparison
IMPACT_THRESHOLD = 0.05

_CASES_ADAPTER = TypeAdapter(list[LabeledCase])


def load_cases(path: Path) -> list[LabeledCase]:
    """
    Load labeled cases from a JSON list of ``{text, expectedSentiment}``.

    Raises:
        OSError: If the file cannot be read
        pydantic.ValidationError: If the document is not a valid case list
    """
    return _CASES_ADAPTER.validate_json(Path(path).read_bytes())


class SentimentEvaluator:
    """
    Compares a lexical scorer with a structural analyzer.

    Usage:
        evaluator = SentimentEvaluator(scorer, analyzer)
        report = evaluator.evaluate(load_cases(Path("cases.json")))
        print(report.accuracy, report.contextual_accuracy)
    """

    def __init__(self, scorer: LexicalScorer, analyzer: StructuralAnalyzer):
        self._scorer = scorer
        self._analyzer = analyzer

    def evaluate(self, cases: list[LabeledCase]) -> EvaluationReport:
        """Score every case with both scorers and count label matches."""
        report = EvaluationReport(total=len(cases))

        for case in cases:
            base = self._scorer.analyze(case.text)
            contextual = self._analyzer.analyze(case.text)

            base_verdict = Verdict(
                sentiment=base.sentiment,
                score=base.score,
                correct=base.sentiment == case.expected_sentiment,
            )
            contextual_verdict = Verdict(
                sentiment=contextual.contextual_sentiment,
                score=contextual.contextual_score,
                correct=contextual.contextual_sentiment == case.expected_sentiment,
            )
            report.correct += base_verdict.correct
            report.contextual_correct += contextual_verdict.correct
            report.details.append(
                CaseOutcome(
                    text=case.text,
                    expected=case.expected_sentiment,
                    base=base_verdict,
                    contextual=contextual_verdict,
                )
            )

        logger.info(
            "Evaluation complete",
            total=report.total,
            accuracy=report.accuracy,
            contextual_accuracy=report.contextual_accuracy,
        )
        return report

    def compare(self, text: str) -> Comparison:
        """Score a text with both scorers and explain the difference."""
        base = self._scorer.analyze(text)
        contextual = self._analyzer.analyze(text)
        difference = contextual.contextual_score - base.score

        if abs(difference) < SIMILARITY_THRESHOLD:
            description = "Both scorers give similar results for this text."
        elif difference > 0:
            description = (
                f"The contextual analysis gives a more positive score "
                f"(+{difference * 100:.1f}%)."
            )
        else:
            description = (
                f"The contextual analysis gives a more negative score "
                f"(-{abs(difference) * 100:.1f}%)."
            )

        return Comparison(
            base=base,
            contextual=contextual,
            score_difference=round(difference, 2),
            sentiment_change=base.sentiment != contextual.contextual_sentiment,
            description=description,
            impact_factors=_impact_factors(contextual),
        )


def _impact_factors(result: ContextualResult) -> list[ImpactFactor]:
    factors = result.context_factors
    found: list[ImpactFactor] = []

    if factors.progression is not None:
        found.append(
            ImpactFactor(
                name="Progression",
                impact=factors.progression.impact,
                description=(
                    f"Evolution of {factors.progression.progression * 100:.1f}% "
                    f"between beginning and end"
                ),
            )
        )
    if factors.conclusion is not None:
        found.append(
            ImpactFactor(
                name="Conclusion",
                impact=factors.conclusion.impact,
                description=f"The conclusion has an impact of {factors.conclusion.impact * 100:.1f}%",
            )
        )
    if factors.transitions is not None:
        found.append(
            ImpactFactor(
                name="Transitions",
                impact=factors.transitions.impact,
                description=f"Transitions have an impact of {factors.transitions.impact * 100:.1f}%",
            )
        )
    if factors.narrative is not None:
        found.append(
            ImpactFactor(
                name="Narrative structure",
                impact=factors.narrative.impact,
                description=factors.narrative.description,
            )
        )

    significant = [f for f in found if abs(f.impact) > IMPACT_THRESHOLD]
    return sorted(significant, key=lambda f: abs(f.impact), reverse=True)

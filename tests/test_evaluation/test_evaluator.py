"""Tests for the scorer evaluator."""

import json

import pytest
from pydantic import ValidationError

from sentiment_arc.evaluation import LabeledCase, SentimentEvaluator, load_cases

IMPROVING = "C'était mauvais. Puis ce fut moyen. Finalement tout est excellent."
DECLINING = "C'était excellent. Puis ce fut moyen. Finalement tout est mauvais."


@pytest.fixture
def evaluator(scorer, analyzer):
    return SentimentEvaluator(scorer, analyzer)


class TestLabeledCase:
    """Tests for labeled case validation."""

    def test_alias(self):
        case = LabeledCase.model_validate({"text": "Bon.", "expectedSentiment": "positive"})
        assert case.expected_sentiment == "positive"

    def test_empty_label_rejected(self):
        with pytest.raises(ValidationError):
            LabeledCase.model_validate({"text": "Bon.", "expectedSentiment": ""})

    def test_missing_label_rejected(self):
        with pytest.raises(ValidationError):
            LabeledCase.model_validate({"text": "Bon."})


class TestLoadCases:
    """Tests for reading case files."""

    def test_load(self, tmp_path):
        path = tmp_path / "cases.json"
        path.write_text(
            json.dumps([
                {"text": "Ce film est bon.", "expectedSentiment": "positive"},
                {"text": IMPROVING, "expectedSentiment": "very positive"},
            ]),
            encoding="utf-8",
        )

        cases = load_cases(path)

        assert len(cases) == 2
        assert cases[1].text == IMPROVING

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "cases.json"
        path.write_text(json.dumps({"text": "Bon."}), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_cases(path)


class TestEvaluate:
    """Tests for accuracy over labeled cases."""

    def test_counts(self, evaluator):
        cases = [
            LabeledCase(text="Ce film est bon.", expected_sentiment="positive"),
            LabeledCase(text=IMPROVING, expected_sentiment="very positive"),
        ]

        report = evaluator.evaluate(cases)

        assert report.total == 2
        assert report.correct == 1
        assert report.contextual_correct == 2
        assert report.accuracy == 0.5
        assert report.contextual_accuracy == 1.0

    def test_details(self, evaluator):
        report = evaluator.evaluate(
            [LabeledCase(text=IMPROVING, expected_sentiment="very positive")]
        )
        outcome = report.details[0]

        assert outcome.base.sentiment == "neutral"
        assert outcome.base.correct is False
        assert outcome.contextual.sentiment == "very positive"
        assert outcome.contextual.correct is True

        data = report.to_dict()
        assert set(data["details"][0]) == {"text", "expected", "basicResult", "contextualResult"}

    def test_empty(self, evaluator):
        report = evaluator.evaluate([])

        assert report.total == 0
        assert report.accuracy == 0.0
        assert report.contextual_accuracy == 0.0


class TestCompare:
    """Tests for side-by-side comparison."""

    def test_similar(self, evaluator):
        comparison = evaluator.compare("Bon.")

        assert comparison.score_difference == 0.0
        assert comparison.sentiment_change is False
        assert comparison.description == "Both scorers give similar results for this text."
        assert comparison.impact_factors == []

    def test_more_positive(self, evaluator):
        comparison = evaluator.compare(IMPROVING)

        assert comparison.score_difference > 0
        assert comparison.sentiment_change is True
        assert comparison.description.startswith(
            "The contextual analysis gives a more positive score (+"
        )

    def test_more_negative(self, evaluator):
        comparison = evaluator.compare(DECLINING)

        assert comparison.score_difference < 0
        assert comparison.description.startswith(
            "The contextual analysis gives a more negative score (-"
        )

    def test_impact_factors_sorted_and_filtered(self, evaluator):
        comparison = evaluator.compare(IMPROVING)
        names = [f.name for f in comparison.impact_factors]

        # Transitions (impact 0) is left out
        assert names == ["Conclusion", "Progression", "Narrative structure"]
        impacts = [abs(f.impact) for f in comparison.impact_factors]
        assert impacts == sorted(impacts, reverse=True)

    def test_to_dict(self, evaluator):
        data = evaluator.compare(IMPROVING).to_dict()

        assert set(data) == {"basicAnalysis", "contextualAnalysis", "comparison"}
        assert set(data["comparison"]) == {
            "scoreDifference",
            "sentimentChange",
            "description",
            "impactFactors",
        }

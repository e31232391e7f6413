"""Tests for the sentiment-arc CLI."""

import json
import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from sentiment_arc.cli import main

IMPROVING = "C'était mauvais. Puis ce fut moyen. Finalement tout est excellent."


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolate():
    """The group callback writes to os.environ; restore it afterwards."""
    saved = {name: os.environ.pop(name, None) for name in ("LEXICON_PATH", "LOG_LEVEL")}
    yield
    for name, value in saved.items():
        os.environ.pop(name, None)
        if value is not None:
            os.environ[name] = value


def _write_cases(path, cases):
    path.write_text(json.dumps(cases, ensure_ascii=False), encoding="utf-8")
    return path


class TestGroupOptions:
    def test_debug_sets_log_level(self, runner, basic_lexicon_file):
        with patch("sentiment_arc.cli.setup_logging") as mock_setup:
            result = runner.invoke(
                main, ["--debug", "--lexicon", str(basic_lexicon_file), "analyze", "bon"]
            )

        assert result.exit_code == 0
        assert os.environ["LOG_LEVEL"] == "DEBUG"
        mock_setup.assert_called_once()

    def test_lexicon_option_is_used(self, runner, basic_lexicon_file):
        result = runner.invoke(
            main, ["--lexicon", str(basic_lexicon_file), "analyze", "--json", "Ce film est bon."]
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["score"] == 0.7


class TestAnalyzeCommand:
    def test_lexical(self, runner, basic_lexicon_file):
        result = runner.invoke(
            main, ["--lexicon", str(basic_lexicon_file), "analyze", "Ce film est bon."]
        )

        assert result.exit_code == 0
        assert "Sentiment:  positive" in result.output
        assert "Score:      0.70" in result.output
        assert "Contextual:" not in result.output

    def test_contextual(self, runner, basic_lexicon_file):
        result = runner.invoke(
            main, ["--lexicon", str(basic_lexicon_file), "analyze", "--contextual", IMPROVING]
        )

        assert result.exit_code == 0
        assert "Contextual: very positive" in result.output
        assert "Narrative:  redemption" in result.output
        assert "Trend:      marked improvement" in result.output

    def test_contextual_json(self, runner, basic_lexicon_file):
        result = runner.invoke(
            main,
            ["--lexicon", str(basic_lexicon_file), "analyze", "--contextual", "--json", IMPROVING],
        )

        data = json.loads(result.output)
        assert data["baseScore"] == 0.52
        assert data["contextFactors"]["narrative"]["pattern"] == "redemption"

    def test_bundled_lexicon(self, runner):
        result = runner.invoke(main, ["analyze", "Ce film était vraiment excellent, j'ai adoré !"])

        assert result.exit_code == 0
        assert "positive" in result.output


class TestCompareCommand:
    def test_compare(self, runner, basic_lexicon_file):
        result = runner.invoke(main, ["--lexicon", str(basic_lexicon_file), "compare", IMPROVING])

        assert result.exit_code == 0
        assert "Lexical:    neutral (0.52)" in result.output
        assert "more positive score" in result.output
        assert "Conclusion: +0.40" in result.output

    def test_compare_json(self, runner, basic_lexicon_file):
        result = runner.invoke(
            main, ["--lexicon", str(basic_lexicon_file), "compare", "--json", "Bon."]
        )

        data = json.loads(result.output)
        assert data["comparison"]["scoreDifference"] == 0.0
        assert data["comparison"]["impactFactors"] == []


class TestEvaluateCommand:
    def test_report(self, runner, basic_lexicon_file, tmp_path):
        cases = _write_cases(
            tmp_path / "cases.json",
            [
                {"text": "Ce film est bon.", "expectedSentiment": "positive"},
                {"text": IMPROVING, "expectedSentiment": "very positive"},
            ],
        )

        result = runner.invoke(
            main, ["--lexicon", str(basic_lexicon_file), "evaluate", str(cases)]
        )

        assert result.exit_code == 0
        assert "Lexical:    1/2 (50%)" in result.output
        assert "Contextual: 2/2 (100%)" in result.output
        assert "expected 'very positive'" in result.output

    def test_report_json(self, runner, basic_lexicon_file, tmp_path):
        cases = _write_cases(
            tmp_path / "cases.json",
            [{"text": "Ce film est bon.", "expectedSentiment": "positive"}],
        )

        result = runner.invoke(
            main, ["--lexicon", str(basic_lexicon_file), "evaluate", "--json", str(cases)]
        )

        data = json.loads(result.output)
        assert data["total"] == 1
        assert data["accuracy"] == 1.0

    def test_invalid_cases_file(self, runner, tmp_path):
        cases = _write_cases(tmp_path / "cases.json", [{"text": "Bon.", "expectedSentiment": ""}])

        result = runner.invoke(main, ["evaluate", str(cases)])

        assert result.exit_code == 1
        assert "Invalid cases file" in result.output

    def test_missing_cases_file(self, runner, tmp_path):
        result = runner.invoke(main, ["evaluate", str(tmp_path / "nope.json")])

        assert result.exit_code != 0


class TestLexiconCommand:
    def test_valid(self, runner, basic_lexicon_file):
        result = runner.invoke(main, ["lexicon", str(basic_lexicon_file)])

        assert result.exit_code == 0
        assert "positive_words: 3" in result.output
        assert "Lexicon is valid" in result.output

    def test_bundled(self, runner):
        result = runner.invoke(main, ["lexicon"])

        assert result.exit_code == 0
        assert "Lexicon is valid" in result.output

    def test_unmatchable_emoji_keys_flagged(self, runner, tmp_path):
        path = tmp_path / "emoji.json"
        path.write_text(json.dumps({"emojiSentiments": {":)": 0.8}}), encoding="utf-8")

        result = runner.invoke(main, ["lexicon", str(path)])

        assert result.exit_code == 0
        assert "1 emoji key(s) can never match: :)" in result.output
        assert "Lexicon is valid" in result.output

    def test_malformed(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        result = runner.invoke(main, ["lexicon", str(path)])

        assert result.exit_code == 1
        assert "malformed JSON" in result.output

    def test_invalid_shape(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"positiveWords": {"bon": 3.0}}), encoding="utf-8")

        result = runner.invoke(main, ["lexicon", str(path)])

        assert result.exit_code == 1

    def test_missing(self, runner, tmp_path):
        result = runner.invoke(main, ["lexicon", str(tmp_path / "nope.json")])

        assert result.exit_code == 1


class TestServeCommand:
    def test_runs_uvicorn_factory(self, runner):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(main, ["serve", "--port", "3100"])

        assert result.exit_code == 0
        args, kwargs = mock_run.call_args
        assert args == ("sentiment_arc.api.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["port"] == 3100

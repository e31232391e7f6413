"""Tests for reading lexicon documents from disk."""

import json

import pytest

from sentiment_arc.lexicon.loader import (
    BUNDLED_LEXICON_PATH,
    LexiconLoadError,
    LexiconLoader,
    load_default_lexicon,
    unmatchable_emoji_keys,
)
from sentiment_arc.lexicon.schemas import Lexicon


@pytest.fixture
def loader():
    return LexiconLoader()


def _write(path, payload) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


class TestLexiconLoader:
    """Tests for LexiconLoader.load."""

    def test_load_valid_document(self, loader, tmp_path):
        path = tmp_path / "lexicon.json"
        _write(path, {"positiveWords": {"génial": 0.9}})

        lexicon = loader.load(path)
        assert lexicon.polarity("génial") == 0.9

    def test_missing_file_falls_back_to_empty(self, loader, tmp_path):
        """Test an unreadable file yields an empty lexicon when not strict."""
        lexicon = loader.load(tmp_path / "absent.json")
        assert lexicon.is_empty

    def test_missing_file_strict_raises(self, loader, tmp_path):
        path = tmp_path / "absent.json"
        with pytest.raises(LexiconLoadError) as exc_info:
            loader.load(path, strict=True)
        assert exc_info.value.path == path

    def test_malformed_json(self, loader, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{\"positiveWords\": ", encoding="utf-8")

        assert loader.load(path).is_empty
        with pytest.raises(LexiconLoadError, match="malformed JSON"):
            loader.load(path, strict=True)

    def test_top_level_must_be_object(self, loader, tmp_path):
        path = tmp_path / "list.json"
        _write(path, ["bon", "mauvais"])

        with pytest.raises(LexiconLoadError, match="must be an object"):
            loader.load(path, strict=True)

    def test_invalid_shape(self, loader, tmp_path):
        """Test schema violations surface as LexiconLoadError."""
        path = tmp_path / "shape.json"
        _write(path, {"negativeWords": {"nul": -0.5}})

        assert loader.load(path).is_empty
        with pytest.raises(LexiconLoadError, match="invalid shape"):
            loader.load(path, strict=True)

    def test_accepts_string_path(self, loader, tmp_path):
        path = tmp_path / "lexicon.json"
        _write(path, {"neutralWords": {"bof": 0.4}})

        assert loader.load(str(path)).polarity("bof") == 0.4


class TestBundledLexicon:
    """Tests for the French lexicon shipped with the package."""

    def test_bundled_file_is_valid(self, loader):
        lexicon = loader.load(BUNDLED_LEXICON_PATH, strict=True)

        assert not lexicon.is_empty
        assert lexicon.has_idiom_patterns
        assert "pronouns" in lexicon.idiom_patterns
        assert lexicon.polarity("excellent") > 0.5
        assert lexicon.polarity("déçu") < 0.5

    def test_bundled_transition_markers(self, loader):
        lexicon = loader.load(BUNDLED_LEXICON_PATH, strict=True)
        words = [m.word for m in lexicon.tuning.transition_markers]

        assert words[:2] == ["mais", "cependant"]
        assert "par contre" in words

    def test_bundled_emoji_keys_all_match(self, loader):
        lexicon = loader.load(BUNDLED_LEXICON_PATH, strict=True)
        assert unmatchable_emoji_keys(lexicon) == []


class TestUnmatchableEmojiKeys:
    """Tests for spotting emoji-table keys the extractor can never produce."""

    def test_single_sequences_match(self):
        lexicon = Lexicon.from_document(
            {"emojiSentiments": {"\U0001F600": 0.9, "\U0001F44D\U0001F3FD": 0.8}}
        )
        assert unmatchable_emoji_keys(lexicon) == []

    def test_text_and_runs_reported(self):
        lexicon = Lexicon.from_document(
            {"emojiSentiments": {":)": 0.8, "\U0001F600\U0001F600": 0.9, "\U0001F61E": 0.2}}
        )
        assert unmatchable_emoji_keys(lexicon) == [":)", "\U0001F600\U0001F600"]

    def test_load_keeps_unmatchable_entries(self, loader, tmp_path):
        path = tmp_path / "lexicon.json"
        _write(path, {"emojiSentiments": {":)": 0.8}})

        lexicon = loader.load(path, strict=True)

        assert dict(lexicon.emoji_sentiments) == {":)": 0.8}


class TestLoadDefaultLexicon:
    """Tests for the cached process-wide lexicon."""

    def test_uses_bundled_by_default(self, monkeypatch):
        monkeypatch.delenv("LEXICON_PATH", raising=False)
        assert load_default_lexicon().polarity("excellent") is not None

    def test_honors_lexicon_path_setting(self, monkeypatch, tmp_path):
        path = tmp_path / "custom.json"
        _write(path, {"positiveWords": {"chouette": 0.8}})
        monkeypatch.setenv("LEXICON_PATH", str(path))

        lexicon = load_default_lexicon()
        assert lexicon.polarity("chouette") == 0.8
        assert lexicon.polarity("excellent") is None

    def test_cached(self, monkeypatch):
        monkeypatch.delenv("LEXICON_PATH", raising=False)
        assert load_default_lexicon() is load_default_lexicon()

"""Pytest fixtures for sentiment-arc tests."""

import json

import pytest

from sentiment_arc.config.settings import get_settings
from sentiment_arc.lexical.scorer import LexicalScorer
from sentiment_arc.lexicon.loader import load_default_lexicon
from sentiment_arc.lexicon.schemas import Lexicon
from sentiment_arc.structure.analyzer import StructuralAnalyzer

# Small lexicon with round numbers so expected scores can be worked out by hand
BASIC_DOCUMENT = {
    "positiveWords": {"excellent": 0.9, "bon": 0.7, "heureux": 0.8},
    "neutralWords": {"correct": 0.55, "moyen": 0.45},
    "negativeWords": {"mauvais": 0.2, "triste": 0.3, "nul": 0.1},
    "compounds": {
        "modifierPrefixes": {"très": 1.5, "peu": -1, "un peu": 0.5},
        "idioms": {"avoir la pêche": 0.85},
        "negationWords": ["ne", "pas", "jamais"],
    },
    "emojiSentiments": {"😀": 0.9, "😞": 0.2},
}

# Same tables plus inflection data, which switches idiom matching to pattern-aware
PATTERN_DOCUMENT = {
    **BASIC_DOCUMENT,
    "compounds": {
        **BASIC_DOCUMENT["compounds"],
        "idioms": {
            "être aux anges": 0.95,
            "avoir la pêche": 0.85,
            "se faire avoir": 0.15,
            "faire la tête": 0.25,
            "pas terrible": 0.3,
        },
        "idiomPatterns": {
            "être": ["suis", "es", "est", "était", "étais", "été"],
            "avoir": ["ai", "as", "a", "avait", "avais", "eu"],
            "se faire": ["fait", "fais", "faisait"],
            "pronouns": ["je", "tu", "il", "elle", "on", "me", "te", "se"],
        },
    },
}


@pytest.fixture(autouse=True)
def _reset_caches():
    """Settings and the default lexicon are process-wide caches."""
    get_settings.cache_clear()
    load_default_lexicon.cache_clear()
    yield
    get_settings.cache_clear()
    load_default_lexicon.cache_clear()


@pytest.fixture
def basic_lexicon() -> Lexicon:
    """Hand-built lexicon without idiom patterns."""
    return Lexicon.from_document(BASIC_DOCUMENT)


@pytest.fixture
def pattern_lexicon() -> Lexicon:
    """Hand-built lexicon with idiom patterns."""
    return Lexicon.from_document(PATTERN_DOCUMENT)


@pytest.fixture
def scorer(basic_lexicon) -> LexicalScorer:
    return LexicalScorer(basic_lexicon)


@pytest.fixture
def analyzer(scorer, basic_lexicon) -> StructuralAnalyzer:
    return StructuralAnalyzer(scorer, basic_lexicon)


@pytest.fixture
def bundled_lexicon() -> Lexicon:
    """The French lexicon shipped with the package."""
    return load_default_lexicon()


@pytest.fixture
def basic_lexicon_file(tmp_path):
    """The hand-built lexicon written to disk."""
    path = tmp_path / "lexicon.json"
    path.write_text(json.dumps(BASIC_DOCUMENT, ensure_ascii=False), encoding="utf-8")
    return path

"""
Sentiment lexicon: word, idiom, and emoji polarity tables plus engine tuning.

Usage:
    from sentiment_arc.lexicon import LexiconLoader

    lexicon = LexiconLoader().load("my_lexicon.json")
    lexicon.resolve("excellent")  # (LexicalCategory.POSITIVE, 0.9)
"""

from sentiment_arc.lexicon.loader import (
    BUNDLED_LEXICON_PATH,
    LexiconLoadError,
    LexiconLoader,
    load_default_lexicon,
)
from sentiment_arc.lexicon.schemas import (
    LexicalCategory,
    Lexicon,
    LexiconDocument,
    LexiconTuning,
    TransitionMarker,
)

__all__ = [
    "BUNDLED_LEXICON_PATH",
    "LexicalCategory",
    "Lexicon",
    "LexiconDocument",
    "LexiconLoadError",
    "LexiconLoader",
    "LexiconTuning",
    "TransitionMarker",
    "load_default_lexicon",
]

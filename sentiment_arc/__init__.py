"""
sentiment-arc: lexicon-driven sentiment scoring with narrative-arc analysis.

Two engines share one immutable Lexicon:
- LexicalScorer scores words, idioms, and emojis with negation, modifier,
  and local-context composition.
- StructuralAnalyzer segments a passage and folds progression, conclusion,
  intensity, transition, and narrative signals into a contextual score.

Usage:
    from sentiment_arc import LexicalScorer, StructuralAnalyzer, load_default_lexicon

    lexicon = load_default_lexicon()
    scorer = LexicalScorer(lexicon)
    analyzer = StructuralAnalyzer(scorer, lexicon)
    result = analyzer.analyze("Au début j'étais inquiet, mais finalement c'est excellent.")
    print(result.contextual_sentiment, result.contextual_score)
"""

from sentiment_arc.lexical.scorer import LexicalScorer
from sentiment_arc.lexicon.loader import LexiconLoader, load_default_lexicon
from sentiment_arc.lexicon.schemas import Lexicon
from sentiment_arc.structure.analyzer import StructuralAnalyzer

__version__ = "0.1.0"

__all__ = [
    "Lexicon",
    "LexiconLoader",
    "LexicalScorer",
    "StructuralAnalyzer",
    "load_default_lexicon",
]

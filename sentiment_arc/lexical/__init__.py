"""
Lexical sentiment scoring: words, idioms, and emojis with negation,
prefix-modifier, and local-context composition.

Usage:
    from sentiment_arc.lexical import LexicalScorer

    scorer = LexicalScorer(lexicon)
    result = scorer.analyze("Je ne suis pas satisfait 😞")
    print(result.to_dict())
"""

from sentiment_arc.lexical.emoji import extract_emojis
from sentiment_arc.lexical.idioms import IdiomMatcher
from sentiment_arc.lexical.schemas import (
    BaseResult,
    EmojiEvidence,
    IdiomEvidence,
    IdiomSpan,
    LexicalDetails,
    ModifierEvidence,
    WordEvidence,
)
from sentiment_arc.lexical.scorer import (
    LexicalScorer,
    apply_context_pull,
    apply_modifier,
    apply_negation,
    normalize_text,
)

__all__ = [
    "BaseResult",
    "EmojiEvidence",
    "IdiomEvidence",
    "IdiomMatcher",
    "IdiomSpan",
    "LexicalDetails",
    "LexicalScorer",
    "ModifierEvidence",
    "WordEvidence",
    "apply_context_pull",
    "apply_modifier",
    "apply_negation",
    "extract_emojis",
    "normalize_text",
]

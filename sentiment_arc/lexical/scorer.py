"""
Lexical sentiment scorer.

Scores a passage from the lexicon alone:
- Emojis are extracted from the raw text and scored from the emoji table
- Idioms contribute their literal score
- Each resolved word passes through negation, prefix modifiers, and
  local-context re-scoring before being averaged

The scorer is a pure function of (text, lexicon): it holds no mutable
state, so one instance can serve concurrent callers.
"""

import re

import structlog

from sentiment_arc.labels import sentiment_label
from sentiment_arc.lexical.emoji import extract_emojis
from sentiment_arc.lexical.idioms import IdiomMatcher
from sentiment_arc.lexical.schemas import (
    BaseResult,
    EmojiEvidence,
    LexicalDetails,
    ModifierEvidence,
    WordEvidence,
)
from sentiment_arc.lexicon.schemas import Lexicon

logger = structlog.get_logger(__name__)

# Confidence contributed per evidence unit
IDIOM_CONFIDENCE = 0.8
EMOJI_CONFIDENCE = 0.7
WORD_CONFIDENCE = 0.5
# Per-unit confidence that counts as full certainty
CONFIDENCE_SATURATION = 0.8

# Pull of each polar context word on its neighbour
CONTEXT_INFLUENCE = 0.2
CONTEXT_REINFORCE = 0.5
CONTEXT_TEMPER = 0.3

# An inversion landing exactly on neutral is pushed to this score
INVERTED_NEUTRAL_SCORE = 0.4

_PUNCTUATION = re.compile(r"[.,!?;:(){}\[\]/\\]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lowercase, replace punctuation with spaces, collapse whitespace, trim."""
    text = _PUNCTUATION.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", text).strip()


def apply_negation(score: float, distance: int, window: int) -> float:
    """
    Blend a score toward its inversion by the remaining negation strength.

    Strength is 1 right after the trigger and fades linearly to 0 at
    ``window`` tokens away.
    """
    power = 1 - distance / window
    return 0.5 + (0.5 - score) * power


def apply_modifier(score: float, factor: float) -> float:
    """
    Apply a prefix modifier factor.

    A negative factor inverts the score; a positive factor other than 1
    stretches it away from (or, below 1, toward) 0.5.
    """
    if factor < 0:
        inverted = 1 - score
        return INVERTED_NEUTRAL_SCORE if inverted == 0.5 else inverted

    if factor != 1:
        if score > 0.5:
            return min(1.0, 0.5 + (score - 0.5) * factor)
        if score < 0.5:
            return max(0.0, 0.5 - (0.5 - score) * factor)

    return score


def apply_context_pull(score: float, pull: float) -> float:
    """
    Nudge a score by the accumulated pull of its context.

    Agreeing context reinforces the score; disagreeing context tempers it
    but never carries it across 0.5.
    """
    if pull > 0 and score > 0.5:
        return min(1.0, score + pull * CONTEXT_REINFORCE)
    if pull < 0 and score < 0.5:
        return max(0.0, score + pull * CONTEXT_REINFORCE)
    if pull > 0 and score < 0.5:
        return min(0.5, score + pull * CONTEXT_TEMPER)
    if pull < 0 and score > 0.5:
        return max(0.5, score + pull * CONTEXT_TEMPER)
    return score


class LexicalScorer:
    """
    Lexicon-driven sentiment scorer.

    Usage:
        scorer = LexicalScorer(lexicon)
        result = scorer.analyze("Ce produit est vraiment excellent !")
        print(result.sentiment, result.score, result.confidence)
        for word in result.details.words:
            print(word.word, word.original_score, word.context_score)
    """

    def __init__(self, lexicon: Lexicon):
        """
        Initialize the scorer.

        Args:
            lexicon: Immutable lexicon shared with other components
        """
        self._lexicon = lexicon
        self._tuning = lexicon.tuning
        self._idioms = IdiomMatcher(lexicon)

        logger.info(
            "LexicalScorer created",
            pattern_aware_idioms=self._idioms.pattern_aware,
            negation_window=self._tuning.negation_window,
            context_window=self._tuning.context_window,
        )

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    def analyze(self, text: object) -> BaseResult:
        """
        Score a passage.

        Args:
            text: Passage to score; non-string or empty input yields the
                neutral zero-confidence result

        Returns:
            Score, label, confidence, and itemized evidence
        """
        if not isinstance(text, str) or not text:
            return BaseResult.neutral()

        # Emojis first: normalization could break multi-codepoint sequences
        emojis = extract_emojis(text)
        normalized = normalize_text(text)
        tokens = normalized.split()

        details = LexicalDetails()
        total_score = 0.0
        confidence = 0.0

        for idiom in self._idioms.find(normalized, tokens):
            details.idioms.append(idiom)
            total_score += idiom.score
            confidence += IDIOM_CONFIDENCE

        for emoji in emojis:
            score = self._lexicon.emoji_sentiments.get(emoji)
            if score is None:
                continue
            details.emojis.append(EmojiEvidence(emoji=emoji, score=score))
            total_score += score
            confidence += EMOJI_CONFIDENCE

        for word in self._score_words(tokens, details):
            total_score += word.context_score
            confidence += WORD_CONFIDENCE

        count = details.evidence_count
        if count == 0:
            return BaseResult(score=0.5, sentiment=sentiment_label(0.5), confidence=0.0, details=details)

        final_score = total_score / count
        confidence = min(1.0, confidence / (count * CONFIDENCE_SATURATION))

        return BaseResult(
            score=round(final_score, 2),
            sentiment=sentiment_label(final_score),
            confidence=round(confidence, 2),
            details=details,
        )

    def _score_words(self, tokens: list[str], details: LexicalDetails) -> list[WordEvidence]:
        """Resolve and score each token, tracking negation scope left to right."""
        window = self._tuning.negation_window
        negation_active = False
        distance = 0

        for i, token in enumerate(tokens):
            if token in self._lexicon.negation_words:
                negation_active = True
                distance = 0
                details.modifiers.append(ModifierEvidence.negation(token, "starts"))
                continue

            if negation_active:
                distance += 1
                if distance > window:
                    negation_active = False
                    details.modifiers.append(
                        ModifierEvidence.negation(tokens[i - window], "ends")
                    )

            base_score = self._lexicon.polarity(token)
            if base_score is None:
                continue

            factor = self._prefix_factor(tokens, i, details)

            # Negation before the prefix modifier; the two do not commute
            score = base_score
            if negation_active:
                score = apply_negation(score, distance, window)
            score = apply_modifier(score, factor)

            details.words.append(
                WordEvidence(
                    word=token,
                    original_score=base_score,
                    modified_score=score,
                    context_score=self._context_score(tokens, i, score),
                    negated=negation_active,
                )
            )

        return details.words

    def _prefix_factor(self, tokens: list[str], position: int, details: LexicalDetails) -> float:
        """Look up one- and two-token modifiers before a word; two-token wins."""
        prefixes = self._lexicon.modifier_prefixes
        target = tokens[position]
        factor = 1.0

        if position > 0:
            previous = tokens[position - 1]
            if previous in prefixes:
                factor = prefixes[previous]
                details.modifiers.append(ModifierEvidence.prefix(previous, target, factor))

            if position > 1:
                phrase = f"{tokens[position - 2]} {previous}"
                if phrase in prefixes:
                    factor = prefixes[phrase]
                    details.modifiers.append(ModifierEvidence.prefix(phrase, target, factor))

        return factor

    def _context_score(self, tokens: list[str], position: int, score: float) -> float:
        """Re-score a word from the polarity of its neighbours."""
        radius = self._tuning.context_window
        start = max(0, position - radius)
        end = min(len(tokens), position + radius + 1)

        pull = 0.0
        contributing = 0
        for j in range(start, end):
            if j == position:
                continue
            polarity = self._lexicon.polarity(tokens[j])
            if polarity is None:
                continue
            pull += (polarity - 0.5) * CONTEXT_INFLUENCE
            contributing += 1

        if contributing == 0:
            return score
        return apply_context_pull(score, pull)

"""
Idiom detection over normalized text.

Two strategies, chosen by whether the lexicon carries inflection data
(``idiomPatterns``):

- Simple: substring containment of each idiom phrase in the normalized text.
- Pattern-aware: idioms rooted in a heavily inflected verb ("être", "avoir",
  "se", "faire") are indexed by the words after the root. Wherever that
  remainder occurs, the preceding ``idiomDetectionRadius`` tokens are scanned
  for a conjugated form of the root (or a pronoun followed by the verb's
  stem). Other idioms are matched on their full word sequence.
"""

from dataclasses import dataclass

from sentiment_arc.lexical.schemas import IdiomEvidence, IdiomSpan
from sentiment_arc.lexicon.schemas import Lexicon

VERB_ROOTS = ("être", "avoir", "se", "faire")

# Surface prefix of the verb expected right after a pronoun
_VERB_STEMS = {"être": "s", "avoir": "a", "faire": "fai"}
_FAIRE_STEM = "fai"

# Remainders this short are too ambiguous to index
_MIN_KEYWORD_LENGTH = 3


@dataclass(frozen=True)
class _IndexedIdiom:
    phrase: str
    score: float
    root: str | None  # None: matched without a verb scan


class IdiomMatcher:
    """
    Locates idioms in tokenized text.

    The keyword index is built once from the (immutable) lexicon; ``find``
    holds no state between calls.

    Usage:
        matcher = IdiomMatcher(lexicon)
        idioms = matcher.find("j'étais aux anges", ["j'étais", "aux", "anges"])
    """

    def __init__(self, lexicon: Lexicon):
        self._lexicon = lexicon
        self._radius = lexicon.tuning.idiom_detection_radius
        self._pronouns = frozenset(lexicon.idiom_patterns.get("pronouns", ()))
        self._keywords = self._build_index()

    @property
    def pattern_aware(self) -> bool:
        """Whether the pattern-aware strategy is in use."""
        return self._lexicon.has_idiom_patterns

    def _build_index(self) -> dict[tuple[str, ...], list[_IndexedIdiom]]:
        index: dict[tuple[str, ...], list[_IndexedIdiom]] = {}
        for phrase, score in self._lexicon.idioms.items():
            words = phrase.split()
            if not words:
                continue

            if len(words) >= 2 and words[0] in VERB_ROOTS:
                remainder = words[1:]
                if len(" ".join(remainder)) < _MIN_KEYWORD_LENGTH:
                    continue
                index.setdefault(tuple(remainder), []).append(
                    _IndexedIdiom(phrase, score, words[0])
                )
            else:
                index.setdefault(tuple(words), []).append(
                    _IndexedIdiom(phrase, score, None)
                )
        return index

    def find(self, text: str, tokens: list[str]) -> list[IdiomEvidence]:
        """
        Find idiom occurrences.

        Args:
            text: Normalized text (lowercase, punctuation stripped)
            tokens: ``text`` split on whitespace

        Returns:
            One evidence item per occurrence (simple mode: per idiom present)
        """
        if not self.pattern_aware:
            return [
                IdiomEvidence(phrase=phrase, score=score)
                for phrase, score in self._lexicon.idioms.items()
                if phrase and phrase in text
            ]

        found: list[IdiomEvidence] = []
        for i in range(len(tokens)):
            for keyword, idioms in self._keywords.items():
                if tuple(tokens[i : i + len(keyword)]) != keyword:
                    continue
                span = IdiomSpan(start=i, end=i + len(keyword) - 1)
                for idiom in idioms:
                    if idiom.root is None or self._verb_precedes(tokens, i, idiom.root):
                        found.append(
                            IdiomEvidence(phrase=idiom.phrase, score=idiom.score, position=span)
                        )
        return found

    def _inflections(self, root: str) -> tuple[str, ...]:
        patterns = self._lexicon.idiom_patterns
        if root == "se":
            return patterns.get("se faire") or patterns.get("faire") or ()
        return patterns.get(root, ())

    def _verb_precedes(self, tokens: list[str], position: int, root: str) -> bool:
        """Scan backward from ``position`` for the idiom's verb."""
        forms = self._inflections(root)
        stem = _VERB_STEMS.get(root)

        for k in range(max(0, position - self._radius), position):
            candidate = tokens[k]
            followed = tokens[k + 1] if k + 1 < position else None

            if root == "faire":
                if candidate.startswith(_FAIRE_STEM):
                    return True
            elif candidate in forms:
                return True
            elif (
                root == "se"
                and candidate in self._pronouns
                and followed is not None
                and followed.startswith(_FAIRE_STEM)
            ):
                return True

            if (
                stem is not None
                and candidate in self._pronouns
                and followed is not None
                and followed.startswith(stem)
            ):
                return True

        return False

"""
Passage segmentation into structural zones.

Sentences are split on runs of ``.``, ``!`` and ``?``. With two or more
units, the first quarter (rounded up) forms the beginning, the last
quarter (rounded up) the end, and anything left the middle. A passage
that is a single sentence can be split into clauses at ``,``, ``;`` and
``:`` instead, so that one long sentence still shows an arc.
"""

import math
import re

from sentiment_arc.structure.schemas import (
    BEGINNING,
    END,
    MIDDLE,
    SINGLE_SENTENCE,
    Segment,
)

_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
_CLAUSE_BOUNDARY = re.compile(r"[,;:]+")

EDGE_FRACTION = 0.25


def split_sentences(text: str) -> list[str]:
    """Split on sentence punctuation runs, dropping empty fragments."""
    return [s.strip() for s in _SENTENCE_BOUNDARY.split(text) if s.strip()]


def split_clauses(sentence: str) -> list[str]:
    """Split a sentence on clause punctuation, dropping empty fragments."""
    return [c.strip() for c in _CLAUSE_BOUNDARY.split(sentence) if c.strip()]


def segment_units(units: list[str]) -> list[Segment]:
    """
    Group ordered text units into beginning, middle, and end segments.

    Args:
        units: Sentences (or clauses) in reading order

    Returns:
        One ``singleSentence`` segment for fewer than two units, else
        beginning, optional middle, and end segments
    """
    if len(units) <= 1:
        return [Segment(SINGLE_SENTENCE, " ".join(units))]

    edge = math.ceil(len(units) * EDGE_FRACTION)
    middle_end = len(units) - edge

    segments = [Segment(BEGINNING, " ".join(units[:edge]))]
    if middle_end > edge:
        segments.append(Segment(MIDDLE, " ".join(units[edge:middle_end])))
    segments.append(Segment(END, " ".join(units[middle_end:])))
    return segments


class Segmenter:
    """
    Splits passages into structural segments.

    Usage:
        segmenter = Segmenter()
        segmenter.segment("Début moyen. Suite correcte. Fin excellente !")
        # [Segment("beginning", ...), Segment("middle", ...), Segment("end", ...)]
    """

    def __init__(self, clause_segmentation: bool = True):
        self._clause_segmentation = clause_segmentation

    def units(self, text: str) -> list[str]:
        """Sentences of the passage, or clauses when it is one sentence."""
        sentences = split_sentences(text)
        if self._clause_segmentation and len(sentences) == 1:
            clauses = split_clauses(sentences[0])
            if len(clauses) > 1:
                return clauses
        return sentences

    def segment(self, text: str) -> list[Segment]:
        return segment_units(self.units(text))

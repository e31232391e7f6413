"""Tests for sentence splitting and segmentation."""

import pytest

from sentiment_arc.lexicon.schemas import Lexicon, LexiconTuning
from sentiment_arc.structure.segmentation import (
    Segmenter,
    segment_units,
    split_clauses,
    split_sentences,
)


class TestSplitting:
    """Tests for sentence and clause splitting."""

    def test_split_sentences(self):
        assert split_sentences("Un. Deux !! Trois?  Quatre...") == ["Un", "Deux", "Trois", "Quatre"]

    def test_empty_fragments_dropped(self):
        assert split_sentences("...!?") == []

    def test_split_clauses(self):
        assert split_clauses("Au début, puis ensuite ; enfin: fin") == [
            "Au début",
            "puis ensuite",
            "enfin",
            "fin",
        ]


class TestSegmentUnits:
    """Tests for grouping units into beginning, middle, and end."""

    def test_single_unit(self):
        segments = segment_units(["Une seule phrase"])

        assert len(segments) == 1
        assert segments[0].type == "singleSentence"
        assert segments[0].content == "Une seule phrase"

    def test_two_units_have_no_middle(self):
        segments = segment_units(["A", "B"])
        assert [(s.type, s.content) for s in segments] == [("beginning", "A"), ("end", "B")]

    def test_three_units(self):
        segments = segment_units(["A", "B", "C"])
        assert [(s.type, s.content) for s in segments] == [
            ("beginning", "A"),
            ("middle", "B"),
            ("end", "C"),
        ]

    @pytest.mark.parametrize(
        "count,edge",
        [(4, 1), (5, 2), (8, 2), (9, 3)],
    )
    def test_edges_are_quarter_rounded_up(self, count, edge):
        units = [str(i) for i in range(count)]
        beginning, middle, end = segment_units(units)

        assert beginning.content == " ".join(units[:edge])
        assert end.content == " ".join(units[count - edge:])
        assert middle.content == " ".join(units[edge:count - edge])


class TestSegmenter:
    """Tests for the clause fallback on single-sentence passages."""

    def test_single_sentence_split_into_clauses(self):
        segments = Segmenter().segment("J'étais déçu au début, mais après quelques jours, tout va bien.")
        assert [s.type for s in segments] == ["beginning", "middle", "end"]

    def test_clause_fallback_disabled(self):
        segments = Segmenter(clause_segmentation=False).segment("Déçu au début, ravi à la fin.")
        assert [s.type for s in segments] == ["singleSentence"]

    def test_multiple_sentences_not_split_on_commas(self):
        units = Segmenter().units("Déçu, vraiment. Ravi, finalement.")
        assert units == ["Déçu, vraiment", "Ravi, finalement"]

    def test_sentence_without_clauses(self):
        segments = Segmenter().segment("Une phrase sans virgule")
        assert [s.type for s in segments] == ["singleSentence"]

    def test_sentence_without_clause_punctuation_stays_whole(self):
        segments = Segmenter().segment("Le film était mauvais mais la fin était excellente.")
        assert [s.type for s in segments] == ["singleSentence"]


class TestClauseSegmentationSetting:
    """Tests for the lexicon switch controlling the clause fallback."""

    TEXT = "Le service était lent, la nourriture excellente, le prix correct"

    def test_enabled_by_default(self):
        tuning = LexiconTuning()
        segments = Segmenter(tuning.clause_segmentation).segment(self.TEXT)

        assert tuning.clause_segmentation is True
        assert [s.type for s in segments] == ["beginning", "middle", "end"]

    def test_missing_key_keeps_default(self):
        lexicon = Lexicon.from_document({"config": {"negationWindow": 4}})
        assert lexicon.tuning.clause_segmentation is True

    def test_disabled_in_lexicon(self):
        lexicon = Lexicon.from_document({"config": {"clauseSegmentation": False}})
        segments = Segmenter(lexicon.tuning.clause_segmentation).segment(self.TEXT)

        assert [s.type for s in segments] == ["singleSentence"]
        assert segments[0].content == self.TEXT

"""
Structural sentiment analyzer.

Wraps a lexical scorer and adds signals about how sentiment evolves
across a passage: progression from beginning to end, the weight of the
conclusion, the dispersion of word scores, the shift around contrastive
transitions, and the overall narrative arc.
"""

from sentiment_arc.labels import sentiment_label
from sentiment_arc.lexicon.schemas import Lexicon, LexiconTuning
from sentiment_arc.observability.logging import get_logger
from sentiment_arc.structure.schemas import ContextFactors, ContextualResult
from sentiment_arc.structure.segmentation import Segmenter
from sentiment_arc.structure.signals import (
    SupportsLexicalScoring,
    combine_signals,
    compile_markers,
    conclusion_factor,
    intensity_factor,
    narrative_pattern,
    progression_factor,
    score_segments,
    summarize_trend,
    transition_factor,
)

logger = get_logger(__name__)

# Passages shorter than this (after trimming) get no structural analysis
MIN_STRUCTURED_LENGTH = 10


class StructuralAnalyzer:
    """
    Contextual scorer layered over a lexical scorer.

    The lexical scorer is used as a black box: once on the whole passage
    for the base result, then again on each segment and on each side of
    the strongest transition marker.

    Usage:
        lexicon = load_default_lexicon()
        analyzer = StructuralAnalyzer(LexicalScorer(lexicon), lexicon)
        result = analyzer.analyze("J'étais déçu au début, mais finalement c'est excellent.")
        print(result.contextual_score, result.context_factors.narrative.pattern)
    """

    def __init__(
        self,
        scorer: SupportsLexicalScoring,
        lexicon: Lexicon | None = None,
    ):
        """
        Initialize the analyzer.

        Args:
            scorer: Lexical scorer used for the passage and its sub-spans
            lexicon: Source of structural tuning; defaults apply when omitted
        """
        self._scorer = scorer
        self._tuning = lexicon.tuning if lexicon is not None else LexiconTuning()
        self._segmenter = Segmenter(self._tuning.clause_segmentation)
        self._markers = compile_markers(self._tuning.transition_markers)

        logger.info(
            "StructuralAnalyzer created",
            transition_markers=len(self._markers),
            clause_segmentation=self._tuning.clause_segmentation,
        )

    @property
    def tuning(self) -> LexiconTuning:
        return self._tuning

    def analyze(self, text: object) -> ContextualResult:
        """
        Score a passage with structural context.

        Args:
            text: Passage to score

        Returns:
            Base result fields plus the contextual score, its label, the
            itemized factors, and a trend summary. Short or non-string input
            returns the base result with empty factors.
        """
        base = self._scorer.analyze(text)
        if not isinstance(text, str) or len(text.strip()) < MIN_STRUCTURED_LENGTH:
            return ContextualResult.from_base(base)

        segments = score_segments(
            self._segmenter.segment(text), self._scorer, self._tuning
        )
        progression = progression_factor(segments)
        conclusion = conclusion_factor(segments)
        intensity = intensity_factor(base)
        transitions = transition_factor(text, self._scorer, self._markers)
        narrative = narrative_pattern(
            progression.progression, self._tuning.narrative_patterns
        )

        contextual_score = combine_signals(
            base.score,
            progression,
            conclusion,
            intensity,
            transitions,
            narrative,
            self._tuning.analysis_weights,
        )

        return ContextualResult(
            score=base.score,
            sentiment=base.sentiment,
            confidence=base.confidence,
            details=base.details,
            base_score=base.score,
            contextual_score=contextual_score,
            contextual_sentiment=sentiment_label(contextual_score),
            context_factors=ContextFactors(
                segments=segments,
                progression=progression,
                conclusion=conclusion,
                intensity=intensity,
                transitions=transitions,
                narrative=narrative,
            ),
            trends=summarize_trend(segments, progression),
        )

"""
Disclosure Metrics Engine

Computes the four disclosure measures for the prose of one sub-document:

1. Length              - sentence count
2. Numerical intensity - numbers that are not part of a calendar date
3. Readability         - Gunning Fog index
4. Tone                - positive minus negative word hits (Henry 2008)

Usage:
    from edgar_metrics.features.metrics import DisclosureMetricsEngine

    engine = DisclosureMetricsEngine()
    metrics = engine.compute(document.text)
    print(f"Fog: {metrics.fog_index:.2f}, tone: {metrics.tone}")
"""

import bisect
import logging
from typing import Callable, List, Optional

import textstat

from edgar_metrics.config import settings
from edgar_metrics.features.dictionaries import ToneLexicon, ToneLexiconManager
from edgar_metrics.features.tokenizer import DateSpan, TextTokenizer
from .constants import (
    DIGIT_PATTERN,
    LINE_BREAK_PATTERN,
    NUMBER_PATTERN,
    SEPARATOR_RUN_PATTERN,
)
from .schemas import DisclosureMetrics

logger = logging.getLogger(__name__)


def sanitize_text(text: str) -> str:
    """Replace line breaks with spaces and collapse whitespace/dash runs."""
    text = LINE_BREAK_PATTERN.sub(' ', text)
    return SEPARATOR_RUN_PATTERN.sub(' ', text)


def count_numbers_outside(text: str, spans: List[DateSpan]) -> int:
    """
    Count NUMBER_PATTERN matches that do not start inside any of the spans.

    Spans must be sorted and non-overlapping (as produced by a single regex scan).
    """
    starts = [span.start for span in spans]
    count = 0
    for match in NUMBER_PATTERN.finditer(text):
        i = bisect.bisect_right(starts, match.start()) - 1
        if i >= 0 and match.start() < spans[i].end:
            continue
        count += 1
    return count


class DisclosureMetricsEngine:
    """
    Disclosure metrics extractor.

    Collaborators are injectable: a tokenizer (sentences, words, date spans),
    the tone lexicon and a syllable counter. By default these are the spaCy
    TextTokenizer, the process-wide ToneLexiconManager lexicon and
    textstat.syllable_count.

    The engine keeps no per-call state, so one instance may be shared between
    threads.

    Usage:
        engine = DisclosureMetricsEngine()
        metrics = engine.compute(text)
    """

    def __init__(
        self,
        config: Optional[object] = None,
        tokenizer: Optional[TextTokenizer] = None,
        lexicon: Optional[ToneLexicon] = None,
        syllable_counter: Optional[Callable[[str], int]] = None,
    ):
        """
        Initialize the engine.

        Args:
            config: Optional DisclosureMetricsConfig. If None, loads from settings.
            tokenizer: Object with a ``tokenize(text) -> TokenizedText`` method
            lexicon: Tone lexicon. If None, the shared lexicon is loaded on first use.
            syllable_counter: Word -> syllable count. Defaults to textstat.
        """
        self.config = config or settings.disclosure_metrics
        self.tokenizer = tokenizer or TextTokenizer(self.config.tokenizer)
        self._lexicon = lexicon
        self.syllable_counter = syllable_counter or textstat.syllable_count

    @property
    def lexicon(self) -> ToneLexicon:
        if self._lexicon is None:
            self._lexicon = ToneLexiconManager.get_instance().lexicon
        return self._lexicon

    def compute(self, text: str) -> DisclosureMetrics:
        """
        Compute disclosure metrics for one text.

        Args:
            text: Plain prose of a sub-document (HTML already de-rendered)

        Returns:
            DisclosureMetrics. Text without any sentence or word yields
            zeroed metrics.

        Raises:
            ValueError: If text is not a string
        """
        if not isinstance(text, str):
            raise ValueError(f"Expected text as str, got {type(text).__name__}")

        sanitized = sanitize_text(text)
        tokens = self.tokenizer.tokenize(sanitized)
        sentences = tokens.sentences
        words = tokens.words

        if not sentences or not words:
            logger.warning(
                f"No {'sentences' if not sentences else 'words'} found in text "
                f"({len(text)} chars); returning zeroed metrics"
            )
            return self._empty_metrics()

        # 1. Length
        sentence_count = len(sentences)
        word_count = len(words)

        # 2. Numerical intensity, over the same spans: a number inside a
        # digit-bearing date belongs to that date and is not counted twice.
        digit_dates = [span for span in tokens.date_spans if DIGIT_PATTERN.search(span.text)]
        free_numbers = count_numbers_outside(sanitized, digit_dates)
        digit_count = free_numbers + len(digit_dates)
        date_count = len(digit_dates)

        # 3. Readability
        syllable_count = 0
        complex_count = 0
        for word in words:
            syllables = self.syllable_counter(word)
            syllable_count += syllables
            if syllables >= self.config.fog.complex_word_syllables:
                complex_count += 1

        fog_index = self.config.fog.weight * (
            (word_count / sentence_count) + 100 * (complex_count / word_count)
        )
        if self.config.precision is not None:
            fog_index = round(fog_index, self.config.precision)

        # 4. Tone
        lexicon = self.lexicon
        pos_words = [word for word in words if word in lexicon.positive]
        neg_words = [word for word in words if word in lexicon.negative]

        return DisclosureMetrics(
            length=sentence_count,
            numerical_intensity=digit_count - date_count,
            fog_index=fog_index,
            tone=len(pos_words) - len(neg_words),
            word_count=word_count,
            sentence_count=sentence_count,
            higher_syllable_word_count=complex_count,
            syllable_count=syllable_count,
            digit_count=digit_count,
            date_count=date_count,
            sentence_list=list(sentences),
            word_list=list(words),
            date_list=[span.text for span in digit_dates],
            pos_words_in_doc=pos_words,
            neg_words_in_doc=neg_words,
        )

    def compute_batch(self, texts: List[str]) -> List[DisclosureMetrics]:
        """
        Compute metrics for multiple texts.

        Args:
            texts: List of text strings

        Returns:
            List of DisclosureMetrics, in input order
        """
        return [self.compute(text) for text in texts]

    def _empty_metrics(self) -> DisclosureMetrics:
        """Return zeroed metrics for text without sentences or words."""
        return DisclosureMetrics(
            length=0,
            numerical_intensity=0,
            fog_index=0.0,
            tone=0,
            word_count=0,
            sentence_count=0,
            higher_syllable_word_count=0,
            syllable_count=0,
            digit_count=0,
            date_count=0,
        )

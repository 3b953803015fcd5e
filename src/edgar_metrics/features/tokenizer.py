"""
Sentence, word and date tokenization for disclosure metrics.

Sentences and words come from a blank spaCy English pipeline with the
rule-based ``sentencizer`` (no statistical model download needed). Dates come
from a regex recognizer over the same text, returning the matched spans so
that numbers inside dates can be told apart from disclosed numbers.

Usage:
    from edgar_metrics.features.tokenizer import TextTokenizer

    tokenizer = TextTokenizer()
    tokens = tokenizer.tokenize("Revenue rose 12% in fiscal 2017. Costs fell.")
    tokens.sentences   # ['Revenue rose 12% in fiscal 2017.', 'Costs fell.']
    tokens.dates       # ['fiscal 2017']
"""

import logging
import re
import string
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

import spacy
from spacy.language import Language

from edgar_metrics.config import settings

logger = logging.getLogger(__name__)


# ===========================
# Date recognizer
# ===========================

_MONTH = (
    r'(?i:January|February|March|April|May|June|July|August|September|October|'
    r'November|December|Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sept|Sep|Oct|Nov|Dec)\.?'
)
_ORDINAL = r'(?:st|nd|rd|th)?'
_FULL_MONTH = (
    r'January|February|March|April|June|July|August|September|October|November|December'
)
_WEEKDAY = r'Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday'

# Alternatives are tried left to right, longest forms first, so a match never
# overlaps another one.
DATE_PATTERN = re.compile(
    r'\b(?:'
    rf'{_MONTH}\s+\d{{1,2}}{_ORDINAL},?\s+\d{{4}}'            # March 1, 2017
    rf'|\d{{1,2}}{_ORDINAL}\s+(?:of\s+)?{_MONTH},?\s+\d{{4}}'  # 1 March 2017
    r'|\d{4}-\d{1,2}-\d{1,2}'                                  # 2017-03-01
    r'|\d{1,2}/\d{1,2}/\d{2,4}'                                # 03/01/2017
    r'|(?i:fiscal)\s+(?:(?i:year)\s+)?\d{4}'                   # fiscal (year) 2017
    rf'|{_MONTH},?\s+\d{{4}}'                                  # March 2017
    rf'|{_MONTH}\s+\d{{1,2}}{_ORDINAL}\b'                      # March 1
    rf'|(?:{_FULL_MONTH}|{_WEEKDAY})\b'                        # December, Monday
    r')'
)

# Possessive clitics split off by the tokenizer are not words
_CLITICS = frozenset({"'s", "’s", "'", "’"})

_EDGE_PUNCTUATION = string.punctuation + "‘’“”"


@dataclass(frozen=True)
class DateSpan:
    """Date-like span found in a text."""
    start: int
    end: int
    text: str


@dataclass(frozen=True)
class TokenizedText:
    """Result of a single tokenization pass."""
    sentences: List[str] = field(default_factory=list)
    words: List[str] = field(default_factory=list)
    date_spans: List[DateSpan] = field(default_factory=list)

    @property
    def dates(self) -> List[str]:
        return [span.text for span in self.date_spans]


@lru_cache(maxsize=4)
def _load_pipeline(language: str, max_length: int) -> Language:
    """Build (once per process) a blank spaCy pipeline with a sentencizer."""
    nlp = spacy.blank(language)
    nlp.add_pipe("sentencizer")
    nlp.max_length = max_length
    logger.info(f"Initialized spaCy '{language}' tokenizer with sentencizer")
    return nlp


def normalize_word(token_text: str) -> str:
    """Lowercase and trim surrounding punctuation: ``"Growth,"`` -> ``"growth"``."""
    return token_text.lower().strip(_EDGE_PUNCTUATION)


class TextTokenizer:
    """
    Tokenizer collaborator for DisclosureMetricsEngine.

    Provides sentences, normalized words and date-like spans. Instances only
    hold configuration; the spaCy pipeline is shared and read-only.
    """

    def __init__(self, config: Optional[object] = None):
        """
        Args:
            config: Optional TokenizerConfig. If None, loads from settings.
        """
        self.config = config or settings.disclosure_metrics.tokenizer

    @property
    def nlp(self) -> Language:
        return _load_pipeline(self.config.spacy_language, self.config.max_text_length)

    def tokenize(self, text: str) -> TokenizedText:
        """Sentences, words and dates from one pipeline pass."""
        if not text or not text.strip():
            return TokenizedText()

        doc = self.nlp(text)
        sentences = [sent.text.strip() for sent in doc.sents]
        words = [
            normalize_word(token.text)
            for token in doc
            if not (token.is_punct or token.is_space or token.is_currency)
            and token.lower_ not in _CLITICS
        ]
        return TokenizedText(
            sentences=[s for s in sentences if s],
            words=[w for w in words if w],
            date_spans=self.date_spans(text),
        )

    def sentences(self, text: str) -> List[str]:
        return self.tokenize(text).sentences

    def words(self, text: str) -> List[str]:
        return self.tokenize(text).words

    def dates(self, text: str) -> List[str]:
        """Date-like substrings, as found, in text order."""
        return [span.text for span in self.date_spans(text)]

    def date_spans(self, text: str) -> List[DateSpan]:
        if not text:
            return []
        return [
            DateSpan(start=m.start(), end=m.end(), text=m.group(0))
            for m in DATE_PATTERN.finditer(text)
            if m.group(0).strip()
        ]

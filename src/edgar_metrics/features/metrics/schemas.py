"""
Data structures for disclosure metrics.

One DisclosureMetrics is computed per sub-document text. Besides the four
headline measures it carries the supporting counts and token lists, so every
number can be audited against the words it was computed from.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .constants import DISCLOSURE_METRICS_VERSION


class DisclosureMetrics(BaseModel):
    """
    Length, numerical intensity, readability and tone of one text.

    Length is the sentence count; numerical intensity counts disclosed numbers
    that are not calendar dates; fog_index is the Gunning Fog grade level; tone
    is positive minus negative lexicon hits.
    """
    model_config = ConfigDict(frozen=True)

    # ===========================
    # Headline Metrics
    # ===========================
    length: int = Field(..., ge=0, description="Number of sentences")
    numerical_intensity: int = Field(
        ...,
        ge=0,
        description="Numbers outside digit-bearing dates. "
                    "Equals digit_count - date_count."
    )
    fog_index: float = Field(
        ...,
        ge=0,
        description="Gunning Fog Index. "
                    "Formula: 0.4 × [(words/sentences) + 100 × (complex_words/words)]"
    )
    tone: int = Field(..., description="Positive word hits minus negative word hits")

    # ===========================
    # Supporting Counts
    # ===========================
    word_count: int = Field(..., ge=0)
    sentence_count: int = Field(..., ge=0)
    higher_syllable_word_count: int = Field(
        ..., ge=0, description="Words with 3+ syllables (complex words)"
    )
    syllable_count: int = Field(..., ge=0)
    digit_count: int = Field(
        ..., ge=0, description="Numbers outside dates plus digit-bearing dates"
    )
    date_count: int = Field(..., ge=0, description="Date-like spans containing a digit")

    # ===========================
    # Audit Lists
    # ===========================
    sentence_list: List[str] = Field(default_factory=list)
    word_list: List[str] = Field(default_factory=list)
    date_list: List[str] = Field(default_factory=list)
    pos_words_in_doc: List[str] = Field(default_factory=list)
    neg_words_in_doc: List[str] = Field(default_factory=list)

    metrics_version: str = Field(
        default=DISCLOSURE_METRICS_VERSION,
        description="Version of the metric definitions that produced these values"
    )

    @property
    def positive_word_count(self) -> int:
        return len(self.pos_words_in_doc)

    @property
    def negative_word_count(self) -> int:
        return len(self.neg_words_in_doc)

    def summary(self) -> Dict[str, Any]:
        """Headline metrics and counts, without the token lists."""
        return self.model_dump(
            exclude={"sentence_list", "word_list", "date_list", "pos_words_in_doc", "neg_words_in_doc"}
        )

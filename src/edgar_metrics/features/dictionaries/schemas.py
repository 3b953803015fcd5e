"""
Data structures for the tone lexicon.

The lexicon is process-wide read-only reference data: both word lists are
frozensets inside a frozen model, so nothing can mutate them after load.
"""

from datetime import datetime
from typing import FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .constants import TONE_CATEGORIES, TONE_LEXICON_CITATION, TONE_LEXICON_VERSION


class ToneLexiconMetadata(BaseModel):
    """Where and when the word lists were loaded from."""
    model_config = ConfigDict(frozen=True)

    version: str = Field(default=TONE_LEXICON_VERSION)
    citation: str = Field(default=TONE_LEXICON_CITATION)
    positive_count: int = Field(..., ge=0)
    negative_count: int = Field(..., ge=0)
    source_files: Tuple[str, ...] = Field(default=(), description="Paths of the word lists")
    load_time_seconds: float = Field(default=0.0, ge=0)
    loaded_at: datetime = Field(default_factory=datetime.now)
    categories: Tuple[str, ...] = Field(default=TONE_CATEGORIES)

    def get_summary(self) -> str:
        """Return human-readable summary of the lexicon."""
        return (
            f"Tone lexicon {self.version}: "
            f"{self.positive_count} positive, {self.negative_count} negative "
            f"(loaded in {self.load_time_seconds:.3f}s)"
        )


class ToneLexicon(BaseModel):
    """Positive and negative tone words, lower-cased."""
    model_config = ConfigDict(frozen=True)

    positive: FrozenSet[str]
    negative: FrozenSet[str]
    metadata: ToneLexiconMetadata

    @classmethod
    def from_words(cls, positive, negative, **metadata) -> "ToneLexicon":
        """Build a lexicon from in-memory word iterables (normalized here)."""
        pos = normalize_words(positive)
        neg = normalize_words(negative)
        return cls(
            positive=pos,
            negative=neg,
            metadata=ToneLexiconMetadata(
                positive_count=len(pos),
                negative_count=len(neg),
                **metadata,
            ),
        )

    def is_positive(self, word: str) -> bool:
        return word in self.positive

    def is_negative(self, word: str) -> bool:
        return word in self.negative

    def __len__(self) -> int:
        return len(self.positive) + len(self.negative)


def normalize_words(words) -> FrozenSet[str]:
    """Lower-case, trim and drop blank entries."""
    return frozenset(w.strip().lower() for w in words if w and w.strip())

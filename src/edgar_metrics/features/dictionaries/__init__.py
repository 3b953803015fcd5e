"""
Tone Lexicon Management

Loads and caches the positive/negative tone word lists (Henry 2008) used for
the tone metric.

Key components:
- constants: Immutable metadata (version, citation, categories)
- schemas: Frozen Pydantic models for the loaded lexicon
- tone_lexicon: Singleton manager and word list loader

Usage:
    from edgar_metrics.features.dictionaries import ToneLexiconManager

    lexicon = ToneLexiconManager.get_instance().lexicon
    if lexicon.is_negative("decline"):
        print("'decline' is a negative word")
"""

from .constants import (
    TONE_CATEGORIES,
    TONE_LEXICON_CITATION,
    TONE_LEXICON_VERSION,
)
from .schemas import ToneLexicon, ToneLexiconMetadata, normalize_words
from .tone_lexicon import ToneLexiconManager, load_word_list

__all__ = [
    # Constants
    "TONE_CATEGORIES",
    "TONE_LEXICON_CITATION",
    "TONE_LEXICON_VERSION",
    # Schemas
    "ToneLexicon",
    "ToneLexiconMetadata",
    "normalize_words",
    # Manager
    "ToneLexiconManager",
    "load_word_list",
]

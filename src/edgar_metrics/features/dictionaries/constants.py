"""
Immutable constants for the tone word lists.

These values define WHAT the lexicon is (source, citation, categories). For
where the files live at runtime, see edgar_metrics.config.paths.
"""

from typing import Final

# ===========================
# Lexicon Metadata
# ===========================

TONE_LEXICON_VERSION: Final[str] = "henry-2008"
"""Version tag of the bundled word lists."""

TONE_LEXICON_CITATION: Final[str] = (
    "Henry, E. (2008). Are Investors Influenced by How Earnings Press Releases "
    "Are Written? Journal of Business Communication, 45(4), 363-407."
)
"""Academic citation for the word lists."""

# ===========================
# Categories (Schema)
# ===========================

TONE_CATEGORIES: Final[tuple[str, ...]] = ("Positive", "Negative")
"""Tone = Positive hits - Negative hits."""

TONE_LEXICON_ENCODING: Final[str] = "utf-8"

"""
Tone Lexicon Manager

Loads the positive/negative tone word lists once per process and hands out
the same immutable ToneLexicon afterwards (singleton pattern).

Word list format: one term per line, no further structure. Each line is
lower-cased and trimmed; blank lines are dropped.
"""

import logging
import time
from pathlib import Path
from typing import FrozenSet, Optional

from .constants import TONE_LEXICON_ENCODING
from .schemas import ToneLexicon, normalize_words

logger = logging.getLogger(__name__)


def load_word_list(path: Path) -> FrozenSet[str]:
    """
    Read one newline-delimited word list.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file holds no words
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found at {path}")

    words = normalize_words(path.read_text(encoding=TONE_LEXICON_ENCODING).splitlines())
    if not words:
        raise ValueError(f"Word list {path} is empty")
    return words


class ToneLexiconManager:
    """
    Singleton manager for the tone lexicon.

    Usage:
        manager = ToneLexiconManager.get_instance()
        lexicon = manager.lexicon
        lexicon.is_positive("growth")
    """

    _instance: Optional['ToneLexiconManager'] = None

    def __init__(
        self,
        positive_path: Optional[Path] = None,
        negative_path: Optional[Path] = None,
    ):
        """
        Args:
            positive_path: Positive word list. If None, taken from settings.
            negative_path: Negative word list. If None, taken from settings.
        """
        self._positive_path = positive_path
        self._negative_path = negative_path
        self._lexicon: Optional[ToneLexicon] = None

    @classmethod
    def get_instance(
        cls,
        positive_path: Optional[Path] = None,
        negative_path: Optional[Path] = None,
    ) -> 'ToneLexiconManager':
        """
        Get singleton instance of the manager.

        Paths are only used on the first call.
        """
        if cls._instance is None:
            cls._instance = cls(positive_path, negative_path)
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Reset singleton instance (useful for testing)."""
        cls._instance = None

    def load_lexicon(self, force_reload: bool = False) -> ToneLexicon:
        """
        Load both word lists.

        Args:
            force_reload: If True, reload even if already loaded

        Returns:
            Loaded ToneLexicon

        Raises:
            FileNotFoundError: If a word list doesn't exist
            ValueError: If a word list is empty
        """
        if self._lexicon is not None and not force_reload:
            logger.debug("Tone lexicon already loaded, returning cached version")
            return self._lexicon

        if self._positive_path is None or self._negative_path is None:
            # Import here to avoid circular dependency
            from edgar_metrics.config import settings
            self._positive_path = self._positive_path or settings.paths.positive_lexicon
            self._negative_path = self._negative_path or settings.paths.negative_lexicon

        start_time = time.time()
        positive = load_word_list(self._positive_path)
        negative = load_word_list(self._negative_path)

        self._lexicon = ToneLexicon.from_words(
            positive,
            negative,
            source_files=(str(self._positive_path), str(self._negative_path)),
            load_time_seconds=time.time() - start_time,
        )
        logger.info(f"Loaded {self._lexicon.metadata.get_summary()}")

        overlap = positive & negative
        if overlap:
            logger.warning(f"Words listed as both positive and negative: {sorted(overlap)}")

        return self._lexicon

    @property
    def lexicon(self) -> ToneLexicon:
        """Get loaded lexicon, loading if necessary."""
        if self._lexicon is None:
            self.load_lexicon()
        return self._lexicon

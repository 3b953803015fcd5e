"""Project path configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# YAML defaults and lexicons ship inside the package so an installed wheel
# finds them without a source checkout
_PACKAGE_DIR = Path(__file__).parent.parent


class PathsConfig(BaseSettings):
    """
    Project path configuration.
    Both locations default to directories bundled with the package.
    """
    model_config = SettingsConfigDict(
        env_prefix='PATHS_',
        case_sensitive=False
    )

    configs_dir: Path = Field(default_factory=lambda: _PACKAGE_DIR / "configs")

    dictionary_dir: Path = Field(
        default_factory=lambda: _PACKAGE_DIR / "features" / "dictionaries" / "data"
    )
    positive_lexicon_filename: str = "henry_positive.txt"
    negative_lexicon_filename: str = "henry_negative.txt"

    @property
    def positive_lexicon(self) -> Path:
        """Newline-delimited positive tone word list."""
        return self.dictionary_dir / self.positive_lexicon_filename

    @property
    def negative_lexicon(self) -> Path:
        """Newline-delimited negative tone word list."""
        return self.dictionary_dir / self.negative_lexicon_filename

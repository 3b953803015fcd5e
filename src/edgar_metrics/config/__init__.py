"""
EDGAR Disclosure Metrics Configuration Package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from configs/config.yaml and configs/features/*.yaml
3. Automatically override with environment variables from .env or CI/CD secrets

Usage:
    from edgar_metrics.config import settings

    # Lexicon locations
    positive = settings.paths.positive_lexicon

    # Parser settings
    encoding = settings.submission_parser.encoding

    # Metrics settings
    threshold = settings.disclosure_metrics.fog.complex_word_syllables
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from edgar_metrics.config.paths import PathsConfig
from edgar_metrics.config.submission_parser import SubmissionParserConfig
from edgar_metrics.config.features import DisclosureMetricsConfig


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from edgar_metrics.config import settings

        settings.paths.dictionary_dir
        settings.submission_parser.decode_errors
        settings.disclosure_metrics.fog.weight
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    paths: PathsConfig = Field(default_factory=PathsConfig)
    submission_parser: SubmissionParserConfig = Field(default_factory=SubmissionParserConfig)
    disclosure_metrics: DisclosureMetricsConfig = Field(default_factory=DisclosureMetricsConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


__all__ = [
    "settings",
    "Settings",
    "PathsConfig",
    "SubmissionParserConfig",
    "DisclosureMetricsConfig",
]

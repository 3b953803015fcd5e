"""Disclosure metrics (length, numerical intensity, Fog, tone) configuration."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from edgar_metrics.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("features/disclosure_metrics.yaml", "disclosure_metrics")


class TokenizerConfig(BaseSettings):
    """Sentence/word tokenizer settings."""
    model_config = SettingsConfigDict(
        env_prefix='DISCLOSURE_METRICS_TOKENIZER_',
        case_sensitive=False
    )

    spacy_language: str = Field(
        default_factory=lambda: _get_config().get('tokenizer', {}).get('spacy_language', 'en')
    )
    max_text_length: int = Field(
        default_factory=lambda: _get_config().get('tokenizer', {}).get('max_text_length', 5_000_000)
    )


class ReadabilityFormulaConfig(BaseSettings):
    """Gunning Fog formula settings."""
    model_config = SettingsConfigDict(
        env_prefix='DISCLOSURE_METRICS_FOG_',
        case_sensitive=False
    )

    complex_word_syllables: int = Field(
        default_factory=lambda: _get_config().get('fog', {}).get('complex_word_syllables', 3)
    )
    weight: float = Field(
        default_factory=lambda: _get_config().get('fog', {}).get('weight', 0.4)
    )


class DisclosureMetricsOutputConfig(BaseSettings):
    """Output format settings."""
    model_config = SettingsConfigDict(
        env_prefix='DISCLOSURE_METRICS_OUT_',
        case_sensitive=False
    )

    # None keeps the Fog index unrounded
    precision: Optional[int] = Field(
        default_factory=lambda: _get_config().get('output', {}).get('precision')
    )


class DisclosureMetricsConfig(BaseSettings):
    """
    Disclosure metrics configuration.
    Loads from configs/features/disclosure_metrics.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='DISCLOSURE_METRICS_',
        env_nested_delimiter='__',
        case_sensitive=False
    )

    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    fog: ReadabilityFormulaConfig = Field(default_factory=ReadabilityFormulaConfig)
    output: DisclosureMetricsOutputConfig = Field(default_factory=DisclosureMetricsOutputConfig)

    @property
    def precision(self) -> Optional[int]:
        """Shortcut for output precision."""
        return self.output.precision

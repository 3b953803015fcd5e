"""EDGAR submission parser configuration."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from edgar_metrics.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml").get("submission_parser", {})


class SubmissionParserConfig(BaseSettings):
    """Submission parser configuration settings."""
    model_config = SettingsConfigDict(
        env_prefix='SUBMISSION_PARSER_',
        case_sensitive=False
    )

    encoding: str = Field(
        default_factory=lambda: _get_config().get('encoding', "utf-8")
    )
    decode_errors: Literal["strict", "replace", "ignore"] = Field(
        default_factory=lambda: _get_config().get('decode_errors', "strict")
    )
    strip_tables: bool = Field(
        default_factory=lambda: _get_config().get('strip_tables', True)
    )

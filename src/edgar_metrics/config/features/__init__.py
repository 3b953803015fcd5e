"""Feature extraction configuration modules."""

from edgar_metrics.config.features.disclosure_metrics import (
    DisclosureMetricsConfig,
    TokenizerConfig,
    ReadabilityFormulaConfig,
    DisclosureMetricsOutputConfig,
)

__all__ = [
    "DisclosureMetricsConfig",
    "TokenizerConfig",
    "ReadabilityFormulaConfig",
    "DisclosureMetricsOutputConfig",
]

"""
Disclosure Metrics

Length, numerical intensity, Gunning Fog readability and Henry (2008) tone
for the prose of one EDGAR sub-document.

Usage:
    from edgar_metrics.features.metrics import DisclosureMetricsEngine

    engine = DisclosureMetricsEngine()
    metrics = engine.compute(text)
"""

from .analyzer import DisclosureMetricsEngine, count_numbers_outside, sanitize_text
from .constants import DISCLOSURE_METRICS_VERSION
from .schemas import DisclosureMetrics

__all__ = [
    "DisclosureMetricsEngine",
    "DisclosureMetrics",
    "count_numbers_outside",
    "sanitize_text",
    "DISCLOSURE_METRICS_VERSION",
]

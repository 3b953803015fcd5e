"""
Feature Engineering Module

Text measures computed from the prose of EDGAR sub-documents.

Available features:
- Disclosure metrics: length, numerical intensity, Gunning Fog, tone
- Tone lexicon (Henry 2008 positive/negative word lists)
- Sentence, word and date tokenization (spaCy sentencizer + date recognizer)

Usage:
    from edgar_metrics.features import DisclosureMetricsEngine

    engine = DisclosureMetricsEngine()
    metrics = engine.compute(document.text)
"""

# Lazy imports to avoid circular dependency
# Use explicit imports: from edgar_metrics.features.metrics import DisclosureMetricsEngine

__all__ = [
    # Metrics
    "DisclosureMetricsEngine",
    "DisclosureMetrics",
    # Lexicon
    "ToneLexicon",
    "ToneLexiconManager",
    # Tokenizer
    "TextTokenizer",
    "TokenizedText",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    # Metrics
    if name == "DisclosureMetricsEngine":
        from .metrics import DisclosureMetricsEngine
        return DisclosureMetricsEngine
    elif name == "DisclosureMetrics":
        from .metrics import DisclosureMetrics
        return DisclosureMetrics
    # Lexicon
    elif name == "ToneLexicon":
        from .dictionaries import ToneLexicon
        return ToneLexicon
    elif name == "ToneLexiconManager":
        from .dictionaries import ToneLexiconManager
        return ToneLexiconManager
    # Tokenizer
    elif name == "TextTokenizer":
        from .tokenizer import TextTokenizer
        return TextTokenizer
    elif name == "TokenizedText":
        from .tokenizer import TokenizedText
        return TokenizedText
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

"""
EDGAR submission parsing and disclosure metrics.

Subpackages:
- config: pydantic-settings configuration backed by configs/*.yaml
- preprocessing: SGML submission parser (header + typed sub-documents)
- features: disclosure metrics engine, tone lexicon, tokenizer

Usage:
    from edgar_metrics.pipeline import analyze_submission

    analysis = analyze_submission(raw_text)
    print(analysis.to_record())
"""

__version__ = "0.1.0"

"""
Feature tests for EDGAR disclosure metrics.

This package contains tests for:
- Sentence/word/date tokenization (spaCy sentencizer + date recognizer)
- Tone lexicon loading (Henry 2008 word lists)
- Disclosure metrics (length, numerical intensity, Fog index, tone)

All inputs are synthetic; no filing data required.
"""

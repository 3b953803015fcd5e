"""
EDGAR Disclosure Metrics - Test Suite

Test modules organized by functionality:
- unit/preprocessing/ - Tag grammar, content de-rendering, submission parser, models
- features/ - Tokenizer, tone lexicon, disclosure metrics engine
- unit/ - Configuration, submission analysis pipeline, CLI
"""

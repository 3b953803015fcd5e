"""Preprocessing modules for EDGAR submissions

Pipeline Flow:
    1. Decode  → SubmissionParser.decode → submission text
    2. Header  → tag extraction (single-line / multi-line / key-value) → FilingHeader
    3. Split   → <DOCUMENT> blocks → SubDocument (HTML | XML | PLAIN)

Quick Start:
    >>> from edgar_metrics.preprocessing import SubmissionParser
    >>> submission = SubmissionParser().parse(raw_text)
    >>> print(submission.header.company.name)
    >>> print(submission.primary_document.classification)
"""

from .parser import (
    SubmissionParser,
    SubmissionDecodeError,
    parse_submission_from_path,
)
from .models import (
    CompanyInfo,
    ContentClassification,
    FilingDetails,
    FilingHeader,
    HtmlContent,
    ParsedSubmission,
    PlainContent,
    SubDocument,
    XmlContent,
)

__all__ = [
    # Parser
    'SubmissionParser',
    'SubmissionDecodeError',
    'parse_submission_from_path',
    # Models
    'CompanyInfo',
    'ContentClassification',
    'FilingDetails',
    'FilingHeader',
    'HtmlContent',
    'ParsedSubmission',
    'PlainContent',
    'SubDocument',
    'XmlContent',
]

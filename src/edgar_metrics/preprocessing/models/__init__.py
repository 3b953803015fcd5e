"""
Pydantic data models for EDGAR submission parsing.

- submission: ParsedSubmission, FilingHeader, CompanyInfo, FilingDetails,
  SubDocument and the HTML / XML / PLAIN content payloads
"""
from .submission import (
    CompanyInfo,
    ContentClassification,
    DocumentContent,
    FilingDetails,
    FilingHeader,
    HtmlContent,
    ParsedSubmission,
    PlainContent,
    SubDocument,
    XmlContent,
)

__all__ = [
    'CompanyInfo',
    'ContentClassification',
    'DocumentContent',
    'FilingDetails',
    'FilingHeader',
    'HtmlContent',
    'ParsedSubmission',
    'PlainContent',
    'SubDocument',
    'XmlContent',
]

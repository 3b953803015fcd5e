"""
EDGAR submission parser.

Turns one raw submission text file (the ``<SEC-DOCUMENT>`` container EDGAR
serves as ``{accession}.txt``) into a ParsedSubmission: the filer/filing header
plus every embedded ``<DOCUMENT>`` with its content classified and de-rendered.

Extraction is best-effort: a missing tag yields an empty value and a document
with nothing extractable is still returned with no pages. The only fatal case
is input that cannot be decoded to text (SubmissionDecodeError).

Usage:
    from edgar_metrics.preprocessing import SubmissionParser

    parser = SubmissionParser()
    submission = parser.parse(raw_text)
    print(submission.header.company.name, len(submission.documents))
"""

import logging
from pathlib import Path
from typing import Optional, Union

from edgar_metrics.config import settings
from .constants import (
    ACCEPTANCE_DATETIME_TAG,
    COMPANY_INFO_KEYS,
    DOC_DESCRIPTION_TAG,
    DOC_FILENAME_TAG,
    DOC_SEQUENCE_TAG,
    DOC_TYPE_TAG,
    DOCUMENT_TAG,
    FILING_DETAILS_KEYS,
    FILING_HEADER_KEYS,
    HEADER_VALUE_SEPARATOR,
    SEC_DOCUMENT_TAG,
    SEC_HEADER_TAG,
    TEXT_TAG,
    XML_TAG,
)
from .content import html_to_text, looks_like_html, split_pages, xml_to_tree
from .models.submission import (
    CompanyInfo,
    DocumentContent,
    FilingDetails,
    FilingHeader,
    HtmlContent,
    ParsedSubmission,
    PlainContent,
    SubDocument,
    XmlContent,
)
from .tags import (
    extract_key_value,
    extract_multi_line,
    extract_single_line,
    find_multi_line_blocks,
)

logger = logging.getLogger(__name__)


class SubmissionDecodeError(ValueError):
    """Raw submission could not be interpreted as text."""


class SubmissionParser:
    """
    Parser for raw EDGAR submission text.

    Stateless apart from its configuration; one instance can parse any
    number of submissions, from any number of threads.

    Example:
        >>> parser = SubmissionParser()
        >>> submission = parser.parse(open("0000320193-17-000070.txt").read())
        >>> submission.primary_document.classification
        <ContentClassification.HTML: 'HTML'>
    """

    def __init__(self, config: Optional[object] = None):
        """
        Initialize parser.

        Args:
            config: Optional SubmissionParserConfig. If None, loads from settings.
        """
        self.config = config or settings.submission_parser

    def parse(self, raw: Union[str, bytes]) -> ParsedSubmission:
        """
        Parse one raw submission.

        Args:
            raw: Submission text, or bytes decoded with the configured encoding

        Returns:
            ParsedSubmission with header and documents in file order

        Raises:
            SubmissionDecodeError: If the input cannot be decoded to text
        """
        text = self.decode(raw)

        header = self.parse_header(text)
        documents = [
            self.parse_document(block)
            for block in find_multi_line_blocks(text, DOCUMENT_TAG)
        ]

        logger.info(
            f"Parsed submission {header.accession_number or '<no accession>'}: "
            f"{len(documents)} documents"
        )
        return ParsedSubmission(header=header, documents=documents)

    def decode(self, raw: Union[str, bytes]) -> str:
        """Return raw as text, decoding bytes with the configured encoding."""
        if isinstance(raw, str):
            return raw
        if isinstance(raw, (bytes, bytearray)):
            try:
                return bytes(raw).decode(self.config.encoding, errors=self.config.decode_errors)
            except (UnicodeDecodeError, LookupError) as e:
                raise SubmissionDecodeError(
                    f"Cannot decode submission as {self.config.encoding}: {e}"
                ) from e
        raise SubmissionDecodeError(
            f"Submission must be str or bytes, got {type(raw).__name__}"
        )

    # ===========================
    # Header
    # ===========================

    def parse_header(self, text: str) -> FilingHeader:
        """Extract submission, company and filing-detail fields from the full text."""
        header_fields = {
            field: extract_key_value(text, key)
            for field, key in FILING_HEADER_KEYS.items()
        }
        company = CompanyInfo(**{
            field: extract_key_value(text, key)
            for field, key in COMPANY_INFO_KEYS.items()
        })
        filing_details = FilingDetails(**{
            field: extract_key_value(text, key)
            for field, key in FILING_DETAILS_KEYS.items()
        })

        return FilingHeader(
            filename=_before_separator(extract_single_line(text, SEC_DOCUMENT_TAG)),
            header_filename=_before_separator(extract_single_line(text, SEC_HEADER_TAG)),
            acceptance_datetime=extract_single_line(text, ACCEPTANCE_DATETIME_TAG),
            company=company,
            filing_details=filing_details,
            **header_fields,
        )

    # ===========================
    # Documents
    # ===========================

    def parse_document(self, block: str) -> SubDocument:
        """Parse the body of one ``<DOCUMENT>`` block."""
        document = SubDocument(
            type=extract_single_line(block, DOC_TYPE_TAG),
            sequence=extract_single_line(block, DOC_SEQUENCE_TAG),
            filename=extract_single_line(block, DOC_FILENAME_TAG),
            description=extract_single_line(block, DOC_DESCRIPTION_TAG),
            content=self.classify_content(block),
        )
        logger.debug(
            f"Document {document.sequence or '?'} ({document.type or 'untyped'}): "
            f"{document.classification.value}, {len(document.pages)} pages"
        )
        return document

    def classify_content(self, block: str) -> DocumentContent:
        """
        Decide the content kind of a document block and de-render it.

        First match wins: HTML-bearing TEXT, then an XML block, then plain text.
        """
        text = "\n".join(find_multi_line_blocks(block, TEXT_TAG))

        if looks_like_html(text):
            return HtmlContent(text=html_to_text(text, strip_tables=self.config.strip_tables))

        xml = extract_multi_line(block, XML_TAG)
        if xml is not None:
            return XmlContent(tree=xml_to_tree(xml))

        return PlainContent(pages=split_pages(text))


def _before_separator(value: str) -> str:
    """``0000950123-17-007634.txt : 20170801`` -> ``0000950123-17-007634.txt``"""
    return value.split(HEADER_VALUE_SEPARATOR)[0].strip()


def parse_submission_from_path(file_path: Union[str, Path]) -> ParsedSubmission:
    """
    Convenience function to parse a submission stored on disk.

    Args:
        file_path: Path to the raw ``.txt`` submission

    Returns:
        ParsedSubmission object

    Raises:
        FileNotFoundError: If the path does not exist
        SubmissionDecodeError: If the bytes cannot be decoded

    Example:
        >>> submission = parse_submission_from_path("0000320193-17-000070.txt")
        >>> submission.header.company.name
        'APPLE INC'
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Submission not found: {file_path}")
    return SubmissionParser().parse(file_path.read_bytes())

"""
Unit tests for edgar_metrics/preprocessing/parser.py

Tests SubmissionParser against synthetic in-memory submissions: header
extraction, document splitting, content classification and decoding.
No real data dependencies - runs in <1 second.
"""

from pathlib import Path

import pytest

from edgar_metrics.config.submission_parser import SubmissionParserConfig
from edgar_metrics.preprocessing import (
    CompanyInfo,
    ContentClassification,
    FilingDetails,
    FilingHeader,
    SubmissionDecodeError,
    SubmissionParser,
    parse_submission_from_path,
)


@pytest.fixture
def parser() -> SubmissionParser:
    """Parser with default settings."""
    return SubmissionParser()


class TestHeader:
    """Tests for header field extraction."""

    def test_submission_fields(self, parser: SubmissionParser, submission_builder):
        """Identifiers from the SEC-DOCUMENT / SEC-HEADER preamble."""
        header = parser.parse(submission_builder()).header
        assert header.filename == "0000123456-17-000001.txt"
        assert header.header_filename == "0000123456-17-000001.hdr.sgml"
        assert header.acceptance_datetime == "20170801163012"
        assert header.accession_number == "0000123456-17-000001"
        assert header.submission_type == "10-K"
        assert header.filing_date == "20170801"

    def test_company_fields(self, parser: SubmissionParser, submission_builder):
        """Filer block values are trimmed."""
        company = parser.parse(submission_builder()).header.company
        assert company.name == "ACME CORP"
        assert company.central_index_key == "0000123456"
        assert company.industry_classification == "SERVICES-PREPACKAGED SOFTWARE [7372]"
        assert company.state_of_incorporation == "DE"
        assert company.fiscal_year_end == "1231"
        assert company.former_name == ""

    def test_filing_details(self, parser: SubmissionParser, submission_builder):
        """FILING VALUES block."""
        details = parser.parse(submission_builder()).header.filing_details
        assert details.form_type == "10-K"
        assert details.file_number == "001-36743"
        assert details.film_number == "17996543"

    @pytest.mark.parametrize("raw", ["", "garbage without any tags", "<DOCUMENT>\n"])
    def test_every_field_is_a_string(self, parser: SubmissionParser, raw: str):
        """Missing fields are empty strings, never absent or None."""
        header = parser.parse(raw).header
        for model, cls in [
            (header, FilingHeader),
            (header.company, CompanyInfo),
            (header.filing_details, FilingDetails),
        ]:
            for name in cls.model_fields:
                if name in ("company", "filing_details"):
                    continue
                assert isinstance(getattr(model, name), str), name

    def test_header_only_submission(self, parser: SubmissionParser):
        """A header without DOCUMENT blocks still parses."""
        result = parser.parse("<SEC-HEADER>\nCOMPANY CONFORMED NAME:ACME CORP\n</SEC-HEADER>\n")
        assert result.header.company.name == "ACME CORP"
        assert result.documents == []
        assert result.primary_document is None


class TestDocuments:
    """Tests for DOCUMENT splitting and classification."""

    def test_one_entry_per_document(self, parser: SubmissionParser, submission_builder,
                                    sample_html_body, sample_plain_body, sample_xml_body):
        """Document count matches DOCUMENT spans, whatever their content."""
        raw = submission_builder(docs=[
            {"body": sample_html_body},
            {"type": "EX-99", "body": sample_plain_body},
            {"type": "4", "body": sample_xml_body},
            {"type": "EX-1", "body": ""},
        ])
        result = parser.parse(raw)
        assert len(result.documents) == 4
        assert [d.sequence for d in result.documents] == ["1", "2", "3", "4"]

    def test_document_metadata(self, parser: SubmissionParser, submission_builder, sample_html_body):
        """TYPE / SEQUENCE / FILENAME / DESCRIPTION lines."""
        raw = submission_builder(docs=[{
            "type": "10-K", "filename": "acme-10k.htm",
            "description": "ANNUAL REPORT", "body": sample_html_body,
        }])
        doc = parser.parse(raw).primary_document
        assert doc.type == "10-K"
        assert doc.sequence == "1"
        assert doc.filename == "acme-10k.htm"
        assert doc.description == "ANNUAL REPORT"

    def test_html_document(self, parser: SubmissionParser, submission_builder, sample_html_body):
        """HTML body becomes one page of prose without table content."""
        doc = parser.parse(submission_builder(docs=[{"body": sample_html_body}])).primary_document
        assert doc.classification == ContentClassification.HTML
        assert len(doc.pages) == 1
        page = doc.pages[0]
        assert "1,234,567" not in page
        assert "<p>" not in page and "&amp;" not in page
        assert "Revenue grew & margins improved" in page

    def test_plain_document(self, parser: SubmissionParser, submission_builder, sample_plain_body):
        """Plain body is split into pages on <PAGE> markers."""
        doc = parser.parse(submission_builder(docs=[{"body": sample_plain_body}])).primary_document
        assert doc.classification == ContentClassification.PLAIN
        assert doc.pages == [
            "Sales increased during the year.",
            "Costs declined in the fourth quarter.",
        ]

    def test_plain_document_with_sgml_table(self, parser: SubmissionParser, submission_builder,
                                            sample_sgml_table_text):
        """Uppercase SGML layout tags keep a document PLAIN."""
        body = "cover\n<PAGE>\n" + sample_sgml_table_text
        doc = parser.parse(submission_builder(docs=[{"body": body}])).primary_document
        assert doc.classification == ContentClassification.PLAIN
        assert "Net sales" in doc.pages[0]

    def test_xml_document(self, parser: SubmissionParser, submission_builder, sample_xml_body):
        """XML block is parsed to a tree, never treated as prose."""
        doc = parser.parse(submission_builder(docs=[{"type": "4", "body": sample_xml_body}])).primary_document
        assert doc.classification == ContentClassification.XML
        assert doc.parsed_xml["ownershipDocument"]["issuer"]["issuerCik"] == "0000123456"
        assert doc.text == ""

    def test_invalid_xml_document(self, parser: SubmissionParser, submission_builder):
        """Malformed XML keeps the XML classification with no tree."""
        body = "<XML>\n<ownershipDocument>\n<issuer>\n</ownershipDocument>\n</XML>"
        doc = parser.parse(submission_builder(docs=[{"body": body}])).primary_document
        assert doc.classification == ContentClassification.XML
        assert doc.parsed_xml is None
        assert doc.pages == []

    def test_html_takes_precedence_over_xml(self, parser: SubmissionParser, submission_builder):
        """HTML-looking TEXT wins even when an XML block is present."""
        body = "<XML>\n<p>Rendered paragraph</p>\n</XML>"
        doc = parser.parse(submission_builder(docs=[{"body": body}])).primary_document
        assert doc.classification == ContentClassification.HTML

    def test_pages_never_empty(self, parser: SubmissionParser, submission_builder,
                               sample_html_body, sample_plain_body, sample_xml_body):
        """No document exposes an empty page."""
        raw = submission_builder(docs=[
            {"body": sample_html_body},
            {"body": sample_plain_body},
            {"body": sample_xml_body},
            {"body": "<html><body></body></html>"},
            {"body": "no markers at all"},
        ])
        for doc in parser.parse(raw).documents:
            assert doc.classification in ContentClassification
            assert all(page for page in doc.pages)


class TestDecode:
    """Tests for input decoding."""

    def test_bytes_are_decoded(self, parser: SubmissionParser, submission_builder):
        """UTF-8 bytes parse like text."""
        raw = submission_builder()
        assert parser.parse(raw.encode("utf-8")) == parser.parse(raw)

    def test_undecodable_bytes_raise(self, parser: SubmissionParser):
        """Invalid bytes under strict decoding are a hard failure."""
        with pytest.raises(SubmissionDecodeError):
            parser.parse(b"COMPANY CONFORMED NAME: \xff\xfe ACME\n")

    def test_replace_mode_recovers(self):
        """decode_errors=replace substitutes invalid bytes."""
        parser = SubmissionParser(SubmissionParserConfig(decode_errors="replace"))
        result = parser.parse(b"COMPANY CONFORMED NAME: ACME\xff\n")
        assert result.header.company.name.startswith("ACME")

    def test_unknown_encoding_raises(self):
        """A bad configured codec is reported as a decode failure."""
        parser = SubmissionParser(SubmissionParserConfig(encoding="no-such-codec"))
        with pytest.raises(SubmissionDecodeError):
            parser.parse(b"x")

    def test_non_text_input_raises(self, parser: SubmissionParser):
        """Anything but str/bytes is rejected."""
        with pytest.raises(SubmissionDecodeError):
            parser.parse(12345)

    def test_decode_error_is_value_error(self):
        """Callers may catch ValueError."""
        assert issubclass(SubmissionDecodeError, ValueError)


class TestParseFromPath:
    """Tests for parse_submission_from_path."""

    def test_reads_file(self, tmp_path: Path, submission_builder):
        """A submission on disk parses like its text."""
        path = tmp_path / "0000123456-17-000001.txt"
        path.write_text(submission_builder(), encoding="utf-8")
        assert parse_submission_from_path(path).header.company.name == "ACME CORP"

    def test_missing_file(self, tmp_path: Path):
        """Missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            parse_submission_from_path(tmp_path / "missing.txt")

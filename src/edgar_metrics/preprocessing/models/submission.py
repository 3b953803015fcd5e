"""
Pydantic models for a parsed EDGAR submission.

A submission is one raw ``.txt`` filing: a header block describing the filer
and the filing, followed by one or more ``<DOCUMENT>`` blocks. Header values
are kept as the verbatim strings found in the file. A missing field is an
empty string, never None, so downstream rows always have every column.

Each sub-document carries exactly one content payload, chosen once by the
parser: HTML prose, an XML tree, or plain-text pages.
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ContentClassification(str, Enum):
    """How a sub-document body was recognized."""
    HTML = "HTML"
    XML = "XML"
    PLAIN = "PLAIN"


class CompanyInfo(BaseModel):
    """Filer identity from the ``COMPANY DATA`` / ``FILER`` header block."""
    model_config = ConfigDict(frozen=True)

    name:                    str = ""   # COMPANY CONFORMED NAME
    former_name:             str = ""   # FORMER CONFORMED NAME
    name_change_date:        str = ""   # DATE OF NAME CHANGE, YYYYMMDD
    central_index_key:       str = ""   # CIK, zero-padded
    industry_classification: str = ""   # e.g. "SERVICES-PREPACKAGED SOFTWARE [7372]"
    irs_number:              str = ""
    state_of_incorporation:  str = ""
    fiscal_year_end:         str = ""   # MMDD


class FilingDetails(BaseModel):
    """Values from the ``FILING VALUES`` header block."""
    model_config = ConfigDict(frozen=True)

    form_type:   str = ""
    file_number: str = ""   # SEC FILE NUMBER, e.g. "001-36743"
    film_number: str = ""


class FilingHeader(BaseModel):
    """Submission-level metadata extracted from the header preamble."""
    model_config = ConfigDict(frozen=True)

    filename:            str = ""   # from <SEC-DOCUMENT>, e.g. "0000123456-17-000001.txt"
    header_filename:     str = ""   # from <SEC-HEADER>
    acceptance_datetime: str = ""   # YYYYMMDDHHMMSS
    accession_number:    str = ""
    submission_type:     str = ""
    document_count:      str = ""
    filing_date:         str = ""   # FILED AS OF DATE, YYYYMMDD

    company:        CompanyInfo = Field(default_factory=CompanyInfo)
    filing_details: FilingDetails = Field(default_factory=FilingDetails)


# ===========================
# Content payloads
# ===========================

class HtmlContent(BaseModel):
    """HTML body de-rendered to prose (tables removed)."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["html"] = "html"
    text: str = ""


class XmlContent(BaseModel):
    """XML body parsed to a generic tree; ``tree`` is None when not well-formed."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["xml"] = "xml"
    tree: Optional[Dict[str, Any]] = None


class PlainContent(BaseModel):
    """Plain-text body split on ``<PAGE>`` markers."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["plain"] = "plain"
    pages: List[str] = Field(default_factory=list)


DocumentContent = Annotated[
    Union[HtmlContent, XmlContent, PlainContent],
    Field(discriminator="kind"),
]

_CLASSIFICATION_BY_KIND = {
    "html": ContentClassification.HTML,
    "xml": ContentClassification.XML,
    "plain": ContentClassification.PLAIN,
}


class SubDocument(BaseModel):
    """One ``<DOCUMENT>`` block of a submission."""
    model_config = ConfigDict(frozen=True)

    type:        str = ""
    sequence:    str = ""
    filename:    str = ""
    description: str = ""
    content:     DocumentContent = Field(default_factory=PlainContent)

    @property
    def classification(self) -> ContentClassification:
        return _CLASSIFICATION_BY_KIND[self.content.kind]

    @property
    def is_html(self) -> bool:
        return self.content.kind == "html"

    @property
    def is_xml(self) -> bool:
        return self.content.kind == "xml"

    @property
    def parsed_xml(self) -> Optional[Dict[str, Any]]:
        """XML tree, only for well-formed XML documents."""
        if isinstance(self.content, XmlContent):
            return self.content.tree
        return None

    @property
    def pages(self) -> List[Union[str, Dict[str, Any]]]:
        """
        Non-empty content blocks.

        HTML yields one prose page, PLAIN one page per ``<PAGE>`` segment and
        a well-formed XML document its tree as the only page.
        """
        content = self.content
        if isinstance(content, HtmlContent):
            return [content.text] if content.text else []
        if isinstance(content, XmlContent):
            return [content.tree] if content.tree else []
        return [page for page in content.pages if page]

    @property
    def text(self) -> str:
        """Prose of the document for text metrics; "" for XML documents."""
        if self.is_xml:
            return ""
        return "\n".join(self.pages)

    def summary(self) -> Dict[str, Any]:
        """Compact description without the body, for logs and CLI output."""
        return {
            "type": self.type,
            "sequence": self.sequence,
            "filename": self.filename,
            "description": self.description,
            "classification": self.classification.value,
            "page_count": len(self.pages),
        }


class ParsedSubmission(BaseModel):
    """Header plus sub-documents in the order they appear in the file."""
    model_config = ConfigDict(frozen=True)

    header:    FilingHeader = Field(default_factory=FilingHeader)
    documents: List[SubDocument] = Field(default_factory=list)

    @property
    def primary_document(self) -> Optional[SubDocument]:
        """By EDGAR convention the first document is the filing itself."""
        return self.documents[0] if self.documents else None

"""
Constants for EDGAR submission parsing.

Tag names and header keys of the EDGAR SGML-like submission text format,
plus the HTML element names used to tell HTML bodies from plain text.
These are defined by the format, not user-tunable.
"""

import re
from typing import Dict, Final, FrozenSet


# ===========================
# Structural Tags
# ===========================

SEC_DOCUMENT_TAG: Final[str] = "SEC-DOCUMENT"
SEC_HEADER_TAG: Final[str] = "SEC-HEADER"
ACCEPTANCE_DATETIME_TAG: Final[str] = "ACCEPTANCE-DATETIME"

DOCUMENT_TAG: Final[str] = "DOCUMENT"
TEXT_TAG: Final[str] = "TEXT"
XML_TAG: Final[str] = "XML"
PAGE_TAG: Final[str] = "PAGE"

DOC_TYPE_TAG: Final[str] = "TYPE"
DOC_SEQUENCE_TAG: Final[str] = "SEQUENCE"
DOC_FILENAME_TAG: Final[str] = "FILENAME"
DOC_DESCRIPTION_TAG: Final[str] = "DESCRIPTION"

# <SEC-DOCUMENT>0000950123-17-007634.txt : 20170801
HEADER_VALUE_SEPARATOR: Final[str] = " : "


# ===========================
# Header Keys (KEY:value lines)
# ===========================

FILING_HEADER_KEYS: Final[Dict[str, str]] = {
    "accession_number": "ACCESSION NUMBER",
    "submission_type": "CONFORMED SUBMISSION TYPE",
    "document_count": "PUBLIC DOCUMENT COUNT",
    "filing_date": "FILED AS OF DATE",
}

COMPANY_INFO_KEYS: Final[Dict[str, str]] = {
    "name": "COMPANY CONFORMED NAME",
    "former_name": "FORMER CONFORMED NAME",
    "name_change_date": "DATE OF NAME CHANGE",
    "central_index_key": "CENTRAL INDEX KEY",
    "industry_classification": "STANDARD INDUSTRIAL CLASSIFICATION",
    "irs_number": "IRS NUMBER",
    "state_of_incorporation": "STATE OF INCORPORATION",
    "fiscal_year_end": "FISCAL YEAR END",
}

FILING_DETAILS_KEYS: Final[Dict[str, str]] = {
    "form_type": "FORM TYPE",
    "file_number": "SEC FILE NUMBER",
    "film_number": "FILM NUMBER",
}


# ===========================
# Content Detection
# ===========================

HTML_ELEMENT_NAMES: Final[FrozenSet[str]] = frozenset({
    "a", "abbr", "address", "area", "article", "aside", "audio", "b", "base",
    "bdi", "bdo", "blockquote", "body", "br", "button", "canvas", "caption",
    "center", "cite", "code", "col", "colgroup", "data", "datalist", "dd",
    "del", "details", "dfn", "dialog", "div", "dl", "dt", "em", "embed",
    "fieldset", "figcaption", "figure", "font", "footer", "form", "h1", "h2",
    "h3", "h4", "h5", "h6", "head", "header", "hr", "html", "i", "iframe",
    "img", "input", "ins", "kbd", "label", "legend", "li", "link", "main",
    "map", "mark", "meta", "meter", "nav", "noscript", "object", "ol",
    "optgroup", "option", "output", "p", "param", "picture", "pre",
    "progress", "q", "rp", "rt", "ruby", "s", "samp", "script", "section",
    "select", "small", "source", "span", "strong", "style", "sub", "summary",
    "sup", "table", "tbody", "td", "template", "textarea", "tfoot", "th",
    "thead", "time", "title", "tr", "track", "u", "ul", "var", "video", "wbr",
})

# EDGAR plain-text bodies carry uppercase SGML layout tags (<TABLE>, <CAPTION>,
# <S>, <C>, <FN>) that collide with HTML names. Lowercase element names are
# always trusted; uppercase only for names that never appear as SGML layout.
HTML_UPPERCASE_SAFE_NAMES: Final[FrozenSet[str]] = frozenset({
    "html", "head", "body", "div", "p", "br", "font", "tr", "td", "b", "i", "hr", "center",
})

_HTML_NAME_ALTERNATION = "|".join(sorted(HTML_ELEMENT_NAMES, key=len, reverse=True))
_HTML_SAFE_ALTERNATION = "|".join(sorted(HTML_UPPERCASE_SAFE_NAMES, key=len, reverse=True))
HTML_ELEMENT_PATTERN: Final[re.Pattern] = re.compile(
    rf'<(?:{_HTML_NAME_ALTERNATION})(?=[\s/>])[^>]*>'
    rf'|<(?i:{_HTML_SAFE_ALTERNATION})(?=[\s/>])[^>]*>'
    r'|<!(?i:DOCTYPE)\s+(?i:html)'
)

XML_PROLOGUE_PATTERN: Final[re.Pattern] = re.compile(r'<\?.*xml .*\?>\n?')

# Paragraph break normalization after tag stripping
NEWLINE_RUN_PATTERN: Final[re.Pattern] = re.compile(r'\n\s+')

"""
Content classification and de-rendering for EDGAR sub-documents.

A ``<DOCUMENT>`` body is one of three things:

1. HTML - modern filings; rendered to prose with tables removed, since
   tabular cells would corrupt sentence and word counts.
2. XML  - structured data (XBRL, ownership forms); parsed to a generic tree,
   never treated as prose.
3. PLAIN - pre-2001 style text; split into pages on ``<PAGE>`` markers.

Flow: TEXT/XML blocks -> looks_like_html() -> html_to_text() | parse_xml() | split_pages()
"""

import logging
import re
import xml.etree.ElementTree as ET
from html import unescape
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

from .constants import (
    HTML_ELEMENT_PATTERN,
    NEWLINE_RUN_PATTERN,
    PAGE_TAG,
    XML_PROLOGUE_PATTERN,
)

logger = logging.getLogger(__name__)

_PAGE_MARKER_PATTERN = re.compile(rf'<{PAGE_TAG}>.*')

# Non-prose elements removed along with tables
_NON_PROSE_ELEMENTS = ("script", "style")


# ===========================
# HTML
# ===========================

def looks_like_html(text: Optional[str]) -> bool:
    """True when the text contains recognizable HTML element syntax."""
    if not text:
        return False
    return HTML_ELEMENT_PATTERN.search(text) is not None


def strip_tags(html: str, strip_tables: bool = True) -> str:
    """
    Remove markup, returning the text content.

    Args:
        html: HTML fragment or document
        strip_tables: Drop <table> regions entirely instead of keeping cell text

    Returns:
        Text with every tag removed; text nodes of adjacent elements are
        separated by a newline so words never fuse across element boundaries
    """
    soup = BeautifulSoup(html, "lxml")
    removed = list(_NON_PROSE_ELEMENTS)
    if strip_tables:
        removed.append("table")
    for element in soup.find_all(removed):
        # Nested tables go away with their outer table
        if element.decomposed:
            continue
        element.decompose()
    return soup.get_text(separator="\n")


def decode_entities(text: str) -> str:
    """Decode any HTML entity escapes left in the text (&amp;, &#160;, ...)."""
    return unescape(text)


def html_to_text(html: str, strip_tables: bool = True) -> str:
    """
    De-render an HTML body into paragraph-separated prose.

    Tables are removed, tags stripped, entities decoded and every newline
    followed by whitespace collapsed into a paragraph break.
    """
    text = decode_entities(strip_tags(html, strip_tables=strip_tables))
    return NEWLINE_RUN_PATTERN.sub('\n\n', text).strip()


# ===========================
# XML
# ===========================

def strip_xml_prologue(xml: str) -> str:
    """Drop the ``<?xml ...?>`` declaration line."""
    return XML_PROLOGUE_PATTERN.sub('', xml, count=1)


def validate_xml(xml: str) -> bool:
    """Check well-formedness only; no schema validation."""
    try:
        ET.fromstring(xml)
    except ET.ParseError:
        return False
    return True


def _local(tag: str) -> str:
    """Strip namespace URI from an ElementTree tag."""
    return tag.split("}")[-1] if "}" in tag else tag


def _element_to_value(element: ET.Element) -> Any:
    """
    Convert an element to plain Python values.

    Leaf elements without attributes become their text. Otherwise a dict is
    built: attributes as ``@name``, children by local tag name (repeated tags
    collected into a list) and any direct text as ``#text``.
    """
    children = list(element)
    text = (element.text or "").strip()

    if not children and not element.attrib:
        return text

    value: Dict[str, Any] = {f"@{_local(k)}": v for k, v in element.attrib.items()}
    for child in children:
        name = _local(child.tag)
        child_value = _element_to_value(child)
        if name in value:
            existing = value[name]
            if not isinstance(existing, list):
                value[name] = [existing]
            value[name].append(child_value)
        else:
            value[name] = child_value
    if text:
        value["#text"] = text
    return value


def parse_xml(xml: str) -> Dict[str, Any]:
    """
    Parse an XML body into a generic nested-dict tree.

    Raises:
        xml.etree.ElementTree.ParseError: If the XML is not well-formed
    """
    root = ET.fromstring(xml)
    return {_local(root.tag): _element_to_value(root)}


def xml_to_tree(xml: str) -> Optional[Dict[str, Any]]:
    """Prologue-stripped, validated tree; None when the XML is not well-formed."""
    body = strip_xml_prologue(xml).strip()
    if not validate_xml(body):
        logger.warning("XML block is not well-formed; keeping document without a tree")
        return None
    return parse_xml(body)


# ===========================
# Plain text
# ===========================

def split_pages(text: str) -> List[str]:
    """
    Split a plain-text body on ``<PAGE>`` marker lines.

    The segment before the first marker is cover boilerplate and is dropped.
    Each remaining segment is trimmed; empty segments are filtered out.
    """
    segments = _PAGE_MARKER_PATTERN.split(text)[1:]
    return [segment.strip() for segment in segments if segment.strip()]

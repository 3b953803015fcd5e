"""
Tag extraction grammar for EDGAR submission text.

EDGAR submissions are not well-formed SGML: tags are unbalanced, nesting is
ad hoc and some fields live on a single line while others span blocks. Three
independent extractors cover the format:

- single-line fields   ``<TYPE>10-K``                 -> ``"10-K"``
- multi-line blocks    ``<TEXT>\\n...\\n</TEXT>``       -> lines in between
- key-value lines      ``COMPANY CONFORMED NAME: ACME`` -> ``"ACME"``

Every extractor is a pure function over a text span and never raises on a
missing tag: single-line and key-value lookups return ``""``, block lookups
return ``None``.
"""

import re
from functools import lru_cache
from typing import List, Optional


@lru_cache(maxsize=64)
def _single_line_pattern(tag: str) -> re.Pattern:
    return re.compile(rf'<{re.escape(tag)}>(.*)')


@lru_cache(maxsize=64)
def _multi_line_pattern(begin_tag: str, end_tag: str) -> re.Pattern:
    # Opening tag line, then lazily one or more full lines, then a closing tag
    # at the start of a line. The tag lines themselves are not captured.
    return re.compile(
        rf'<{re.escape(begin_tag)}>.*\n((?:.*\n)+?)</{re.escape(end_tag)}>'
    )


@lru_cache(maxsize=64)
def _key_value_pattern(key: str) -> re.Pattern:
    return re.compile(rf'{re.escape(key)}:(.*)')


def find_single_line(text: str, tag: str) -> List[str]:
    """Return the trimmed value of every ``<TAG>value`` line, in order."""
    return [m.group(1).strip() for m in _single_line_pattern(tag).finditer(text)]


def extract_single_line(text: str, tag: str) -> str:
    """
    Extract the first single-line field ``<TAG>value``.

    Args:
        text: Text span to search
        tag: Tag name without angle brackets (e.g. "TYPE")

    Returns:
        Rest of the line after the tag, trimmed; "" if the tag is absent
    """
    match = _single_line_pattern(tag).search(text)
    if match is None:
        return ""
    return match.group(1).strip()


def find_multi_line_blocks(
    text: str,
    begin_tag: str,
    end_tag: Optional[str] = None,
) -> List[str]:
    """
    Return every multi-line block delimited by ``<BEGIN>`` and ``</END>``.

    Args:
        text: Text span to search
        begin_tag: Opening tag name (e.g. "DOCUMENT")
        end_tag: Closing tag name; defaults to begin_tag

    Returns:
        Captured bodies in document order (may be empty)
    """
    pattern = _multi_line_pattern(begin_tag, end_tag or begin_tag)
    return [m.group(1) for m in pattern.finditer(text)]


def extract_multi_line(
    text: str,
    begin_tag: str,
    end_tag: Optional[str] = None,
) -> Optional[str]:
    """Return the first multi-line block, or None if there is none."""
    match = _multi_line_pattern(begin_tag, end_tag or begin_tag).search(text)
    if match is None:
        return None
    return match.group(1)


def extract_key_value(text: str, key: str) -> str:
    """
    Extract a colon-delimited header field (``KEY:value``).

    Matching is case-sensitive on the literal key. The first occurrence wins,
    which for filer blocks means the first filer listed.

    Returns:
        Trimmed value, or "" when the key is absent
    """
    match = _key_value_pattern(key).search(text)
    if match is None:
        return ""
    return match.group(1).strip()

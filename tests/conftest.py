"""
Shared pytest fixtures for the EDGAR disclosure metrics test suite.

This module provides common fixtures used across test modules:
- Synthetic submission builder (header + DOCUMENT blocks)
- Sample HTML / XML / plain-text document bodies
- In-memory tone lexicon and fake tokenizer collaborators

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

from typing import Callable, List, Optional

import pytest

from edgar_metrics.features.dictionaries import ToneLexicon, ToneLexiconManager
from edgar_metrics.features.tokenizer import DateSpan, TokenizedText


# ===========================
# Submission Builder
# ===========================

ACME_HEADER = (
    "ACCESSION NUMBER:\t\t0000123456-17-000001\n"
    "CONFORMED SUBMISSION TYPE:\t10-K\n"
    "PUBLIC DOCUMENT COUNT:\t\t{count}\n"
    "FILED AS OF DATE:\t\t20170801\n"
    "\n"
    "FILER:\n"
    "\n"
    "\tCOMPANY DATA:\t\n"
    "\t\tCOMPANY CONFORMED NAME:\t\t\tACME CORP\n"
    "\t\tCENTRAL INDEX KEY:\t\t\t0000123456\n"
    "\t\tSTANDARD INDUSTRIAL CLASSIFICATION:\tSERVICES-PREPACKAGED SOFTWARE [7372]\n"
    "\t\tIRS NUMBER:\t\t\t\t123456789\n"
    "\t\tSTATE OF INCORPORATION:\t\t\tDE\n"
    "\t\tFISCAL YEAR END:\t\t\t1231\n"
    "\n"
    "\tFILING VALUES:\n"
    "\t\tFORM TYPE:\t\t10-K\n"
    "\t\tSEC ACT:\t\t1934 Act\n"
    "\t\tSEC FILE NUMBER:\t001-36743\n"
    "\t\tFILM NUMBER:\t\t17996543\n"
)


def make_submission(
    docs: Optional[List[dict]] = None,
    header: Optional[str] = None,
) -> str:
    """
    Build a minimal synthetic EDGAR submission.

    Args:
        docs: List of dicts with keys: type, sequence, filename, description, body.
              ``body`` is placed verbatim between <TEXT> and </TEXT>.
        header: Header lines between <SEC-HEADER> tags (ACME CORP by default).
    """
    docs = docs or []
    if header is None:
        header = ACME_HEADER.format(count=len(docs))

    blocks = ""
    for i, doc in enumerate(docs, start=1):
        blocks += (
            "<DOCUMENT>\n"
            f"<TYPE>{doc.get('type', '10-K')}\n"
            f"<SEQUENCE>{doc.get('sequence', i)}\n"
            f"<FILENAME>{doc.get('filename', f'doc{i}.htm')}\n"
            f"<DESCRIPTION>{doc.get('description', '')}\n"
            "<TEXT>\n"
            f"{doc.get('body', '')}\n"
            "</TEXT>\n"
            "</DOCUMENT>\n"
        )

    return (
        "<SEC-DOCUMENT>0000123456-17-000001.txt : 20170801\n"
        "<SEC-HEADER>0000123456-17-000001.hdr.sgml : 20170801\n"
        "<ACCEPTANCE-DATETIME>20170801163012\n"
        f"{header}"
        "</SEC-HEADER>\n"
        f"{blocks}"
        "</SEC-DOCUMENT>\n"
    )


@pytest.fixture
def submission_builder() -> Callable[..., str]:
    """Return the synthetic submission builder."""
    return make_submission


# ===========================
# Sample Document Bodies
# ===========================

@pytest.fixture(scope="session")
def sample_html_body() -> str:
    """HTML body with a financial table and entity escapes."""
    return (
        "<html>\n"
        "<body>\n"
        "<p>Revenue grew &amp; margins improved in fiscal 2017.</p>\n"
        "<table>\n"
        "<tr><td>Net sales</td><td>1,234,567</td></tr>\n"
        "</table>\n"
        "<p>Our outlook remains strong&#160;overall.</p>\n"
        "</body>\n"
        "</html>"
    )


@pytest.fixture(scope="session")
def sample_plain_body() -> str:
    """Pre-2001 plain-text body: cover boilerplate then two <PAGE> markers."""
    return (
        "ACME CORP ANNUAL REPORT\n"
        "<PAGE>\n"
        "Sales increased during the year.\n"
        "<PAGE> 2\n"
        "Costs declined in the fourth quarter.\n"
    )


@pytest.fixture(scope="session")
def sample_xml_body() -> str:
    """Ownership-form style XML body with prologue."""
    return (
        "<XML>\n"
        '<?xml version="1.0"?>\n'
        "<ownershipDocument>\n"
        "<issuer>\n"
        "<issuerCik>0000123456</issuerCik>\n"
        "<issuerName>ACME CORP</issuerName>\n"
        "</issuer>\n"
        "</ownershipDocument>\n"
        "</XML>"
    )


# ===========================
# Metrics Collaborators
# ===========================

@pytest.fixture
def tone_lexicon() -> ToneLexicon:
    """Small in-memory lexicon: good/growth vs bad/decline."""
    return ToneLexicon.from_words(["good", "Growth", ""], ["bad", "decline"])


class FakeTokenizer:
    """Tokenizer returning fixed sentences/words/dates regardless of input."""

    def __init__(self, sentences=None, words=None, date_spans=None):
        self.result = TokenizedText(
            sentences=list(sentences or []),
            words=list(words or []),
            date_spans=list(date_spans or []),
        )
        self.calls = []

    def tokenize(self, text: str) -> TokenizedText:
        self.calls.append(text)
        return self.result


@pytest.fixture
def fake_tokenizer_factory() -> Callable[..., FakeTokenizer]:
    """Return a factory for FakeTokenizer instances."""
    return FakeTokenizer


@pytest.fixture
def date_span() -> Callable[[str, str], DateSpan]:
    """Build the DateSpan of the first occurrence of ``date`` in ``text``."""
    def _make(text: str, date: str) -> DateSpan:
        start = text.index(date)
        return DateSpan(start=start, end=start + len(date), text=date)
    return _make


@pytest.fixture(autouse=True)
def _reset_lexicon_manager():
    """Each test starts without a cached lexicon singleton."""
    ToneLexiconManager.reset_instance()
    yield
    ToneLexiconManager.reset_instance()

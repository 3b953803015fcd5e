"""
Lightweight fixtures for unit tests - NO real data dependencies.
All fixtures use mock/synthetic data that runs in <1 second.
"""

import pytest


# =============================================================================
# Header / Tag Fixtures
# =============================================================================

@pytest.fixture
def sample_sic_line() -> str:
    """Header line with SIC code in bracket format."""
    return "STANDARD INDUSTRIAL CLASSIFICATION:\tSERVICES-PREPACKAGED SOFTWARE [7372]"


@pytest.fixture
def sample_two_filers_header() -> str:
    """Header listing two filers; the first one wins for key-value lookups."""
    return (
        "FILER:\n"
        "\tCOMPANY CONFORMED NAME:\tFIRST FILER INC\n"
        "FILER:\n"
        "\tCOMPANY CONFORMED NAME:\tSECOND FILER LLC\n"
    )


@pytest.fixture
def sample_sgml_table_text() -> str:
    """Plain-text body with uppercase SGML layout tags (not HTML)."""
    return (
        "<TABLE>\n"
        "<CAPTION>\n"
        "<S>                    <C>\n"
        "Net sales              $1,234\n"
        "</TABLE>\n"
    )


@pytest.fixture
def sample_xbrl_text() -> str:
    """XBRL instance fragment whose prefixed names must not look like HTML."""
    return (
        '<xbrli:xbrl xmlns:xbrli="http://www.xbrl.org/2003/instance">\n'
        '<link:schemaRef xlink:href="acme-20170701.xsd"/>\n'
        "</xbrli:xbrl>\n"
    )

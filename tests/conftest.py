"""
Pytest configuration and shared fixtures.
"""

import pytest

from csv2bib.models import ConversionStats, Record

HEADER = [
    "Document Title", "Authors", "Author Affiliations", "Publication Title",
    "Date Added To Xplore", "Year", "Volume", "Issue", "Start Page", "End Page",
    "Abstract", "ISSN", "ISBNs", "DOI", "Funding Information", "PDF Link",
    "Author Keywords", "IEEE Terms", "INSPEC Controlled Terms",
    "INSPEC Non-Controlled Terms", "MeSH Terms", "Article Citation Count",
    "Patent Citation Count", "Reference Count", "Copyright Year", "Issue Date",
    "Meeting Date", "Publisher", "Document Identifier",
]


def make_row(**columns):
    """Full IEEE export row, every column set to "" unless given."""
    row = {c: "" for c in HEADER}
    row.update(columns)
    return row


@pytest.fixture
def stats():
    return ConversionStats()


@pytest.fixture
def journal_row():
    return make_row(**{
        "Document Title": "Software Analytics for Mobile Applications",
        "Authors": "A. Smith; B. Jones",
        "Publication Title": "IEEE Software",
        "Year": "2012",
        "Volume": "29",
        "Issue": "4",
        "Start Page": "100",
        "End Page": "110",
        "ISSN": "0740-7459;1937-4194",
        "DOI": "10.1109/MS.2012.10",
        "PDF Link": "http://ieeexplore.ieee.org/stamp/stamp.jsp?arnumber=6122637",
        "Author Keywords": "mining;apps",
        "IEEE Terms": "Software",
        "Issue Date": "July-Aug. 2012",
        "Publisher": "IEEE",
        "Document Identifier": "IEEE Journals & Magazines",
    })


@pytest.fixture
def journal_record(journal_row):
    return Record(journal_row)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests without external deps")

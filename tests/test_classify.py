import pytest

from conftest import make_row
from csv2bib.classify import classify
from csv2bib.models import EntryType, Record


@pytest.mark.unit
@pytest.mark.parametrize("docid", [
    "IEEE Conference Publications",
    "IET Conference Publications",
    "VDE CONFERENCE",
])
def test_conference_is_inproceedings(docid):
    # title and other columns do not matter once "conference" is found
    rec = Record(make_row(**{"Document Identifier": docid, "Document Title": ""}))
    assert classify(rec) == EntryType.INPROCEEDINGS


@pytest.mark.unit
def test_conference_wins_over_ebook():
    rec = Record(make_row(**{"Document Identifier": "Conference eBook Chapters"}))
    assert classify(rec) == EntryType.INPROCEEDINGS


@pytest.mark.unit
def test_ebook_without_title_is_inbook():
    rec = Record(make_row(**{"Document Identifier": "IEEE eBook Chapters", "Document Title": ""}))
    assert classify(rec) == EntryType.INBOOK


@pytest.mark.unit
def test_ebook_with_title_is_incollection():
    rec = Record(make_row(**{"Document Identifier": "IEEE eBook Chapters", "Document Title": "Chapter 3"}))
    assert classify(rec) == EntryType.INCOLLECTION


@pytest.mark.unit
def test_ebook_title_column_absent_is_inbook():
    assert classify(Record({"Document Identifier": "MIT Press eBook Chapters"})) == EntryType.INBOOK


@pytest.mark.unit
@pytest.mark.parametrize("values", [
    {"Document Identifier": "IEEE Journals & Magazines"},
    {"Document Identifier": "IEEE Early Access Articles"},
    {"Document Identifier": ""},
    {},
    {"Document Identifier": float("nan")},
])
def test_everything_else_is_article(values):
    assert classify(Record(values)) == EntryType.ARTICLE

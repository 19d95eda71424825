from pathlib import Path

import bibtexparser
import rispy
from bibtexparser.bibdatabase import BibDatabase
from bibtexparser.bwriter import BibTexWriter

from .models import EntryType

FORMATS = ("bibtex", "ris")

RIS_TYPES = {
    EntryType.ARTICLE: "JOUR",
    EntryType.INBOOK: "CHAP",
    EntryType.INCOLLECTION: "CHAP",
    EntryType.INPROCEEDINGS: "CONF",
}

FIELD_MAP = {
    "title": "primary_title",
    "year": "year",
    "volume": "volume",
    "number": "number",
    "publisher": "publisher",
    "doi": "doi",
    "issn": "issn",
    "abstract": "abstract",
}


def split_list(val):
    return [v.strip() for v in val.split(";") if v.strip()]


def entries_to_bibtex(entries) -> str:
    db = BibDatabase()
    db.entries = [{"ENTRYTYPE": e.type.value, "ID": e.key, **e.fields} for e in entries]
    writer = BibTexWriter()
    writer.indent = "  "
    writer.order_entries_by = None
    return bibtexparser.dumps(db, writer)


def entry_to_ris(entry):
    rec = {"type_of_reference": RIS_TYPES[entry.type], "id": entry.key}
    for k, v in FIELD_MAP.items():
        if k in entry.fields:
            rec[v] = entry.fields[k]
    container = entry.fields.get("journal") or entry.fields.get("booktitle")
    if container:
        rec["secondary_title"] = container
    if entry.fields.get("author"):
        rec["authors"] = split_list(entry.fields["author"])
    if entry.fields.get("keywords"):
        rec["keywords"] = split_list(entry.fields["keywords"])
    if entry.fields.get("url"):
        rec["urls"] = [entry.fields["url"]]
    if entry.fields.get("pages"):
        start, _, end = entry.fields["pages"].partition("--")
        rec["start_page"] = start
        if end:
            rec["end_page"] = end
    return rec


def entries_to_ris(entries):
    return [entry_to_ris(e) for e in entries]


def write_entries(entries, out_path: str, fmt: str = "bibtex"):
    if fmt not in FORMATS:
        raise SystemExit(f"Unknown output format {fmt!r}, expected one of {', '.join(FORMATS)}")
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        if fmt == "ris":
            rispy.dump(entries_to_ris(entries), f)
        else:
            f.write(entries_to_bibtex(entries))

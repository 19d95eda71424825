from pathlib import Path
from typing import Iterable, Iterator, Optional

import pandas as pd
from loguru import logger

from .classify import classify
from .extractors import EXTRACTORS, extract_fields
from .keys import generate_key
from .models import ConversionStats, ConverterConfig, Entry, Record
from .validate import is_valid
from .writers import write_entries


def read_records(in_csv: str, encoding: str = "utf-8-sig") -> Iterator[Record]:
    p = Path(in_csv)
    if not p.exists():
        raise SystemExit(f"Input file not found: {p}")
    # all columns as str so empty cells stay "" instead of NaN;
    # index_col=False keeps a trailing comma on each row from shifting the columns
    try:
        df = pd.read_csv(p, dtype=str, keep_default_na=False, encoding=encoding, index_col=False)
    except pd.errors.EmptyDataError:
        raise SystemExit(f"Input file is empty: {p}")
    df.columns = [str(c).strip() for c in df.columns]
    for row in df.to_dict("records"):
        yield Record(row)


def convert_record(record: Record, stats: ConversionStats, prefix: str = "ieee",
                   registry=EXTRACTORS) -> Optional[Entry]:
    stats.total += 1
    entry_type = classify(record)
    key = generate_key(entry_type, record, stats, prefix, registry)
    entry = Entry(entry_type, key, extract_fields(entry_type, record, registry))
    if not is_valid(entry, stats):
        return None
    stats.converted += 1
    return entry


def convert_records(records: Iterable[Record], stats: ConversionStats, prefix: str = "ieee",
                    registry=EXTRACTORS) -> Iterator[Entry]:
    for record in records:
        entry = convert_record(record, stats, prefix, registry)
        if entry is not None:
            yield entry


def run(in_csv: str, out_path: str, config: ConverterConfig = None) -> ConversionStats:
    config = config or ConverterConfig()
    stats = ConversionStats()
    records = read_records(in_csv, config.encoding)
    entries = list(convert_records(records, stats, config.key_prefix))
    write_entries(entries, out_path, config.output_format)
    logger.info(f"{stats.total} rows, {stats.converted} converted, {stats.rejected} rejected, "
                f"{stats.auto_generated} auto-generated keys")
    return stats

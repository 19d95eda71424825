from dataclasses import dataclass, field
from enum import Enum


class EntryType(str, Enum):
    ARTICLE = "article"
    INBOOK = "inbook"
    INCOLLECTION = "incollection"
    INPROCEEDINGS = "inproceedings"


class Record:
    """Read-only view of one exported CSV row.

    A column is either absent or set to a (possibly empty) string. Anything
    that is not a string (pandas NaN, None) counts as absent.
    """

    def __init__(self, values=None):
        self._values = dict(values or {})

    def is_set(self, column: str) -> bool:
        return isinstance(self._values.get(column), str)

    def get(self, column: str) -> str:
        v = self._values.get(column)
        return v if isinstance(v, str) else ""

    def __repr__(self):
        return f"Record({self._values!r})"


@dataclass
class Entry:
    type: EntryType
    key: str
    fields: dict = field(default_factory=dict)


@dataclass
class ConversionStats:
    """Counters for one conversion session; only ever incremented."""
    total: int = 0
    converted: int = 0
    auto_generated: int = 0
    rejected: int = 0

    def next_auto_id(self) -> int:
        self.auto_generated += 1
        return self.auto_generated


@dataclass
class ConverterConfig:
    key_prefix: str = "ieee"
    encoding: str = "utf-8-sig"
    output_format: str = "bibtex"

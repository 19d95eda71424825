from loguru import logger

from .models import ConversionStats, Entry


def is_valid(entry: Entry, stats: ConversionStats) -> bool:
    """Reject entries without an author.

    Those are front matter rather than papers: "[Front cover]", "[Title page i]",
    "Program Committee", "Author index", "Table of contents", "Message from the
    General Chair and Program Chairs" and so on. Real papers without an author
    are very rare in IEEE exports.
    """
    if "author" not in entry.fields:
        logger.debug(f"rejected {entry.key}: no author ({entry.fields.get('title', '')!r})")
        stats.rejected += 1
        return False
    return True

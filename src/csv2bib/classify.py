from .models import EntryType, Record


def classify(record: Record) -> EntryType:
    docid = record.get("Document Identifier").lower()

    # [IEEE|IET|VDE|...] Conference Publications
    if "conference" in docid:
        return EntryType.INPROCEEDINGS

    # MIT Press eBook Chapters, Wiley-IEEE Press eBook Chapters, IEEE USA Books & eBooks
    if "ebook" in docid:
        if not record.get("Document Title"):
            return EntryType.INBOOK
        return EntryType.INCOLLECTION

    # journals & magazines, early access articles, anything else
    return EntryType.ARTICLE

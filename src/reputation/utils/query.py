"""Helpers for reading complete result sets through Protean's QuerySet."""

_BATCH_SIZE = 200


def fetch_all(query, batch_size=_BATCH_SIZE):
    """Read every record matched by ``query`` in fixed-size batches.

    QuerySets carry a default limit, so a single ``.all()`` can silently
    truncate large populations. The query must be deterministically ordered
    for offsets to be stable across batches.
    """
    records = []
    offset = 0
    while True:
        batch = query.offset(offset).limit(batch_size).all().items
        records.extend(batch)
        if len(batch) < batch_size:
            return records
        offset += batch_size

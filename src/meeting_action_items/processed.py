"""
Bounded set of processed document IDs.

The caller owns an instance and passes it to the runner by reference;
the extraction core never sees it. Retention keeps only the most recent
IDs. Storage is left to the caller via to_list().
"""

from collections import OrderedDict
from collections.abc import Iterable, Iterator

from .config import config


class ProcessedDocumentSet:
    """Append-only, insertion-ordered set that forgets its oldest entries."""

    def __init__(self, retention: int | None = None, initial: Iterable[str] = ()):
        self.retention = config.PROCESSED_RETENTION if retention is None else retention
        if self.retention < 1:
            raise ValueError('retention must be at least 1')
        self._ids: OrderedDict[str, None] = OrderedDict()
        for document_id in initial:
            self.add(document_id)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def add(self, document_id: str) -> None:
        """Record a document; re-adding is a no-op, overflow evicts the oldest."""
        if document_id in self._ids:
            return
        self._ids[document_id] = None
        while len(self._ids) > self.retention:
            self._ids.popitem(last=False)

    def to_list(self) -> list[str]:
        """IDs oldest first, for the caller to persist."""
        return list(self._ids)

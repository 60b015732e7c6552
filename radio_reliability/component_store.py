"""
Component Store
===============
Keyed multi-map of component records.

Records are bucketed by ``key % bucket_count``. Each bucket is a chain that
reports its most recent insert first; the bucket count is fixed at
construction, so collisions simply grow the chain. A second, flat sequence
keeps every record in insertion order for the calculation passes.

Author:  Eliot Abramo
"""

import logging
from typing import Callable, Iterator, List, Tuple

from .components import ComponentRecord
from .errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_COUNT = 10


class ComponentStore:
    """Owns every ComponentRecord of a scheme."""

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT):
        if bucket_count < 1:
            raise ValidationError(f"bucket_count must be >= 1, got {bucket_count}")
        self.bucket_count = bucket_count
        # Chains hold indexes into _records, oldest first
        self._buckets: List[List[int]] = [[] for _ in range(bucket_count)]
        self._records: List[ComponentRecord] = []

    def bucket_index(self, key: int) -> int:
        return key % self.bucket_count

    def insert(self, key: int, record: ComponentRecord) -> None:
        """Add ``record`` under ``key``. Duplicate keys chain, never replace."""
        index = self.bucket_index(key)
        self._buckets[index].append(len(self._records))
        self._records.append(record)
        logger.debug("Stored %s under key %d (bucket %d)", record.name, key, index)

    def bucket(self, index: int) -> List[ComponentRecord]:
        """Records of one bucket, most recently inserted first."""
        return [self._records[i] for i in reversed(self._buckets[index])]

    def iter_buckets(self) -> Iterator[Tuple[int, ComponentRecord]]:
        """Yield (bucket index, record), bucket-major, newest-first within a bucket."""
        for index in range(self.bucket_count):
            for record in self.bucket(index):
                yield index, record

    def for_each(self, visitor: Callable[[ComponentRecord], None]) -> None:
        for _, record in self.iter_buckets():
            visitor(record)

    def output(self) -> List[str]:
        """Detail lines in bucket order."""
        return [record.get_details() for _, record in self.iter_buckets()]

    @property
    def records(self) -> List[ComponentRecord]:
        """Flat insertion-ordered sequence (copy)."""
        return list(self._records)

    def clear(self) -> None:
        for chain in self._buckets:
            chain.clear()
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ComponentRecord]:
        return iter(self._records)

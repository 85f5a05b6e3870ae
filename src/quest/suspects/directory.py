"""Clue to suspect directory: fixed-size hash table with chaining."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Iterator

from quest import config

_logger = logging.getLogger(__name__)

HASH_SEED = 5381
HASH_MASK = (1 << 64) - 1


def djb2_hash(key: str, size: int) -> int:
    """Bucket index for ``key``: ``h = h * 33 + byte`` from 5381, then ``h % size``.

    Bytes are the UTF-8 encoding of the key, and the accumulator wraps at
    64 bits.
    """
    if size <= 0:
        raise ValueError("Hash table size must be positive.")
    h = HASH_SEED
    # Bytes are read unsigned (0-255); a signed-char C build places non-ASCII keys elsewhere.
    for byte in key.encode("utf-8"):
        h = (h * 33 + byte) & HASH_MASK
    return h % size


@dataclass(eq=False)
class DirectoryEntry:
    key: str
    value: str
    next: DirectoryEntry | None = None


class SuspectDirectory:
    def __init__(self, size: int = config.HASH_TABLE_SIZE) -> None:
        if size <= 0:
            raise ValueError("Hash table size must be positive.")
        self.size = size
        self._buckets: list[DirectoryEntry | None] = [None] * size
        self._count = 0

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[str, str]], size: int = config.HASH_TABLE_SIZE
    ) -> "SuspectDirectory":
        directory = cls(size)
        for key, value in pairs:
            directory.insert_or_update(key, value)
        return directory

    def bucket_for(self, key: str) -> int:
        return djb2_hash(key, self.size)

    def insert_or_update(self, key: str, value: str) -> None:
        index = self.bucket_for(key)
        current = self._buckets[index]
        while current is not None:
            if current.key == key:
                current.value = value
                _logger.debug("Updated %r -> %r in bucket %d", key, value, index)
                return
            current = current.next
        self._buckets[index] = DirectoryEntry(key, value, self._buckets[index])
        self._count += 1
        _logger.debug("Inserted %r -> %r in bucket %d", key, value, index)

    def lookup(self, key: str) -> str | None:
        current = self._buckets[self.bucket_for(key)]
        while current is not None:
            if current.key == key:
                return current.value
            current = current.next
        return None

    def chain(self, index: int) -> list[tuple[str, str]]:
        """Entries of one bucket in chain order (most recently inserted first)."""
        entries: list[tuple[str, str]] = []
        current = self._buckets[index]
        while current is not None:
            entries.append((current.key, current.value))
            current = current.next
        return entries

    def items(self) -> Iterator[tuple[str, str]]:
        for index in range(len(self._buckets)):
            yield from self.chain(index)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def teardown(self) -> int:
        released = 0
        for index, head in enumerate(self._buckets):
            current = head
            while current is not None:
                following = current.next
                current.next = None
                current = following
                released += 1
            self._buckets[index] = None
        self._buckets = []
        self._count = 0
        _logger.debug("Released %d directory entries", released)
        return released

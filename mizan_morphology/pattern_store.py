"""
Pattern Store

Hash table from scheme name to template, with separate chaining.
The bucket array and the chains are kept explicit (not a dict) so the raw
layout can be inspected with buckets().
"""

import logging
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75


def string_hash(key: str) -> int:
    """
    32-bit string hash, h = 31*h + c over UTF-16 code units.

    Same value as java.lang.String.hashCode(), so the bucket layout matches
    definition files produced by the original service.
    """
    data = key.encode('utf-16-be')
    h = 0
    for i in range(0, len(data), 2):
        h = (31 * h + ((data[i] << 8) | data[i + 1])) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


class Entry:
    """A key/value pair in a bucket chain."""

    __slots__ = ('key', 'value', 'next')

    def __init__(self, key: str, value: str, next: Optional['Entry'] = None):
        self.key = key
        self.value = value
        self.next = next

    def __repr__(self):
        return f"Entry({self.key!r}, {self.value!r})"


class PatternStore:
    """
    Chained hash map with head insertion and doubling resize.

    Usage:
        patterns = PatternStore()
        patterns.put('فاعل', '{1}ا{2}{3}')
        patterns.get('فاعل')  # '{1}ا{2}{3}'
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 load_factor: float = DEFAULT_LOAD_FACTOR):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._load_factor = load_factor
        self._table: List[Optional[Entry]] = [None] * capacity
        self._size = 0

    def _index(self, key: str) -> int:
        return abs(string_hash(key)) % self._capacity

    # =========================================================================
    # BASIC OPERATIONS
    # =========================================================================

    def put(self, key: str, value: str) -> None:
        """Insert or update a key."""
        if key is None:
            return

        index = self._index(key)
        current = self._table[index]
        while current is not None:
            if current.key == key:
                current.value = value
                return
            current = current.next

        # Collision: new entry goes to the head of the chain
        self._table[index] = Entry(key, value, self._table[index])
        self._size += 1

        if self._size > self._capacity * self._load_factor:
            self._resize(self._capacity * 2)

    def get(self, key: str) -> Optional[str]:
        if key is None:
            return None
        current = self._table[self._index(key)]
        while current is not None:
            if current.key == key:
                return current.value
            current = current.next
        return None

    def remove(self, key: str) -> Optional[str]:
        """Remove a key and return its value, or None if it was absent."""
        if key is None:
            return None

        index = self._index(key)
        current = self._table[index]
        previous = None
        while current is not None:
            if current.key == key:
                if previous is None:
                    self._table[index] = current.next
                else:
                    previous.next = current.next
                self._size -= 1
                return current.value
            previous = current
            current = current.next
        return None

    def all(self) -> List[Tuple[str, str]]:
        """All (key, value) pairs in bucket order, each chain head to tail."""
        pairs = []
        for head in self._table:
            current = head
            while current is not None:
                pairs.append((current.key, current.value))
                current = current.next
        return pairs

    def keys(self) -> List[str]:
        return [key for key, _ in self.all()]

    # =========================================================================
    # INTERNAL STATE
    # =========================================================================

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        """Current ratio of entries to buckets."""
        return self._size / self._capacity

    def bucket(self, index: int) -> Optional[Entry]:
        """Head of the chain at a bucket index."""
        return self._table[index]

    def chain_lengths(self) -> List[int]:
        lengths = []
        for head in self._table:
            length = 0
            current = head
            while current is not None:
                length += 1
                current = current.next
            lengths.append(length)
        return lengths

    def longest_chain(self) -> int:
        return max(self.chain_lengths(), default=0)

    def buckets(self) -> List[List[Dict[str, str]]]:
        """Raw bucket layout: one list per bucket, in chain order."""
        layout = []
        for head in self._table:
            chain = []
            current = head
            while current is not None:
                chain.append({'key': current.key, 'value': current.value})
                current = current.next
            layout.append(chain)
        return layout

    def _resize(self, new_capacity: int) -> None:
        old_table = self._table
        logger.debug(f"Resizing pattern store {self._capacity} -> {new_capacity}")
        self._capacity = new_capacity
        self._table = [None] * new_capacity
        self._size = 0

        # Rehash through put(), walking old buckets in order
        for head in old_table:
            current = head
            while current is not None:
                self.put(current.key, current.value)
                current = current.next

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.get(key) is not None

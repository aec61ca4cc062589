"""
HashMap -- separate-chaining hash table with automatic growth.

Keys are placed in bucket ``abs(hash(key)) % capacity``; collisions share a
bucket and are resolved by linear scan of that bucket's chain. Once the load
factor (size / capacity) reaches 0.75 the table doubles and every entry is
relocated against the new capacity.

Puts are insert-only-if-absent: storing a key that is already present is an
error, not an update.
"""

import logging

from map_adt import MapADT

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 32
LOAD_FACTOR_THRESHOLD = 0.75
GROWTH_FACTOR = 2


class HashMapError(Exception):
    """Base class for HashMap errors."""


class NullKeyError(HashMapError, ValueError):
    """Raised when None is used as a key."""

    def __init__(self):
        super().__init__("key must not be None")


class DuplicateKeyError(HashMapError, ValueError):
    """Raised when putting a key that already maps to a value."""

    def __init__(self, key):
        super().__init__(f"key already present: {key!r}")
        self.key = key


class KeyNotFoundError(HashMapError, KeyError):
    """Raised when looking up or removing a key that is not stored."""

    def __init__(self, key):
        super().__init__(key)
        self.key = key


class HashMap(MapADT):
    """Map from keys to values backed by an array of bucket chains.

    Keys must be hashable and comparable with ``==``. Iteration order is
    unspecified and changes when the table grows.

    Not thread-safe: concurrent mutation from several threads must be guarded
    by a lock held by the caller.
    """

    class Entry:
        def __init__(self, key, value):
            self.key = key
            self.value = value

        def __repr__(self):
            return f"Entry({self.key!r}, {self.value!r})"

    def __init__(self, capacity=DEFAULT_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self._size = 0
        self._buckets = self._new_table(capacity)

    @staticmethod
    def _new_table(capacity):
        return [[] for _ in range(capacity)]

    @staticmethod
    def _index_for(key, capacity):
        # abs() before modulo: hashes h and -h land in the same bucket.
        return abs(hash(key)) % capacity

    def _bucket_for(self, key):
        return self._buckets[self._index_for(key, len(self._buckets))]

    @staticmethod
    def _find(bucket, key):
        # Identity first so keys unequal to themselves (NaN) are still found.
        for i, entry in enumerate(bucket):
            if entry.key is key or entry.key == key:
                return i
        return -1

    def _rehash(self):
        old_buckets = self._buckets
        new_capacity = len(old_buckets) * GROWTH_FACTOR
        new_buckets = self._new_table(new_capacity)
        for bucket in old_buckets:
            for entry in bucket:
                new_buckets[self._index_for(entry.key, new_capacity)].append(entry)
        self._buckets = new_buckets
        logger.debug(
            "HashMap grew from %d to %d buckets (size=%d)",
            len(old_buckets), new_capacity, self._size,
        )

    def put(self, key, value):
        """Add a new mapping for key.

        Raises:
            NullKeyError: key is None.
            DuplicateKeyError: key already maps to a value; the existing
                mapping is left untouched.
            MemoryError: the table could not grow. The new entry stays
                stored in the old table and growth is retried on the next
                put.
        """
        if key is None:
            raise NullKeyError()
        bucket = self._bucket_for(key)
        if self._find(bucket, key) >= 0:
            raise DuplicateKeyError(key)
        bucket.append(self.Entry(key, value))
        self._size += 1
        if self._size / len(self._buckets) >= LOAD_FACTOR_THRESHOLD:
            self._rehash()

    def contains_key(self, key):
        return self._find(self._bucket_for(key), key) >= 0

    def get(self, key):
        """Return the value for key, raising KeyNotFoundError if absent."""
        bucket = self._bucket_for(key)
        i = self._find(bucket, key)
        if i < 0:
            raise KeyNotFoundError(key)
        return bucket[i].value

    def remove(self, key):
        """Remove key and return its value. Capacity never shrinks."""
        bucket = self._bucket_for(key)
        i = self._find(bucket, key)
        if i < 0:
            raise KeyNotFoundError(key)
        entry = bucket.pop(i)
        self._size -= 1
        return entry.value

    def clear(self):
        self._buckets = self._new_table(len(self._buckets))
        self._size = 0

    def size(self):
        return self._size

    def capacity(self):
        return len(self._buckets)

    def is_empty(self):
        return self._size == 0

    def load_factor(self):
        return self._size / len(self._buckets)

    def bucket_sizes(self):
        """Chain length of every bucket, in bucket index order."""
        return [len(bucket) for bucket in self._buckets]

    def items(self):
        return [(entry.key, entry.value) for bucket in self._buckets for entry in bucket]

    def keys(self):
        return [entry.key for bucket in self._buckets for entry in bucket]

    def values(self):
        return [entry.value for bucket in self._buckets for entry in bucket]

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.contains_key(key)

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        self.remove(key)

    def __iter__(self):
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key

    def __repr__(self):
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashMap({{{pairs}}})"

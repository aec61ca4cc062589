"""
Map ADT -- the contract every map in this project implements.

A map stores unique keys, each associated with one value. Implementations
decide how keys are placed; callers only rely on membership and association.
"""

from abc import ABC, abstractmethod


class MapADT(ABC):
    """Base class for key/value collections with insert-only-if-absent puts."""

    @abstractmethod
    def put(self, key, value) -> None:
        """Add a new key/value mapping. Existing keys are never overwritten."""
        pass

    @abstractmethod
    def contains_key(self, key) -> bool:
        """Return True if key maps to a value in this collection."""
        pass

    @abstractmethod
    def get(self, key):
        """Return the value that key maps to."""
        pass

    @abstractmethod
    def remove(self, key):
        """Remove the mapping for key and return the value it held."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every key/value pair."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Number of keys stored."""
        pass

    @abstractmethod
    def capacity(self) -> int:
        """Size of the underlying storage."""
        pass

"""
HashMap statistics -- NumPy measurements of chain distribution and growth.

Separate chaining is only O(1) on average if keys spread across buckets. These
helpers measure how a HashMap is actually laid out (chain lengths, empty
buckets, load factor) and record how size and capacity evolve while keys are
inserted, including the insertions that triggered a rehash.
"""

from typing import Any, Dict, Iterable

import numpy as np

from hash_map import DEFAULT_CAPACITY, HashMap


def chain_lengths(hash_map: HashMap) -> np.ndarray:
    """Chain length per bucket, shape (capacity,)."""
    return np.asarray(hash_map.bucket_sizes(), dtype=np.int64)


def chain_length_histogram(hash_map: HashMap) -> np.ndarray:
    """
    Number of buckets holding each chain length.

    Returns:
        counts where counts[n] is the number of buckets with exactly n entries.
        counts.sum() == capacity.
    """
    return np.bincount(chain_lengths(hash_map))


def occupancy_summary(hash_map: HashMap) -> Dict[str, Any]:
    """Size, capacity, load factor and chain shape of a map."""
    lengths = chain_lengths(hash_map)
    non_empty = lengths[lengths > 0]
    return {
        "size": int(lengths.sum()),
        "capacity": int(lengths.shape[0]),
        "load_factor": float(lengths.sum() / lengths.shape[0]),
        "empty_fraction": float(np.mean(lengths == 0)),
        "max_chain": int(lengths.max()),
        "mean_chain": float(non_empty.mean()) if non_empty.size else 0.0,
    }


def growth_trace(keys: Iterable, capacity: int = DEFAULT_CAPACITY) -> Dict[str, Any]:
    """
    Insert keys one at a time into a fresh HashMap and record its shape.

    Each key is stored with its insertion position as the value.

    Args:
        keys: Distinct keys to insert, in order
        capacity: Initial capacity of the map

    Returns:
        dict with arrays indexed by insertion step (0-based):
            size: entries after the step
            capacity: buckets after the step
            load_factor: size / capacity after the step
            rehash_points: steps whose insertion doubled the table
        and "map": the populated HashMap.
    """
    hash_map = HashMap(capacity)
    sizes, capacities = [], []
    for i, key in enumerate(keys):
        hash_map.put(key, i)
        sizes.append(hash_map.size())
        capacities.append(hash_map.capacity())

    sizes = np.asarray(sizes, dtype=np.int64)
    capacities = np.asarray(capacities, dtype=np.int64)
    previous = np.concatenate(([capacity], capacities[:-1])) if capacities.size else capacities
    return {
        "size": sizes,
        "capacity": capacities,
        "load_factor": sizes / capacities,
        "rehash_points": np.nonzero(capacities != previous)[0],
        "map": hash_map,
    }

import sys
from typing import Callable, Iterator, List, Tuple

from errors import NotFoundError


def default_hash(key) -> int:
    """Hash a key with Python's built-in ``hash``.

    :param key: Hashable key.
    :returns: Non-negative hash value.
    :rtype: int
    """
    return hash(key) & sys.maxsize


class HashTable:
    """Map backed by a separate-chaining hash table.

    Each bucket is a list of ``[key, value]`` entries. Iteration order
    follows bucket layout and is not part of the contract.

    :ivar buckets: Chains of entries, indexed by ``hash % len(buckets)``.
    :type buckets: List[list]
    """

    DEFAULT_CAPACITY = 11

    def __init__(
        self,
        initial_capacity: int = DEFAULT_CAPACITY,
        hash_function: Callable[[object], int] = default_hash,
        load_factor: float = 0.75,
    ):
        """Create an empty table.

        :param initial_capacity: Number of buckets to start with.
        :type initial_capacity: int
        :param hash_function: Function mapping a key to an integer.
        :type hash_function: Callable[[object], int]
        :param load_factor: Maximum ``size / buckets`` before the table grows.
        :type load_factor: float
        :raises ValueError: If capacity or load factor are out of range.
        """
        if initial_capacity < 1:
            raise ValueError(f"Capacity must be positive: {initial_capacity}")
        if not 0 < load_factor <= 1:
            raise ValueError(f"Load factor must be in (0, 1]: {load_factor}")
        self.hash_function = hash_function
        self.load_factor = load_factor
        self.buckets: List[list] = [[] for _ in range(initial_capacity)]
        self._size = 0

    def _bucket(self, key) -> list:
        return self.buckets[self.hash_function(key) % len(self.buckets)]

    def _rehash(self):
        old = self.buckets
        self.buckets = [[] for _ in range(2 * len(old) + 1)]
        for bucket in old:
            for entry in bucket:
                self._bucket(entry[0]).append(entry)

    def get(self, key):
        """Return the value stored under ``key``.

        :raises NotFoundError: If ``key`` is not in the table.
        """
        for entry in self._bucket(key):
            if entry[0] == key:
                return entry[1]
        raise NotFoundError(key)

    def put(self, key, value) -> None:
        """Insert ``key`` or overwrite its value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])
        self._size += 1
        if self._size / len(self.buckets) > self.load_factor:
            self._rehash()

    def remove(self, key):
        """Delete ``key`` and return the value it held.

        :raises NotFoundError: If ``key`` is not in the table.
        """
        bucket = self._bucket(key)
        for i, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[i]
                self._size -= 1
                return entry[1]
        raise NotFoundError(key)

    def contains_key(self, key) -> bool:
        return any(entry[0] == key for entry in self._bucket(key))

    def keys(self) -> List:
        return [entry[0] for bucket in self.buckets for entry in bucket]

    def values(self) -> List:
        return [entry[1] for bucket in self.buckets for entry in bucket]

    def items(self) -> List[Tuple]:
        return [
            (entry[0], entry[1]) for bucket in self.buckets for entry in bucket
        ]

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self.buckets = [[] for _ in range(len(self.buckets))]
        self._size = 0

    def print(self, out=None) -> None:
        """Write every entry as a ``key: value`` line, for debugging.

        :param out: Text stream to write to (default: ``sys.stdout``).
        """
        out = sys.stdout if out is None else out
        for key, value in self.items():
            out.write(f"{key!r}: {value!r}\n")

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator:
        return iter(self.keys())

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        self.remove(key)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashTable({{{inner}}})"

from bisect import bisect_right
from typing import Callable, Iterator, List, Optional

from errors import IndexOutOfRangeError


class SortedList:
    """Growable sequence kept in ascending order of ``key(item)``.

    Keys are cached in a parallel list so the insertion point can be found
    with :func:`bisect.bisect_right`. Items with equal keys keep their
    insertion order.

    :ivar key: Function returning the ordering value of an item.
    :type key: Callable[[object], object]
    """

    def __init__(self, key: Optional[Callable] = None):
        """Create an empty sorted list.

        :param key: Ordering function; items are compared directly if omitted.
        :type key: Optional[Callable]
        :returns: None
        :rtype: None
        """
        self.key = key if key is not None else (lambda item: item)
        self._items: List = []
        self._keys: List = []

    def _check_index(self, index: int):
        if not 0 <= index < len(self._items):
            raise IndexOutOfRangeError(
                f"Index {index} out of range for size {len(self._items)}"
            )

    def add(self, item) -> None:
        """Insert ``item`` after every element whose key is not greater."""
        k = self.key(item)
        pos = bisect_right(self._keys, k)
        self._keys.insert(pos, k)
        self._items.insert(pos, item)

    def remove_index(self, index: int):
        """Remove and return the element at ``index``.

        :param int index: Position in ``[0, size)``.
        :returns: The removed element.
        :raises IndexOutOfRangeError: If ``index`` is out of range.
        """
        self._check_index(index)
        del self._keys[index]
        return self._items.pop(index)

    def get(self, index: int):
        """Return the element at ``index`` without removing it.

        :raises IndexOutOfRangeError: If ``index`` is out of range.
        """
        self._check_index(index)
        return self._items[index]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items = []
        self._keys = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(list(self._items))

    def __getitem__(self, index: int):
        return self.get(index)

    def __repr__(self) -> str:
        return f"SortedList({self._items!r})"

class HuffmanError(Exception):
    """Base class for every error raised by the Huffman coder."""


class EmptyInputError(HuffmanError, ValueError):
    """There are no symbols to process, so no tree can be built."""


class IndexOutOfRangeError(HuffmanError, IndexError):
    """A :class:`sortedlist.SortedList` was accessed outside ``[0, size)``."""


class NotFoundError(HuffmanError, KeyError):
    """A key is not present in a :class:`hashtable.HashTable`."""


class MissingCodeError(HuffmanError, KeyError):
    """A symbol being encoded has no entry in the code table.

    Cannot happen when the code table was derived from the same text;
    seeing it means a table was reused for different input.
    """

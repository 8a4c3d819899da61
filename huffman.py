from typing import Iterator, NamedTuple, Tuple

from errors import EmptyInputError, MissingCodeError
from hashtable import HashTable
from sortedlist import SortedList
from tree import PriorityNode, priority_key


class HuffmanResult(NamedTuple):
    """Everything produced by one :meth:`HuffmanBuilder.run`.

    :ivar text: The original input.
    :ivar frequencies: Symbol to count.
    :ivar root: Root of the Huffman tree.
    :ivar codes: Symbol to code (a string of ``'0'``/``'1'``).
    :ivar encoded: Concatenated codes of ``text``.
    """

    text: str
    frequencies: HashTable
    root: PriorityNode
    codes: HashTable
    encoded: str


class HuffmanBuilder:
    """Huffman coder producing textual bit-string codes.

    The pipeline is frequency counting, tree construction, code derivation
    and encoding. Each stage only depends on the output of the previous
    one; ties between nodes of equal frequency are broken by payload, so
    the same text always yields the same tree and codes.
    """

    @staticmethod
    def compute_frequencies(text: str) -> HashTable:
        """Count how often each character occurs in ``text``.

        :param text: Input text.
        :type text: str
        :returns: Mapping from symbol to its count.
        :rtype: HashTable
        :raises EmptyInputError: If ``text`` is empty or ``None``.
        """
        if not text:
            raise EmptyInputError("Input can't be empty")
        frequencies = HashTable()
        for symbol in text:
            if frequencies.contains_key(symbol):
                frequencies.put(symbol, frequencies.get(symbol) + 1)
            else:
                frequencies.put(symbol, 1)
        return frequencies

    @staticmethod
    def merge_frequencies(*tables: HashTable) -> HashTable:
        """Sum several frequency tables, e.g. counts of separate chunks.

        :param tables: Partial frequency tables.
        :type tables: HashTable
        :returns: New table holding the summed counts.
        :rtype: HashTable
        """
        merged = HashTable()
        for table in tables:
            for symbol, count in table.items():
                if merged.contains_key(symbol):
                    merged.put(symbol, merged.get(symbol) + count)
                else:
                    merged.put(symbol, count)
        return merged

    @staticmethod
    def build_tree(frequencies: HashTable) -> PriorityNode:
        """Build the Huffman tree for a frequency table.

        The two smallest nodes are repeatedly removed and merged, the first
        removed becoming the left child. With a single distinct symbol the
        lone leaf is returned as the root.

        :param frequencies: Mapping from symbol to count.
        :type frequencies: HashTable
        :returns: Root of the tree.
        :rtype: PriorityNode
        :raises EmptyInputError: If ``frequencies`` is empty.
        """
        if frequencies.is_empty():
            raise EmptyInputError("Cannot build a tree without symbols")

        queue = SortedList(key=priority_key)
        for symbol, count in frequencies.items():
            queue.add(PriorityNode(count, symbol))

        while queue.size() > 1:
            left = queue.remove_index(0)
            right = queue.remove_index(0)
            queue.add(PriorityNode.merge(left, right))

        return queue.get(0)

    @staticmethod
    def iter_codes(root: PriorityNode) -> Iterator[Tuple[str, str]]:
        """Yield ``(symbol, code)`` for every leaf, left to right.

        A lone leaf root yields an empty code.
        """
        stack = [(root, "")]
        while stack:
            node, code = stack.pop()
            if node.is_leaf():
                yield node.payload, code
            else:
                stack.append((node.right, code + "1"))
                stack.append((node.left, code + "0"))

    @classmethod
    def derive_codes(cls, root: PriorityNode) -> HashTable:
        """Build the symbol to code table of a tree.

        :param root: Root of a Huffman tree.
        :type root: PriorityNode
        :returns: Mapping from symbol to its code.
        :rtype: HashTable
        """
        codes = HashTable()
        for symbol, code in cls.iter_codes(root):
            codes.put(symbol, code)
        return codes

    @staticmethod
    def encode(codes: HashTable, text: str) -> str:
        """Replace every symbol of ``text`` by its code.

        :param codes: Mapping from symbol to code.
        :type codes: HashTable
        :param text: Text to encode.
        :type text: str
        :returns: Concatenated codes.
        :rtype: str
        :raises MissingCodeError: If a symbol has no code.
        """
        parts = []
        for symbol in text:
            if not codes.contains_key(symbol):
                raise MissingCodeError(symbol)
            parts.append(codes.get(symbol))
        return "".join(parts)

    def run(self, text: str) -> HuffmanResult:
        """Run the whole pipeline on ``text``.

        :param text: Input text.
        :type text: str
        :returns: Frequencies, tree, codes and encoded text.
        :rtype: HuffmanResult
        :raises EmptyInputError: If ``text`` is empty or ``None``.
        """
        frequencies = self.compute_frequencies(text)
        root = self.build_tree(frequencies)
        codes = self.derive_codes(root)
        encoded = self.encode(codes, text)
        return HuffmanResult(text, frequencies, root, codes, encoded)

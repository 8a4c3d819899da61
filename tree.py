import weakref
from typing import Iterator, List, Optional, Tuple


class PriorityNode:
    """Node of a Huffman tree.

    A leaf holds one symbol as its payload. An internal node holds the
    concatenated payloads of both children and the sum of their
    frequencies; it always has exactly two children. Nodes are not
    modified after :meth:`merge` links them.

    :ivar freq: Frequency (weight) of the subtree rooted at this node.
    :type freq: int
    :ivar payload: Symbols covered by this subtree, left to right.
    :type payload: str
    :ivar left: Left child, ``None`` for leaves.
    :type left: PriorityNode | None
    :ivar right: Right child, ``None`` for leaves.
    :type right: PriorityNode | None
    """

    def __init__(self, freq: int, payload: str):
        """Create a leaf node.

        :param int freq: Frequency of the symbol.
        :param str payload: The symbol itself.
        :returns: None
        :rtype: None
        """
        self.freq = freq
        self.payload = payload
        self.left: Optional[PriorityNode] = None
        self.right: Optional[PriorityNode] = None
        self._parent: Optional[weakref.ref] = None

    @classmethod
    def merge(cls, left: "PriorityNode", right: "PriorityNode") -> "PriorityNode":
        """Create the internal node joining ``left`` and ``right``.

        :param left: Node placed on the ``0`` branch.
        :type left: PriorityNode
        :param right: Node placed on the ``1`` branch.
        :type right: PriorityNode
        :returns: New parent node.
        :rtype: PriorityNode
        """
        node = cls(left.freq + right.freq, left.payload + right.payload)
        node.left = left
        node.right = right
        left._parent = right._parent = weakref.ref(node)
        return node

    @property
    def parent(self) -> Optional["PriorityNode"]:
        """Parent node, or ``None`` for a root. Not an owning reference."""
        return self._parent() if self._parent is not None else None

    @property
    def text(self) -> str:
        return f"{self.freq}:{self.payload}"

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def leaves(self) -> Iterator["PriorityNode"]:
        """Yield the leaves of this subtree from left to right."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                yield node
            else:
                stack.append(node.right)
                stack.append(node.left)

    def __repr__(self) -> str:
        return f"PriorityNode({self.freq!r}, {self.payload!r})"


def priority_key(node: PriorityNode) -> Tuple[int, str]:
    """Ordering value of a node: frequency first, then payload.

    :param node: Node to rank.
    :type node: PriorityNode
    :returns: ``(freq, payload)``
    :rtype: Tuple[int, str]
    """
    return node.freq, node.payload


def format_tree(root: PriorityNode, indent: str = "    ") -> str:
    """Render a tree sideways, one ``freq:payload`` node per line.

    Children are indented one level deeper than their parent and tagged
    with the bit of the branch leading to them.

    :param root: Root of the tree to render.
    :type root: PriorityNode
    :param indent: Text used for one level of indentation.
    :type indent: str
    :returns: Multi-line rendering without a trailing newline.
    :rtype: str
    """
    lines: List[str] = []
    stack = [(root, 0, "")]
    while stack:
        node, depth, bit = stack.pop()
        prefix = f"{bit}- " if bit else ""
        lines.append(f"{indent * depth}{prefix}{node.text}")
        if not node.is_leaf():
            stack.append((node.right, depth + 1, "1"))
            stack.append((node.left, depth + 1, "0"))
    return "\n".join(lines)

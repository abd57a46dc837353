import heapq
from typing import Dict, Hashable, Iterator, List, Optional

from errors import EmptyAlphabetError


class HuffmanNode:
    """Node for a standard binary Huffman tree.

    :ivar symbol: The symbol stored at a leaf; ``None`` for internal nodes.
    :type symbol: Hashable | None
    :ivar freq: Frequency (weight) of the subtree rooted at this node.
    :type freq: int
    :ivar order: Creation sequence number, used to break frequency ties.
    :type order: int
    :ivar left: Left child node (bit ``0``).
    :type left: HuffmanNode | None
    :ivar right: Right child node (bit ``1``).
    :type right: HuffmanNode | None
    """

    def __init__(self, symbol=None, freq=0, order=0, left=None, right=None):
        """Create a Huffman node.

        :param symbol: Symbol value for leaf nodes; ``None`` for internal nodes.
        :type symbol: Hashable | None
        :param int freq: Frequency (weight) associated with this node.
        :param int order: Creation sequence number of this node.
        :param left: Left child node, if any.
        :type left: HuffmanNode|None
        :param right: Right child node, if any.
        :type right: HuffmanNode|None
        :returns: None
        :rtype: None
        """
        self.symbol = symbol
        self.freq = freq
        self.order = order
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        """``True`` if the node has no children."""
        return self.left is None and self.right is None

    def __lt__(self, other):
        """Order nodes by frequency, then by creation order (for priority queues).

        :param other: Another node to compare with.
        :type other: HuffmanNode
        :returns: ``True`` if this node sorts before ``other``.
        :rtype: bool
        """
        return (self.freq, self.order) < (other.freq, other.order)

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol!r}, freq={self.freq})"
        return f"HuffmanNode(freq={self.freq}, order={self.order})"


def find_path(node: Optional[HuffmanNode], symbol, path: str = "") -> Optional[str]:
    """Search the tree depth-first for the leaf holding ``symbol``.

    The left subtree is explored before the right one.

    :param node: Subtree to search.
    :type node: HuffmanNode | None
    :param symbol: Symbol to look for.
    :param path: Bits already taken from the root to ``node``.
    :type path: str
    :returns: The bit path to the leaf, or ``None`` if ``symbol`` is absent.
    :rtype: str | None
    """
    if node is None:
        return None

    stack = [(node, path)]
    while stack:
        current, bits = stack.pop()
        if current.is_leaf:
            if current.symbol == symbol:
                return bits
        else:
            stack.append((current.right, bits + "1"))
            stack.append((current.left, bits + "0"))
    return None


class HuffmanTree:
    """Huffman tree built once from a frequency table.

    Ties between equal frequencies go to the node created first: leaves are
    numbered in the key order of the frequency table, merged nodes get the
    next number when they are created.

    :ivar root: Root node of the tree.
    :type root: HuffmanNode
    :ivar codes: Mapping from symbol to its bit path.
    :type codes: Dict[Hashable, str]
    """

    def __init__(self, root: HuffmanNode):
        """Wrap an already built tree and precompute its code table.

        :param root: Root node of the tree.
        :type root: HuffmanNode
        :returns: None
        :rtype: None
        """
        self.root = root
        self.codes: Dict[Hashable, str] = {}
        self._collect_codes()

    @classmethod
    def build(cls, frequencies: Dict[Hashable, int]) -> "HuffmanTree":
        """Build a Huffman tree from a symbol frequency table.

        :param frequencies: Mapping from symbol to observed frequency.
        :type frequencies: Dict[Hashable, int]
        :returns: The built tree.
        :rtype: HuffmanTree
        :raises EmptyAlphabetError: If ``frequencies`` is empty.
        :raises ValueError: If a frequency is not positive.
        """
        if not frequencies:
            raise EmptyAlphabetError("Cannot build a Huffman tree without symbols")

        heap: List[HuffmanNode] = []
        for order, (sym, freq) in enumerate(frequencies.items()):
            if freq <= 0:
                raise ValueError(f"Frequency of {sym!r} must be positive, got {freq}")
            heap.append(HuffmanNode(symbol=sym, freq=freq, order=order))
        heapq.heapify(heap)

        next_order = len(heap)
        while len(heap) > 1:
            left = heapq.heappop(heap)
            right = heapq.heappop(heap)
            merged = HuffmanNode(
                freq=left.freq + right.freq,
                order=next_order,
                left=left,
                right=right,
            )
            next_order += 1
            heapq.heappush(heap, merged)

        return cls(heap[0])

    def _collect_codes(self):
        """Populate ``codes`` by walking the tree once, left before right.

        :returns: None
        :rtype: None
        """
        stack = [(self.root, "")]
        while stack:
            node, path = stack.pop()
            if node.is_leaf:
                self.codes[node.symbol] = path
            else:
                stack.append((node.right, path + "1"))
                stack.append((node.left, path + "0"))

    @property
    def is_single_leaf(self) -> bool:
        """``True`` when the alphabet had one symbol and the root is its leaf."""
        return self.root.is_leaf

    def path_of(self, symbol) -> Optional[str]:
        """Get the bit path for a symbol.

        :param symbol: Symbol to encode.
        :returns: The symbol's path (``""`` for a single-leaf tree), or
            ``None`` if the symbol is not in the tree.
        :rtype: str | None
        """
        return self.codes.get(symbol)

    def leaves(self) -> Iterator[HuffmanNode]:
        """Yield the leaves from left to right."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node
            else:
                stack.append(node.right)
                stack.append(node.left)

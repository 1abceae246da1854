"""
Huffman coding algorithm -
frequency analysis, tree construction and code generation
"""
import heapq
import itertools
import logging
from collections import Counter

logger = logging.getLogger(__name__)


class Leaf:
    """
    Leaf of Huffman's Tree, holds exactly one symbol
    """

    def __init__(self, symbol: int, freq: int = 0):
        """
        Function initializes the structure of a leaf.

        :param symbol: int, byte value held by the leaf
        :param freq: int, the frequency in our data for this value
        """
        self.symbol = symbol
        self.freq = freq

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.freq!r})"


class Internal:
    """
    Internal node of Huffman's Tree, owns exactly two children
    """

    def __init__(self, left, right):
        """
        Function initializes the structure of an internal node.
        Its frequency is the sum of its children's frequencies.

        :param left: Leaf | Internal, subtree reached with bit 0
        :param right: Leaf | Internal, subtree reached with bit 1
        """
        self.left = left
        self.right = right
        self.freq = left.freq + right.freq

    def __repr__(self):
        return f"Internal({self.left!r}, {self.right!r})"


def char_frequency(data) -> dict[int, int]:
    """
    Function builds dictionary with frequency
    of each byte value for given data.

    :param data: bytes-like, data to count symbol frequency for
    :return: dict, byte value -> number of occurrences (only symbols that occur)
    """
    return dict(Counter(data))


def build_tree(freqs: dict[int, int]):
    """
    Function builds Huffman Tree.

    Nodes are ordered by (frequency, insertion sequence). Leaves are inserted
    in ascending symbol order and every merged node takes the next sequence
    number, so equal frequencies always resolve the same way.

    :param freqs: dict, byte value -> frequency
    :return: root node, a lone Leaf for a single symbol, None for no symbols
    """
    if not freqs:
        return None

    sequence = itertools.count()
    nodes = [(freq, next(sequence), Leaf(symbol, freq))
             for symbol, freq in sorted(freqs.items())]
    if len(nodes) == 1:
        return nodes[0][2]

    heapq.heapify(nodes)
    while len(nodes) != 1:
        # left smallest node
        _, _, l = heapq.heappop(nodes)
        # right smallest node
        _, _, r = heapq.heappop(nodes)

        merged = Internal(l, r)
        heapq.heappush(nodes, (merged.freq, next(sequence), merged))

    return nodes[0][2]


def codes_generation(root) -> dict[int, str]:
    """
    Function generates code for each symbol,
    preorder traversal of Huffman's tree with an explicit stack

    :param root: root of the tree from build_tree
    :return: dict, byte value -> code made of '0' and '1'
    """
    if root is None:
        return {}
    # a single symbol never went through a merge, give it a one-bit code
    if isinstance(root, Leaf):
        return {root.symbol: "0"}

    res_codes = {}
    stack = [(root, "")]
    while stack:
        node, curr_code = stack.pop()
        if isinstance(node, Leaf):
            res_codes[node.symbol] = curr_code
            continue
        stack.append((node.right, curr_code + "1"))
        stack.append((node.left, curr_code + "0"))

    logger.debug(
        "Generated %d codes, lengths %d..%d",
        len(res_codes),
        min(map(len, res_codes.values())),
        max(map(len, res_codes.values())),
    )
    return res_codes


def code_table_report(codes: dict[int, str]) -> list[tuple[str, str]]:
    """
    Printable rows of a code table, shortest codes first.

    :param codes: dict, byte value -> code
    :return: list of (printable symbol, code)
    """
    rows = []
    for symbol, code in sorted(codes.items(), key=lambda x: (len(x[1]), x[0])):
        char = chr(symbol) if 32 <= symbol <= 126 else f"\\x{symbol:02x}"
        rows.append((char, code))
    return rows

"""
Serialization of the Huffman tree shape into a compact preorder descriptor.

A leaf is written as bit 1 followed by its 8-bit symbol, an internal node as
bit 0 followed by its left and then right subtree. The descriptor is padded
with zeros to a whole number of bytes.
"""
import logging

from huffpack.bit_utils.bit_reader import BitReader
from huffpack.bit_utils.bit_writer import BitWriter
from huffpack.errors import CorruptStreamError, InvalidHeaderError
from huffpack.huffman_coding import Internal, Leaf

logger = logging.getLogger(__name__)

MAX_SYMBOLS = 256
SYMBOL_BITS = 8


class TreeCodec:
    """Preorder encoder/decoder for Huffman tree shapes."""

    @staticmethod
    def descriptor_size(symbol_count: int) -> int:
        """
        Size in bytes of the descriptor for a tree with symbol_count leaves.

        A full binary tree with n leaves has n - 1 internal nodes, so the
        descriptor holds n * 9 + (n - 1) bits.
        """
        if symbol_count <= 0:
            return 0
        return (10 * symbol_count - 1 + 7) // 8

    @staticmethod
    def serialize(root) -> bytes:
        """
        Write the tree shape in preorder.

        Args:
            root: Root node, or None for the empty tree

        Returns:
            The byte-aligned descriptor
        """
        writer = BitWriter()
        stack = [root] if root is not None else []
        while stack:
            node = stack.pop()
            if isinstance(node, Leaf):
                writer.write_bits_msb(1, 1)
                writer.write_bits_msb(node.symbol, SYMBOL_BITS)
            else:
                writer.write_bits_msb(0, 1)
                stack.append(node.right)
                stack.append(node.left)
        return writer.to_bytes()

    @staticmethod
    def deserialize(header: bytes, symbol_count: int):
        """
        Rebuild a tree from its preorder descriptor.

        Args:
            header: Descriptor bytes
            symbol_count: Number of leaves declared in front of the descriptor

        Returns:
            Root node, or None when symbol_count is 0

        Raises:
            InvalidHeaderError: If the descriptor ends before the tree is complete
            CorruptStreamError: If the leaves found disagree with symbol_count
        """
        if not 0 <= symbol_count <= MAX_SYMBOLS:
            raise InvalidHeaderError(f"Symbol count {symbol_count} outside 0..{MAX_SYMBOLS}")
        if symbol_count == 0:
            return None

        reader = BitReader(header)
        seen = set()
        # children collected so far for every internal node still open
        pending = []
        try:
            while True:
                if reader.read_bit():
                    symbol = reader.read_bits_msb(SYMBOL_BITS)
                    if symbol in seen:
                        raise CorruptStreamError(f"Symbol {symbol} appears twice in tree descriptor")
                    seen.add(symbol)
                    node = Leaf(symbol)
                else:
                    if len(pending) >= MAX_SYMBOLS:
                        raise CorruptStreamError("Tree descriptor is deeper than any valid tree")
                    pending.append([])
                    continue

                while pending:
                    pending[-1].append(node)
                    if len(pending[-1]) < 2:
                        break
                    left, right = pending.pop()
                    node = Internal(left, right)
                else:
                    break
        except EOFError as e:
            logger.error("Tree descriptor truncated after %d leaves", len(seen))
            raise InvalidHeaderError(f"Failed to read tree descriptor: {e}") from e

        if len(seen) != symbol_count:
            logger.error("Header declares %d symbols, descriptor holds %d", symbol_count, len(seen))
            raise CorruptStreamError(
                f"Header declares {symbol_count} symbols but tree has {len(seen)} leaves"
            )
        return node

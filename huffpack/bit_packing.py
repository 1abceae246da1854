"""
Packing of Huffman codes into padded bytes and the reverse tree walk.
"""
import logging

from bitarray import bitarray

from huffpack.errors import CorruptStreamError
from huffpack.huffman_coding import Leaf

logger = logging.getLogger(__name__)


def pack(data: bytes, codes: dict[int, str]) -> tuple[int, bytes]:
    """
    Concatenate the code of every input byte and zero-pad to a byte boundary.

    Args:
        data: Original bytes
        codes: Byte value -> code made of '0' and '1'

    Returns:
        (padding_bits, packed_bytes) where padding_bits is 0..7
    """
    res = bitarray(endian="big")
    if data:
        res.encode({symbol: bitarray(code) for symbol, code in codes.items()}, data)
    total_bits = len(res)
    padding_bits = res.fill()
    logger.debug("Packed %d bits, %d padding bits", total_bits, padding_bits)
    return padding_bits, res.tobytes()


def unpack(padding_bits: int, payload: bytes, root) -> bytes:
    """
    Walk the tree bit by bit over the payload and collect the decoded bytes.

    Args:
        padding_bits: Number of trailing filler bits in the last byte
        payload: Packed bytes
        root: Tree rebuilt from the descriptor (Leaf, Internal or None)

    Returns:
        The decoded bytes

    Raises:
        CorruptStreamError: On invalid padding or when the walk does not end
            on a leaf boundary
    """
    if not 0 <= padding_bits <= 7:
        raise CorruptStreamError(f"Padding bit count {padding_bits} outside 0..7")

    data = bitarray(endian="big")
    data.frombytes(payload)
    if padding_bits > len(data):
        raise CorruptStreamError(
            f"Padding of {padding_bits} bits exceeds payload of {len(data)} bits"
        )
    if padding_bits:
        del data[-padding_bits:]

    if root is None:
        if data:
            raise CorruptStreamError(f"{len(data)} payload bits but no code tree")
        return b""

    decoded_data = bytearray()
    if isinstance(root, Leaf):
        if data.any():
            raise CorruptStreamError("Bit 1 found in a single-symbol stream")
        decoded_data.extend(bytes([root.symbol]) * len(data))
        return bytes(decoded_data)

    node = root
    for bit in data:
        node = node.right if bit else node.left
        if isinstance(node, Leaf):
            decoded_data.append(node.symbol)
            node = root

    if node is not root:
        raise CorruptStreamError("Payload ends in the middle of a code")
    return bytes(decoded_data)

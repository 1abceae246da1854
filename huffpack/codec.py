"""
Huffman compression of in-memory byte sequences.

compress() and decompress() are the two operations of the core: they never
touch files or the console, and every call builds its own frequency table,
tree and code table.
"""
import binascii
import logging

from huffpack import bit_packing
from huffpack.container import CompressedContainer
from huffpack.errors import CorruptStreamError
from huffpack.huffman_coding import build_tree, char_frequency, codes_generation
from huffpack.tree_codec import TreeCodec

logger = logging.getLogger(__name__)


def compress(data: bytes) -> CompressedContainer:
    """
    Compress bytes into a self-describing container.

    Args:
        data: Bytes to compress, may be empty

    Returns:
        A container that decompress() inverts exactly
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")
    data = bytes(data)

    freqs = char_frequency(data)
    root = build_tree(freqs)
    codes = codes_generation(root)
    header = TreeCodec.serialize(root)
    padding_bits, payload = bit_packing.pack(data, codes)

    logger.debug(
        "Compressed %d bytes: %d symbols, %d header bytes, %d payload bytes",
        len(data), len(freqs), len(header), len(payload),
    )
    return CompressedContainer(
        symbol_count=len(freqs),
        header=header,
        padding_bits=padding_bits,
        payload=payload,
        original_size=len(data),
        checksum=binascii.crc32(data) & 0xffffffff,
    )


def decompress(container: CompressedContainer) -> bytes:
    """
    Rebuild the original bytes from a container.

    Raises:
        CorruptStreamError: If header and payload disagree with each other
        InvalidHeaderError: If the tree descriptor cannot be parsed
    """
    if not 0 <= container.padding_bits <= 7:
        logger.error("Padding bit count %d outside 0..7", container.padding_bits)
        raise CorruptStreamError(f"Padding bit count {container.padding_bits} outside 0..7")

    root = TreeCodec.deserialize(container.header, container.symbol_count)
    try:
        decoded_data = bit_packing.unpack(container.padding_bits, container.payload, root)
    except CorruptStreamError as e:
        logger.error("Payload rejected: %s", e)
        raise

    # Verify size and CRC
    if len(decoded_data) != container.original_size:
        logger.error("Decoded %d bytes, expected %d", len(decoded_data), container.original_size)
        raise CorruptStreamError(
            f"Size mismatch: expected {container.original_size}, got {len(decoded_data)}"
        )
    crc_actual = binascii.crc32(decoded_data) & 0xffffffff
    if crc_actual != container.checksum:
        logger.error("CRC mismatch on %d decoded bytes", len(decoded_data))
        raise CorruptStreamError(
            f"CRC mismatch: expected {container.checksum:08X}, got {crc_actual:08X}"
        )

    logger.debug("Decompressed %d bytes", len(decoded_data))
    return decoded_data


def compress_bytes(data: bytes) -> bytes:
    """Compress data and return the serialized container."""
    return compress(data).to_bytes()


def decompress_bytes(blob: bytes) -> bytes:
    """Parse a serialized container and return the original data."""
    return decompress(CompressedContainer.from_bytes(blob))

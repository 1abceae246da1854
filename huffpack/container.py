"""
Self-describing container for Huffman compressed data.

Layout (all integers big-endian):

    magic           4 bytes   b"HUFP"
    symbol_count    2 bytes   0..256
    tree descriptor           TreeCodec.descriptor_size(symbol_count) bytes
    padding_bits    1 byte    0..7
    original_size   8 bytes
    crc32           4 bytes   CRC-32 of the original bytes
    payload                   remaining bytes
"""
import struct
from dataclasses import dataclass

from huffpack.errors import InvalidHeaderError
from huffpack.tree_codec import MAX_SYMBOLS, TreeCodec

MAGIC = b"HUFP"

_PREFIX = struct.Struct(">4sH")
_TRAILER = struct.Struct(">BQI")


@dataclass(frozen=True)
class CompressedContainer:
    """
    Everything needed to rebuild the original bytes.

    header is the tree descriptor; symbol_count is stored in front of it.
    """

    symbol_count: int
    header: bytes
    padding_bits: int
    payload: bytes
    original_size: int
    checksum: int

    def to_bytes(self) -> bytes:
        """Serialize the container to its on-disk form."""
        out = bytearray()
        out.extend(_PREFIX.pack(MAGIC, self.symbol_count))
        out.extend(self.header)
        out.extend(_TRAILER.pack(self.padding_bits, self.original_size, self.checksum))
        out.extend(self.payload)
        return bytes(out)

    @classmethod
    def from_bytes(cls, blob: bytes) -> "CompressedContainer":
        """
        Split serialized data into container fields.

        Only the framing is checked here; consistency of the fields is
        verified when the container is decompressed.

        Raises:
            InvalidHeaderError: On a bad magic number, an impossible symbol
                count or data too short for the header
        """
        blob = bytes(blob)
        if len(blob) < _PREFIX.size:
            raise InvalidHeaderError(f"Container of {len(blob)} bytes is too short")
        magic, symbol_count = _PREFIX.unpack_from(blob, 0)
        if magic != MAGIC:
            raise InvalidHeaderError("Invalid magic number")
        if symbol_count > MAX_SYMBOLS:
            raise InvalidHeaderError(f"Symbol count {symbol_count} outside 0..{MAX_SYMBOLS}")

        pos = _PREFIX.size
        header_end = pos + TreeCodec.descriptor_size(symbol_count)
        if len(blob) < header_end + _TRAILER.size:
            raise InvalidHeaderError("Container ends inside the header")
        header = blob[pos:header_end]
        padding_bits, original_size, checksum = _TRAILER.unpack_from(blob, header_end)

        return cls(
            symbol_count=symbol_count,
            header=header,
            padding_bits=padding_bits,
            payload=blob[header_end + _TRAILER.size:],
            original_size=original_size,
            checksum=checksum,
        )

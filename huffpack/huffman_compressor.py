"""
Stream front end for the Huffman codec.
"""
import logging
from typing import BinaryIO

from huffpack.codec import compress, decompress
from huffpack.compressor_ABC import Compressor
from huffpack.container import CompressedContainer

logger = logging.getLogger(__name__)


class HuffmanCompressor(Compressor):
    """
    Implements the Compressor interface with self-describing Huffman containers.
    The whole input is read before coding starts since the code table needs
    a complete frequency pass.
    """

    def __init__(self):
        self.log = []

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Compress everything in input_stream into output_stream.
        Returns log information.
        """
        self.log.clear()
        data = input_stream.read()
        blob = compress(data).to_bytes()
        output_stream.write(blob)

        # Log statistics
        diff = len(data) - len(blob)
        if diff > 0:
            ratio = (1 - (len(blob) / len(data))) * 100
            self.log.append(f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)")
        else:
            self.log.append(f"Size increased by {-diff} bytes")
        logger.info("Compressed %d bytes into %d bytes", len(data), len(blob))

        return '\n'.join(self.log)

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Decompress a serialized container from input_stream into output_stream.
        Returns log information.
        """
        self.log.clear()
        blob = input_stream.read()
        data = decompress(CompressedContainer.from_bytes(blob))
        output_stream.write(data)

        self.log.append(f"Restored {len(data)} bytes from {len(blob)} compressed bytes")
        logger.info("Decompressed %d bytes into %d bytes", len(blob), len(data))

        return '\n'.join(self.log)

from abc import ABC, abstractmethod
import io
from typing import BinaryIO


class Compressor(ABC):
    """
    Interface describing compression and decompression of byte streams.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Read all bytes from the input stream, compress them and write the
        result to the output stream.

        Args:
            input_stream: Stream with the original data
            output_stream: Stream to write compressed data to

        Returns:
            A line of information for logging
        """

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Read compressed bytes from the input stream, decompress them and
        write the original data to the output stream.

        Args:
            input_stream: Stream with compressed data
            output_stream: Stream to write decompressed data to

        Returns:
            A line of information for logging
        """

    @classmethod
    def compress_file(cls, input_file: str, output_file: str) -> str:
        """
        Helper for compressing a file.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file

        Returns:
            Compression information
        """
        compressor = cls()
        with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
            return compressor.compress(in_file, out_file)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str) -> str:
        """
        Helper for decompressing a file.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file

        Returns:
            Decompression information
        """
        compressor = cls()
        # decode fully before creating the output so a corrupt input leaves no partial file
        with open(input_file, 'rb') as in_file:
            out_buffer = io.BytesIO()
            log_info = compressor.decompress(in_file, out_buffer)
        with open(output_file, 'wb') as out_file:
            out_file.write(out_buffer.getvalue())
        return log_info

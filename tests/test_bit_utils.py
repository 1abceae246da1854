import pytest

from huffpack.bit_utils.bit_reader import BitReader
from huffpack.bit_utils.bit_writer import BitWriter


class TestBitWriter:
    def test_msb_first(self):
        writer = BitWriter()
        writer.write_bits_msb(5, 3)
        assert writer.to_bytes() == b"\xa0"

    def test_zero_length_writes_nothing(self):
        writer = BitWriter()
        writer.write_bits_msb(1, 0)
        assert writer.to_bytes() == b""

    def test_negative_length_rejected(self):
        with pytest.raises(ValueError):
            BitWriter().write_bits_msb(1, -1)

    def test_byte_align_reports_padding(self):
        writer = BitWriter()
        writer.write_bits_msb(1, 1)
        assert writer.byte_align() == 7
        assert writer.byte_align() == 0

    def test_to_bytes_pads_with_zeros(self):
        writer = BitWriter()
        writer.write_bits_msb(5, 3)
        writer.write_bits_msb(0xFF, 8)
        assert writer.to_bytes() == b"\xbf\xe0"


class TestBitReader:
    def test_read_bits(self):
        reader = BitReader(b"\xa0")
        assert reader.read_bits_msb(3) == 5
        assert reader.read_bits_msb(5) == 0

    def test_read_single_bits(self):
        reader = BitReader(b"\x80")
        assert reader.read_bit() == 1
        assert reader.read_bit() == 0

    def test_exhausted_stream(self):
        reader = BitReader(b"\x01")
        reader.read_bits_msb(8)
        with pytest.raises(EOFError):
            reader.read_bit()

    def test_not_enough_bits(self):
        reader = BitReader(b"\x01")
        with pytest.raises(EOFError):
            reader.read_bits_msb(9)

    def test_empty_buffer(self):
        with pytest.raises(EOFError):
            BitReader(b"").read_bit()

    def test_reads_back_what_writer_wrote(self):
        writer = BitWriter()
        writer.write_bits_msb(1, 1)
        writer.write_bits_msb(0x61, 8)
        reader = BitReader(writer.to_bytes())
        assert reader.read_bit() == 1
        assert reader.read_bits_msb(8) == 0x61

import pytest

from huffpack.bit_packing import pack, unpack
from huffpack.errors import CorruptStreamError
from huffpack.huffman_coding import Leaf, build_tree, char_frequency, codes_generation

DATA = b"abracadabra"


@pytest.fixture
def root():
    return build_tree(char_frequency(DATA))


def test_pack_abracadabra(root):
    # a=0 b=110 r=111 c=100 d=101, 23 bits
    padding_bits, payload = pack(DATA, codes_generation(root))
    assert padding_bits == 1
    assert payload == b"\x6e\x8a\xdc"


def test_unpack_abracadabra(root):
    assert unpack(1, b"\x6e\x8a\xdc", root) == DATA


def test_padding_is_zero_when_bits_fill_bytes():
    codes = {97: "0", 98: "1"}
    padding_bits, payload = pack(b"abababab", codes)
    assert padding_bits == 0
    assert payload == b"\x55"


def test_pack_empty():
    assert pack(b"", {}) == (0, b"")


def test_unpack_empty_tree():
    assert unpack(0, b"", None) == b""


def test_unpack_bits_without_tree():
    with pytest.raises(CorruptStreamError):
        unpack(0, b"\x00", None)


def test_single_symbol_stream():
    padding_bits, payload = pack(b"aaaa", {97: "0"})
    assert (padding_bits, payload) == (4, b"\x00")
    assert unpack(padding_bits, payload, Leaf(97)) == b"aaaa"


def test_single_symbol_stream_rejects_one_bits():
    with pytest.raises(CorruptStreamError):
        unpack(0, b"\x80", Leaf(97))


def test_stream_ending_mid_code(root):
    # 111 111 11: two r's then an unfinished code
    with pytest.raises(CorruptStreamError):
        unpack(0, b"\xff", root)


@pytest.mark.parametrize("padding_bits", [-1, 8, 255])
def test_padding_out_of_range(root, padding_bits):
    with pytest.raises(CorruptStreamError):
        unpack(padding_bits, b"\x6e\x8a\xdc", root)


def test_padding_longer_than_payload(root):
    with pytest.raises(CorruptStreamError):
        unpack(3, b"", root)

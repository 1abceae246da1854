import pytest

from huffpack.bit_utils.bit_writer import BitWriter
from huffpack.errors import CorruptStreamError, InvalidHeaderError
from huffpack.huffman_coding import Leaf, build_tree, char_frequency, codes_generation
from huffpack.tree_codec import TreeCodec


def _tree(data: bytes):
    return build_tree(char_frequency(data))


@pytest.mark.parametrize(
    "symbol_count, size",
    [(0, 0), (1, 2), (2, 3), (5, 7), (256, 320)],
)
def test_descriptor_size(symbol_count, size):
    assert TreeCodec.descriptor_size(symbol_count) == size


def test_serialize_empty_tree():
    assert TreeCodec.serialize(None) == b""
    assert TreeCodec.deserialize(b"", 0) is None


def test_serialize_single_leaf():
    # 1 01100001, padded
    assert TreeCodec.serialize(Leaf(97)) == b"\xb0\x80"


def test_serialize_two_leaves():
    # 0 1 01100010 1 01100001, padded
    assert TreeCodec.serialize(_tree(b"aaaaaaaab")) == b"\x58\xac\x20"


@pytest.mark.parametrize(
    "data",
    [b"a", b"aaaaaaaab", b"abracadabra", bytes(range(256)), b"\x00\xff" * 3 + b"\x80"],
)
def test_deserialized_tree_has_same_codes(data):
    root = _tree(data)
    header = TreeCodec.serialize(root)
    assert len(header) == TreeCodec.descriptor_size(len(char_frequency(data)))
    rebuilt = TreeCodec.deserialize(header, len(char_frequency(data)))
    assert codes_generation(rebuilt) == codes_generation(root)


def test_deep_tree_round_trip():
    root = build_tree({s: 2 ** s for s in range(256)})
    rebuilt = TreeCodec.deserialize(TreeCodec.serialize(root), 256)
    assert codes_generation(rebuilt) == codes_generation(root)


def test_truncated_descriptor():
    header = TreeCodec.serialize(_tree(b"abracadabra"))
    with pytest.raises(InvalidHeaderError):
        TreeCodec.deserialize(header[:-1], 5)


def test_no_descriptor_for_declared_symbols():
    with pytest.raises(InvalidHeaderError):
        TreeCodec.deserialize(b"", 1)


@pytest.mark.parametrize("declared", [2, 4, 6, 256])
def test_symbol_count_mismatch(declared):
    header = TreeCodec.serialize(_tree(b"abracadabra"))
    with pytest.raises(CorruptStreamError):
        TreeCodec.deserialize(header, declared)


def test_symbol_count_out_of_range():
    with pytest.raises(InvalidHeaderError):
        TreeCodec.deserialize(b"\x00" * 400, 300)


def test_duplicate_symbol():
    writer = BitWriter()
    writer.write_bits_msb(0, 1)
    for _ in range(2):
        writer.write_bits_msb(1, 1)
        writer.write_bits_msb(0x61, 8)
    with pytest.raises(CorruptStreamError):
        TreeCodec.deserialize(writer.to_bytes(), 2)


def test_descriptor_of_only_internal_flags():
    with pytest.raises(InvalidHeaderError):
        TreeCodec.deserialize(b"\x00" * 4, 3)

"""
Exceptions raised while decoding a Huffman container.
"""


class HuffmanError(ValueError):
    """Base class for all errors raised on malformed compressed data."""


class CorruptStreamError(HuffmanError):
    """
    Header and payload are internally inconsistent: symbol count mismatch,
    invalid padding value, a bit walk that stops between leaves, or a
    size/checksum that does not match the decoded output.
    """


class InvalidHeaderError(HuffmanError):
    """The container header or tree descriptor cannot be parsed at all."""

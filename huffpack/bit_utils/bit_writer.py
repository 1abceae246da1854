from bitarray import bitarray


class BitWriter:
    """
    A class for writing bits to a bitarray stream with byte alignment support.
    Bits are written most significant bit first.
    """

    def __init__(self) -> None:
        """Initialize a new BitWriter instance with an empty bitarray."""
        self.bits = bitarray(endian="big")

    def write_bits_msb(self, value: int, length: int) -> None:
        """
        Write bits in MSB-first order (most significant bit first).
        Used for node flags and symbol values of the tree descriptor.

        Args:
            value: Integer value to write
            length: Number of bits to write

        Raises:
            ValueError: If length is negative
        """
        if length < 0:
            raise ValueError("Length cannot be negative")
        if length == 0:
            return
        for i in range(length - 1, -1, -1):
            self.bits.append((value >> i) & 1)

    def byte_align(self) -> int:
        """
        Add zero padding bits to achieve byte alignment.

        Returns:
            Number of padding bits added (0..7)
        """
        return self.bits.fill()

    def to_bytes(self) -> bytes:
        """Byte-align the stream and return its contents."""
        self.byte_align()
        return self.bits.tobytes()

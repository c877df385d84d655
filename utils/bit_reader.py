"""Bit-cursor reader/writer for sub-byte pixel streams.

Values are stored least-significant bits first: the first pixel of a byte
occupies its low bits, the next pixel the bits above it.
"""

from typing import List


class BitReader:
    """Reads fixed-width unsigned values from a byte buffer."""

    def __init__(self, data: bytes, byte_offset: int = 0, bit_offset: int = 0):
        self.data = data
        self.byte_offset = byte_offset
        self.bit_offset = bit_offset

    @property
    def position(self) -> int:
        """Absolute cursor position in bits."""
        return self.byte_offset * 8 + self.bit_offset

    def read(self, n_bits: int) -> int:
        """Read the next `n_bits` (1-8, not crossing a byte) and advance."""
        if not 1 <= n_bits <= 8:
            raise ValueError(f"Can only read 1-8 bits at a time, got {n_bits}")
        if self.bit_offset + n_bits > 8:
            raise ValueError(
                f"Read of {n_bits} bits at bit {self.bit_offset} would cross a byte boundary"
            )
        value = (self.data[self.byte_offset] >> self.bit_offset) & ((1 << n_bits) - 1)
        self.bit_offset += n_bits
        if self.bit_offset > 7:
            self.byte_offset += 1
            self.bit_offset -= 8
        return value

    def read_many(self, n_bits: int, count: int) -> List[int]:
        return [self.read(n_bits) for _ in range(count)]


class BitWriter:
    """Accumulates fixed-width values into bytes, mirroring BitReader."""

    def __init__(self):
        self._bytes = bytearray()
        self._bit_offset = 0

    def write(self, value: int, n_bits: int) -> None:
        if self._bit_offset == 0:
            self._bytes.append(0)
        self._bytes[-1] |= (value & ((1 << n_bits) - 1)) << self._bit_offset
        self._bit_offset += n_bits
        if self._bit_offset > 7:
            self._bit_offset -= 8

    def getvalue(self) -> bytes:
        return bytes(self._bytes)

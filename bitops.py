from typing import Iterator, List

from errors import MalformedBitStreamError

BIT_CHARS = frozenset("01")


class BitWriter:
    """Textual bit writer.

    Accumulates code paths and joins them into one ``'0'``/``'1'`` string.

    :ivar parts: Code paths written so far, in order.
    :type parts: List[str]
    :ivar bit_count: Total number of bits written.
    :type bit_count: int
    """

    def __init__(self):
        """Initialize an empty bit writer.

        :returns: None
        :rtype: None
        """
        self.parts: List[str] = []
        self.bit_count = 0

    def write_path(self, path: str):
        """Append a code path to the output.

        :param path: Bits to append, as a ``'0'``/``'1'`` string.
        :type path: str
        :returns: None
        :rtype: None
        """
        self.parts.append(path)
        self.bit_count += len(path)

    def getvalue(self) -> str:
        """Return everything written so far as a single bit string.

        :returns: The concatenated bit string.
        :rtype: str
        """
        return "".join(self.parts)


class BitReader:
    """Reads single bits from a ``'0'``/``'1'`` string.

    :ivar bits: Source bit string.
    :type bits: str
    :ivar pos: Index of the next bit to read.
    :type pos: int
    """

    def __init__(self, bits: str):
        """Create a bit reader for the given bit string.

        :param bits: Source bits.
        :type bits: str
        :returns: None
        :rtype: None
        """
        self.bits = bits
        self.pos = 0

    def __len__(self):
        return len(self.bits)

    @property
    def exhausted(self) -> bool:
        """``True`` once every bit has been read."""
        return self.pos >= len(self.bits)

    def read_bit(self) -> int:
        """Read the next bit.

        :returns: ``0`` or ``1``.
        :rtype: int
        :raises EOFError: If no bits are left.
        :raises MalformedBitStreamError: If the next character is not a bit.
        """
        if self.exhausted:
            raise EOFError("Unexpected end of bits")
        char = self.bits[self.pos]
        if char not in BIT_CHARS:
            raise MalformedBitStreamError(
                f"Invalid bit {char!r} at position {self.pos}"
            )
        self.pos += 1
        return 1 if char == "1" else 0

    def __iter__(self) -> Iterator[int]:
        while not self.exhausted:
            yield self.read_bit()

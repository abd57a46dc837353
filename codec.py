from abc import ABC, abstractmethod
from typing import Dict, NamedTuple, Optional, Type

from bitops import BitReader, BitWriter
from errors import (
    CodecStateError,
    MalformedBitStreamError,
    SymbolNotInTreeError,
    TruncatedStreamError,
)
from frequency import count_frequencies
from huffman import HuffmanTree

BITS_PER_SYMBOL = 8  #: Fixed-width baseline the compression ratio is measured against


class EncodeResult(NamedTuple):
    """Output of :meth:`Codec.encode`.

    :ivar bits: Encoded ``'0'``/``'1'`` string.
    :ivar ratio: Encoded bit count divided by ``BITS_PER_SYMBOL`` bits per
        input symbol.
    """

    bits: str
    ratio: float


def compression_ratio(bit_count: int, symbol_count: int) -> float:
    """Compute the ratio of encoded bits to the fixed-width baseline.

    :param bit_count: Number of bits produced by the encoder.
    :type bit_count: int
    :param symbol_count: Number of input symbols.
    :type symbol_count: int
    :returns: ``bit_count / (symbol_count * BITS_PER_SYMBOL)``, or ``0.0``
        for empty input.
    :rtype: float
    """
    if symbol_count == 0:
        return 0.0
    return bit_count / (symbol_count * BITS_PER_SYMBOL)


class Codec(ABC):
    """Encoder/decoder capability shared by every coding algorithm.

    An instance keeps the state of its last :meth:`encode` call, which the
    next :meth:`decode` relies on. Instances are not thread-safe.
    """

    name = ""

    @abstractmethod
    def encode(self, text: str) -> EncodeResult:
        """Encode ``text`` and remember what is needed to decode it."""

    @abstractmethod
    def decode(self, bits: str) -> str:
        """Decode bits produced by the most recent :meth:`encode`."""

    @abstractmethod
    def get_compression_ratio(self) -> float:
        """Return the ratio computed by the most recent :meth:`encode`."""


class HuffmanCodec(Codec):
    """Static Huffman coder over a textual bit string.

    The tree is rebuilt from the input on every :meth:`encode` and kept
    until the next one.

    :ivar tree: Tree built by the last non-empty encode, ``None`` otherwise.
    :type tree: HuffmanTree | None
    """

    name = "huffman"

    def __init__(self):
        """Initialize a codec that has not encoded anything yet.

        :returns: None
        :rtype: None
        """
        self.tree: Optional[HuffmanTree] = None
        self._encoded = False
        self._symbol_count = 0
        self._ratio = 0.0

    def encode(self, text: str) -> EncodeResult:
        """Encode ``text`` with a Huffman tree built from its characters.

        :param text: Input text; each character is one symbol.
        :type text: str
        :returns: Encoded bits and the compression ratio. Empty input gives
            ``("", 0.0)``; a one-symbol alphabet gives an empty bit string.
        :rtype: EncodeResult
        :raises SymbolNotInTreeError: If a symbol has no path in the tree.
        """
        tree = None
        output = BitWriter()
        if text:
            tree = HuffmanTree.build(count_frequencies(text))
            for symbol in text:
                path = tree.path_of(symbol)
                if path is None:
                    raise SymbolNotInTreeError(symbol)
                output.write_path(path)

        self.tree = tree
        self._encoded = True
        self._symbol_count = len(text)
        self._ratio = compression_ratio(output.bit_count, self._symbol_count)
        return EncodeResult(output.getvalue(), self._ratio)

    def decode(self, bits: str) -> str:
        """Decode a bit string against the tree of the last :meth:`encode`.

        :param bits: ``'0'``/``'1'`` string.
        :type bits: str
        :returns: The decoded text.
        :rtype: str
        :raises CodecStateError: If nothing has been encoded yet.
        :raises MalformedBitStreamError: If ``bits`` contains other characters
            or leads off the tree.
        :raises TruncatedStreamError: If ``bits`` ends in the middle of a path.
        """
        if not self._encoded:
            raise CodecStateError("decode() called before encode()")

        reader = BitReader(bits)

        if self.tree is None:
            if len(reader):
                raise MalformedBitStreamError("No tree: the last input was empty")
            return ""

        root = self.tree.root
        if self.tree.is_single_leaf:
            # Every path is empty, so only the retained count says how many.
            if len(reader):
                raise MalformedBitStreamError(
                    "Single-symbol tree only accepts an empty bit string"
                )
            return root.symbol * self._symbol_count

        decoded = []
        current = root
        for bit in reader:
            current = current.right if bit else current.left
            if current is None:
                raise MalformedBitStreamError(
                    f"Bit at position {reader.pos - 1} leads off the tree"
                )
            if current.is_leaf:
                decoded.append(current.symbol)
                current = root

        if current is not root:
            raise TruncatedStreamError(
                f"Bit string ends mid-path after {len(reader)} bits"
            )
        return "".join(decoded)

    def get_compression_ratio(self) -> float:
        """Return the compression ratio of the last :meth:`encode`.

        :returns: Encoded bits per fixed-width baseline bit.
        :rtype: float
        :raises CodecStateError: If nothing has been encoded yet.
        """
        if not self._encoded:
            raise CodecStateError("No compression ratio before encode()")
        return self._ratio


CODECS: Dict[str, Type[Codec]] = {
    HuffmanCodec.name: HuffmanCodec,
}

#: Menu index of each codec, as offered by the command line front end
MENU: Dict[str, str] = {
    "1": HuffmanCodec.name,
}


def get_codec(key: str) -> Codec:
    """Create a codec by name or by menu index.

    :param key: Codec name (e.g. ``"huffman"``) or menu index (e.g. ``"1"``).
    :type key: str
    :returns: A fresh codec instance.
    :rtype: Codec
    :raises KeyError: If ``key`` names no codec.
    """
    name = MENU.get(key, key).lower()
    if name not in CODECS:
        raise KeyError(f"Unknown algorithm: {key}")
    return CODECS[name]()

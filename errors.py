class HuffmanError(Exception):
    """Base class for all errors raised by the Huffman codec."""


class EmptyAlphabetError(HuffmanError, ValueError):
    """Raised when a tree is requested for a frequency table with no symbols."""


class SymbolNotInTreeError(HuffmanError, KeyError):
    """Raised when a symbol has no path in the tree used for encoding.

    The tree is always built from the very input being encoded, so this
    signals a broken invariant rather than bad user input.
    """


class MalformedBitStreamError(HuffmanError, ValueError):
    """Raised when a bit string cannot have been produced by the current tree."""


class TruncatedStreamError(MalformedBitStreamError):
    """Raised when a bit string ends in the middle of a code path."""


class CodecStateError(HuffmanError, RuntimeError):
    """Raised when a codec is used before ``encode`` has built its tree."""

import argparse
import sys

from typing import List, Optional, Tuple
from codec import CODECS, MENU, get_codec
from errors import HuffmanError
from frequency import count_frequencies
from huffman import HuffmanTree

DEFAULT_INPUT = "input.txt"  #: File read when no ``--input`` is given


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Static Huffman encoder/decoder for text files"
    )
    subparsers = parser.add_subparsers(
        title="subcommands", dest="cmd", required=True
    )
    algorithms = sorted(CODECS) + sorted(MENU)

    roundtrip = subparsers.add_parser(
        "roundtrip",
        aliases=["r"],
        help="Encode a file, decode it again and report both",
    )
    encode = subparsers.add_parser(
        "encode", aliases=["e"], help="Encode a file into a bit string"
    )
    for sub in (roundtrip, encode):
        sub.add_argument(
            "-i",
            "--input",
            default=DEFAULT_INPUT,
            help=f"Text file to encode (default: {DEFAULT_INPUT})",
        )
        sub.add_argument(
            "-a",
            "--algorithm",
            default="huffman",
            choices=algorithms,
            help="Coding algorithm, by name or menu index (default: huffman)",
        )
    encode.add_argument(
        "-o", "--output", help="Write the bit string to this file"
    )

    table = subparsers.add_parser(
        "table", aliases=["t"], help="Print the code table of a file"
    )
    table.add_argument(
        "-i",
        "--input",
        default=DEFAULT_INPUT,
        help=f"Text file to analyse (default: {DEFAULT_INPUT})",
    )

    return parser


def _read_text(path: str) -> str:
    """Read a whole text file.

    :param path: File to read.
    :type path: str
    :returns: File contents.
    :rtype: str
    :raises FileNotFoundError: If ``path`` does not exist.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _fmt_ratio(ratio: float) -> str:
    """Format a compression ratio with three decimals.

    :param ratio: Ratio as a fraction.
    :type ratio: float
    :returns: Formatted ratio.
    :rtype: str
    """
    return f"{ratio:.3f}"


def _fmt_symbol(symbol: str) -> str:
    """Render a symbol so that whitespace stays visible in a table."""
    if symbol.isprintable() and not symbol.isspace():
        return symbol
    return repr(symbol)


def code_table(text: str) -> List[Tuple[str, int, str]]:
    """Build the rows of a code table for ``text``.

    :param text: Input text.
    :type text: str
    :returns: ``(symbol, frequency, code)`` rows, shortest codes first.
    :rtype: List[Tuple[str, int, str]]
    """
    if not text:
        return []
    frequencies = count_frequencies(text)
    tree = HuffmanTree.build(frequencies)
    rows = [(sym, freq, tree.codes[sym]) for sym, freq in frequencies.items()]
    rows.sort(key=lambda row: (len(row[2]), row[2]))
    return rows


def run_roundtrip(source: str, algorithm: str) -> bool:
    """Encode a text, decode the result and print both.

    :param source: Text to encode.
    :type source: str
    :param algorithm: Codec name or menu index.
    :type algorithm: str
    :returns: ``True`` if the decoded text equals the source.
    :rtype: bool
    """
    codec = get_codec(algorithm)
    bits, _ = codec.encode(source)
    decoded = codec.decode(bits)
    print("Source:")
    print(source)
    print("Encoded:")
    print(bits)
    print("Compression ratio:", _fmt_ratio(codec.get_compression_ratio()))
    print("Decoded:")
    print(decoded)
    if decoded != source:
        print("[!] Decoded text does not match the source")
        return False
    return True


def run_encode(
    source: str, algorithm: str, output_path: Optional[str]
) -> bool:
    """Encode a text and print or save the bit string.

    :param source: Text to encode.
    :type source: str
    :param algorithm: Codec name or menu index.
    :type algorithm: str
    :param output_path: Where to write the bits; printed when ``None``.
    :type output_path: Optional[str]
    :returns: ``False`` if the output file could not be written.
    :rtype: bool
    """
    bits, ratio = get_codec(algorithm).encode(source)
    if output_path is None:
        print(bits)
    else:
        try:
            with open(output_path, "w", encoding="utf-8") as out:
                out.write(bits)
        except OSError as e:
            print(f"[!] Cannot write output file {output_path}: {e.strerror}")
            return False
        print(f"Wrote {len(bits)} bits to {output_path}")
    print("Compression ratio:", _fmt_ratio(ratio))
    return True


def run_table(source: str) -> None:
    """Print symbol, frequency and code for every symbol of a text.

    :param source: Text to analyse.
    :type source: str
    :returns: None
    :rtype: None
    """
    rows = code_table(source)
    if not rows:
        print("[!] Input is empty, no codes to show")
        return
    for symbol, freq, code in rows:
        print(f"{_fmt_symbol(symbol):>6}  {freq:>8}  {code}")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv[1:]``.
    :type argv: Optional[List[str]]
    :returns: Process exit status.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    try:
        source = _read_text(args.input)
    except FileNotFoundError:
        print(f"[!] Input file not found: {args.input}")
        return 1
    except OSError as e:
        print(f"[!] Cannot read input file {args.input}: {e.strerror}")
        return 1

    ok = True
    try:
        if args.cmd in ["roundtrip", "r"]:
            ok = run_roundtrip(source, args.algorithm)
        elif args.cmd in ["encode", "e"]:
            ok = run_encode(source, args.algorithm, args.output)
        elif args.cmd in ["table", "t"]:
            run_table(source)
    except HuffmanError as e:
        print(f"[!] {e}")
        return 1
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())

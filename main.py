import argparse
import math
import os
import sys

from typing import List, Optional, Tuple
from errors import EmptyInputError
from huffman import HuffmanBuilder, HuffmanResult
from tree import format_tree

DATA_DIR = "inputData"  #: Directory input files are read from
DEFAULT_INPUT = "stringData.txt"  #: Input file used when none is given


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Huffman-code a single line of text and report savings"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Input file name (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "-d",
        "--data-dir",
        default=DATA_DIR,
        help=f"Directory holding the input file (default: {DATA_DIR})",
    )
    parser.add_argument(
        "-t",
        "--show-tree",
        action="store_true",
        help="Also print the Huffman tree",
    )
    return parser


def load_data(path: str) -> str:
    """Read the first line of a UTF-8 text file.

    :param path: Path of the input file.
    :type path: str
    :returns: The first line without its terminator, ``""`` for an empty file.
    :rtype: str
    :raises FileNotFoundError: If ``path`` does not exist.
    """
    with open(path, "r", encoding="utf-8") as f:
        line = f.readline()
    return line.rstrip("\r\n")


def compute_stats(text: str, encoded: str) -> Tuple[int, int, float]:
    """Compute the sizes of the original and encoded text.

    One byte per original symbol; the encoded bits are rounded up to
    whole bytes. Savings can be 100% (single repeated symbol) or negative
    for inputs too short to benefit.

    :param text: Original text.
    :type text: str
    :param encoded: Encoded bit-string.
    :type encoded: str
    :returns: ``(original_bytes, encoded_bytes, savings_percent)``
    :rtype: Tuple[int, int, float]
    :raises EmptyInputError: If ``text`` is empty.
    """
    original_bytes = len(text)
    if original_bytes == 0:
        raise EmptyInputError("Input can't be empty")
    encoded_bytes = math.ceil(len(encoded) / 8)
    savings = 100.0 * (1 - encoded_bytes / original_bytes)
    return original_bytes, encoded_bytes, savings


def _fmt_pct(value: float) -> str:
    """Format a percentage with at most two decimals, e.g. ``45.45``.

    :param value: Percentage value.
    :type value: float
    :returns: Formatted number without trailing zeros.
    :rtype: str
    """
    out = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if out in ("", "-0") else out


def _table_rows(result: HuffmanResult) -> List[Tuple[str, int, str]]:
    """Rows of the symbol table, highest frequency first.

    :param result: Pipeline output.
    :type result: HuffmanResult
    :returns: ``(symbol, frequency, code)`` triples.
    :rtype: List[Tuple[str, int, str]]
    """
    ordered = sorted(
        result.frequencies.items(),
        key=lambda item: (item[1], item[0]),
        reverse=True,
    )
    return [
        (symbol, freq, result.codes.get(symbol)) for symbol, freq in ordered
    ]


def format_report(result: HuffmanResult) -> str:
    """Build the text report for one encoded input.

    :param result: Pipeline output.
    :type result: HuffmanResult
    :returns: Report text ending with a newline.
    :rtype: str
    """
    lines = ["Symbol\tFrequency\tCode", "------\t---------\t----"]
    for symbol, freq, code in _table_rows(result):
        lines.append(f"{symbol}\t{freq}\t\t{code}")

    original_bytes, encoded_bytes, savings = compute_stats(
        result.text, result.encoded
    )
    lines += [
        "",
        "Original string:",
        result.text,
        "Encoded string:",
        result.encoded,
        "",
        f"The original string requires {original_bytes} bytes.",
        f"The encoded string requires {encoded_bytes} bytes.",
        f"Difference in space required is {_fmt_pct(savings)}%.",
    ]
    return "\n".join(lines) + "\n"


def process_results(result: HuffmanResult, show_tree: bool = False) -> None:
    """Print the report, and the tree if requested.

    :param result: Pipeline output.
    :type result: HuffmanResult
    :param show_tree: Whether to print the Huffman tree first.
    :type show_tree: bool
    :returns: None
    :rtype: None
    """
    if show_tree:
        print(format_tree(result.root))
        print()
    sys.stdout.write(format_report(result))
    sys.stdout.flush()


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv[1:]``.
    :type argv: Optional[List[str]]
    :returns: Process exit status.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    path = os.path.join(args.data_dir, args.input)
    try:
        text = load_data(path)
    except FileNotFoundError:
        print(f"[!] Input file not found: {path}")
        return 1
    except (OSError, UnicodeDecodeError):
        print(f"[!] Cannot read input file: {path}")
        return 1

    try:
        result = HuffmanBuilder().run(text)
    except EmptyInputError:
        print("[!] Input can't be empty")
        return 1

    process_results(result, show_tree=args.show_tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())

import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


@pytest.fixture()
def builder():
    from huffman import HuffmanBuilder

    return HuffmanBuilder()


@pytest.fixture()
def data_dir(tmp_path: Path):
    """Create an input directory laid out like the default ``inputData``.

    Structure:
        inputData/
            stringData.txt   (abracadabra)
            empty.txt
            multi.txt        (two lines)
    """
    root = tmp_path / "inputData"
    root.mkdir()
    (root / "stringData.txt").write_text("abracadabra\n", encoding="utf-8")
    (root / "empty.txt").write_text("", encoding="utf-8")
    (root / "multi.txt").write_text("first line\r\nsecond\n", encoding="utf-8")
    return root


def decode(codes, bits: str) -> str:
    """Greedy prefix decoding with the inverse of a code table."""
    inverse = {code: symbol for symbol, code in codes.items()}
    out = []
    current = ""
    for bit in bits:
        current += bit
        if current in inverse:
            out.append(inverse[current])
            current = ""
    assert current == "", "trailing bits do not form a code"
    return "".join(out)


@pytest.fixture()
def decode_fn():
    """
    Fixture that provides the decode helper without importing conftest.
    """
    return decode

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
def codec():
    """Provide a fresh Huffman codec."""
    from codec import HuffmanCodec

    return HuffmanCodec()


@pytest.fixture()
def input_file(tmp_path: Path):
    """Create a small text file for CLI tests."""
    path = tmp_path / "input.txt"
    path.write_text("abracadabra", encoding="utf-8")
    return path


def is_prefix_free(codes):
    """Return ``True`` if no code is a prefix of another one."""
    values = list(codes)
    for i, a in enumerate(values):
        for j, b in enumerate(values):
            if i != j and b.startswith(a):
                return False
    return True


@pytest.fixture()
def is_prefix_free_fn():
    """
    Fixture that provides the is_prefix_free helper without importing conftest.
    """
    return is_prefix_free

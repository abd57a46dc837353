import pytest

from bitops import BitReader, BitWriter
from errors import MalformedBitStreamError


def test_bitwriter_write_paths_and_getvalue():
    bw = BitWriter()
    bw.write_path("10")
    bw.write_path("")
    bw.write_path("011")
    assert bw.getvalue() == "10011"
    assert bw.bit_count == 5


def test_bitwriter_empty():
    assert BitWriter().getvalue() == ""


def test_bitreader_iterates_bits_and_tracks_position():
    br = BitReader("1101")
    assert br.read_bit() == 1
    assert br.pos == 1
    assert list(br) == [1, 0, 1]
    assert br.exhausted


def test_bitreader_eoferror_when_exhausted():
    br = BitReader("0")
    br.read_bit()
    with pytest.raises(EOFError):
        br.read_bit()


def test_bitreader_rejects_invalid_character():
    br = BitReader("01x1")
    with pytest.raises(MalformedBitStreamError, match="position 2"):
        list(br)

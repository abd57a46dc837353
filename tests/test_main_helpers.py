import pytest


def test_fmt_ratio(m):
    assert m._fmt_ratio(0.0) == "0.000"
    assert m._fmt_ratio(11 / 56) == "0.196"


def test_fmt_symbol_keeps_whitespace_visible(m):
    assert m._fmt_symbol("a") == "a"
    assert m._fmt_symbol(" ") == "' '"
    assert m._fmt_symbol("\n") == "'\\n'"


def test_code_table_rows(m):
    rows = m.code_table("aabbbcc")
    assert rows == [("b", 3, "0"), ("a", 2, "10"), ("c", 2, "11")]
    assert m.code_table("") == []


def test_read_text_missing_file_raises(tmp_path, m):
    with pytest.raises(FileNotFoundError):
        _ = m._read_text(str(tmp_path / "nope.txt"))


def test_cli_parser_accepts_subcommands(m):
    parser = m.get_parser()
    ns = parser.parse_args(["roundtrip"])
    assert ns.cmd in ("roundtrip", "r")
    assert ns.input == m.DEFAULT_INPUT
    assert ns.algorithm == "huffman"
    ns2 = parser.parse_args(["e", "-i", "in.txt", "-a", "1", "-o", "out.bits"])
    assert ns2.cmd in ("encode", "e")
    assert ns2.algorithm == "1"
    assert ns2.output == "out.bits"
    ns3 = parser.parse_args(["table", "-i", "in.txt"])
    assert ns3.cmd in ("table", "t")


def test_cli_parser_rejects_unknown_algorithm(m):
    parser = m.get_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["encode", "-a", "lzw"])

import pytest

from errors import EmptyInputError


def test_load_data_reads_first_line_only(data_dir, m):
    assert m.load_data(str(data_dir / "stringData.txt")) == "abracadabra"
    assert m.load_data(str(data_dir / "multi.txt")) == "first line"
    assert m.load_data(str(data_dir / "empty.txt")) == ""


def test_load_data_missing_file_raises(tmp_path, m):
    with pytest.raises(FileNotFoundError):
        m.load_data(str(tmp_path / "nope.txt"))


def test_compute_stats_abracadabra(m):
    original, encoded, savings = m.compute_stats("abracadabra", "0" * 23)
    assert (original, encoded) == (11, 3)
    assert savings == pytest.approx(100 * (1 - 3 / 11))


def test_compute_stats_boundaries(m):
    # Single repeated symbol: empty code, nothing to store.
    assert m.compute_stats("aaaa", "") == (4, 0, 100.0)
    # One bit still costs a whole byte.
    assert m.compute_stats("a", "0") == (1, 1, 0.0)
    # Encoded size may exceed the original.
    _, _, savings = m.compute_stats("ab", "0" * 17)
    assert savings == pytest.approx(-50.0)
    with pytest.raises(EmptyInputError):
        m.compute_stats("", "")


def test_fmt_pct(m):
    assert m._fmt_pct(100 * (1 - 3 / 11)) == "72.73"
    assert m._fmt_pct(100.0) == "100"
    assert m._fmt_pct(54.5) == "54.5"
    assert m._fmt_pct(0.0) == "0"
    assert m._fmt_pct(-50.0) == "-50"


def test_format_report_abracadabra(builder, m):
    report = m.format_report(builder.run("abracadabra"))
    assert report == (
        "Symbol\tFrequency\tCode\n"
        "------\t---------\t----\n"
        "a\t5\t\t0\n"
        "r\t2\t\t10\n"
        "b\t2\t\t110\n"
        "d\t1\t\t1111\n"
        "c\t1\t\t1110\n"
        "\n"
        "Original string:\n"
        "abracadabra\n"
        "Encoded string:\n"
        "01101001110011110110100\n"
        "\n"
        "The original string requires 11 bytes.\n"
        "The encoded string requires 3 bytes.\n"
        "Difference in space required is 72.73%.\n"
    )


def test_format_report_single_symbol(builder, m):
    report = m.format_report(builder.run("aaaa"))
    assert "a\t4\t\t\n" in report
    assert "The encoded string requires 0 bytes." in report
    assert "Difference in space required is 100%." in report


def test_cli_parser_defaults_and_flags(m):
    parser = m.get_parser()
    ns = parser.parse_args([])
    assert ns.input == m.DEFAULT_INPUT
    assert ns.data_dir == m.DATA_DIR
    assert ns.show_tree is False
    ns2 = parser.parse_args(["other.txt", "-d", "somewhere", "-t"])
    assert (ns2.input, ns2.data_dir, ns2.show_tree) == (
        "other.txt", "somewhere", True
    )

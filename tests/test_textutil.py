import io

import pytest

from primer.textutil import basename, basename_main, comma, ints_to_string, main


@pytest.mark.parametrize(
    "path, want",
    [("a", "a"), ("a.go", "a"), ("a/b/c.go", "c"), ("a/b.c.go", "b.c")],
)
def test_basename(path, want):
    assert basename(path) == want


@pytest.mark.parametrize(
    "digits, want",
    [
        ("1", "1"),
        ("12", "12"),
        ("123", "123"),
        ("1234", "1,234"),
        ("1234567890", "1,234,567,890"),
    ],
)
def test_comma(digits, want):
    assert comma(digits) == want


def test_comma_removing_commas_round_trips():
    for n in range(1, 20):
        digits = "7" * n
        grouped = comma(digits)
        assert grouped.replace(",", "") == digits
        assert all(len(part) == 3 for part in grouped.split(",")[1:])


def test_ints_to_string():
    assert ints_to_string([1, 2, 3]) == "[1, 2, 3]"
    assert ints_to_string([]) == "[]"


def test_main(capsys):
    main(["1", "12", "123", "1234", "1234567890"])
    assert capsys.readouterr().out == "  1\n  12\n  123\n  1,234\n  1,234,567,890\n"


def test_basename_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a/b/c.go\na/b.c.go\n"))
    basename_main([])
    assert capsys.readouterr().out == "c\nb.c\n"
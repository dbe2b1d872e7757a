from dataclasses import dataclass

from primer.formatting import format_any, format_atom


class Duration(int):
    def __str__(self) -> str:
        return f"{int(self)}ns"


@dataclass
class Point:
    x: int = 0
    y: int = 0


def test_int():
    assert format_any(1) == "1"


def test_int_subclass_formats_as_number():
    assert format_any(Duration(1)) == "1"


def test_list_shows_type_and_identity():
    values = [1]
    assert format_any(values) == f"list 0x{id(values):x}"


def test_list_of_durations_shows_identity():
    values = [Duration(1)]
    result = format_any(values)
    assert result.startswith("list 0x")
    assert int(result.split("0x")[1], 16) == id(values)


def test_none_is_invalid():
    assert format_atom(None) == "invalid"


def test_booleans():
    assert format_atom(True) == "true"
    assert format_atom(False) == "false"


def test_string_is_quoted():
    assert format_atom('a "b"\n') == '"a \\"b\\"\\n"'


def test_value_types():
    assert format_atom((1, 2)) == "tuple value"
    assert format_atom(Point(1, 2)) == "Point value"


def test_dict_is_reference():
    mapping = {"a": 1}
    assert format_atom(mapping) == f"dict 0x{id(mapping):x}"
import io

import pytest

from sortsteps.tracing import format_array, print_array


def test_format_array_joins_with_comma_space():
    assert format_array([1, 2, 3]) == "1, 2, 3"


def test_format_array_empty_is_empty_string():
    assert format_array([]) == ""


@pytest.mark.parametrize("values", [[5], [-1, 0, 1], [10, 20, 30, 40]])
def test_format_array_round_trips(values):
    text = format_array(values)
    assert [int(part) for part in text.split(", ")] == values


def test_print_array_writes_line_to_stream():
    buffer = io.StringIO()
    print_array([4, 8], out=buffer)
    assert buffer.getvalue() == format_array([4, 8]) + "\n"


def test_print_array_empty_writes_newline():
    buffer = io.StringIO()
    print_array([], out=buffer)
    assert buffer.getvalue() == "\n"


def test_print_array_defaults_to_stdout(capsys):
    print_array([7, 9])
    assert capsys.readouterr().out == format_array([7, 9]) + "\n"
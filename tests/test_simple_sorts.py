import io
from itertools import combinations

import pytest

from sortsteps.simple_sorts import (
    bubble_sort,
    counting_sort,
    quick_sort,
    quick_sort_hoare,
    selection_sort,
    shell_sort,
)
from sortsteps.tracing import format_array

SAMPLES = [
    [19, 48, 99, 71, 13, 52, 96, 73, 86, 7],
    [3, 1, 2],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4],
    [2, 2, 1, 1, 3, 0],
    [0, 7, 7, 7, 1],
]


def inversions(values):
    return sum(1 for a, b in combinations(values, 2) if a > b)


def trace_lines(buffer):
    return [
        [int(part) for part in line.split(", ")]
        for line in buffer.getvalue().splitlines()
    ]


@pytest.mark.parametrize(
    "sort",
    [bubble_sort, selection_sort, quick_sort, shell_sort, counting_sort, quick_sort_hoare],
)
@pytest.mark.parametrize("values", SAMPLES)
def test_sorts_in_place(sort, values):
    data = list(values)
    sort(data, out=io.StringIO())
    assert data == sorted(values)


@pytest.mark.parametrize(
    "sort",
    [bubble_sort, selection_sort, quick_sort, shell_sort, counting_sort, quick_sort_hoare],
)
@pytest.mark.parametrize("values", [[], [9]])
def test_short_input_untouched_and_silent(sort, values):
    data = list(values)
    buffer = io.StringIO()
    sort(data, out=buffer)
    assert data == values
    assert buffer.getvalue() == ""


@pytest.mark.parametrize(
    "sort", [bubble_sort, selection_sort, quick_sort, shell_sort, quick_sort_hoare]
)
@pytest.mark.parametrize("values", SAMPLES)
def test_trace_lines_are_permutations_ending_sorted(sort, values):
    buffer = io.StringIO()
    sort(list(values), out=buffer)
    lines = trace_lines(buffer)
    for line in lines:
        assert sorted(line) == sorted(values)
    if lines:
        assert lines[-1] == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_bubble_sort_prints_once_per_inversion(values):
    buffer = io.StringIO()
    bubble_sort(list(values), out=buffer)
    assert len(trace_lines(buffer)) == inversions(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_selection_sort_prints_at_most_size_minus_one(values):
    buffer = io.StringIO()
    selection_sort(list(values), out=buffer)
    assert len(trace_lines(buffer)) <= len(values) - 1


@pytest.mark.parametrize("sort", [bubble_sort, selection_sort, quick_sort, quick_sort_hoare])
def test_sorted_input_needs_no_swaps(sort):
    buffer = io.StringIO()
    data = [1, 2, 3, 4, 5]
    sort(data, out=buffer)
    assert data == [1, 2, 3, 4, 5]
    assert buffer.getvalue() == ""


def test_shell_sort_prints_once_per_gap():
    buffer = io.StringIO()
    data = [19, 48, 99, 71, 13, 52, 96, 73, 86, 7]
    shell_sort(data, out=buffer)
    # Knuth gaps for ten elements are 4 and 1.
    assert len(trace_lines(buffer)) == 2


@pytest.mark.parametrize("values", SAMPLES)
def test_counting_sort_prints_cumulative_counts(values):
    buffer = io.StringIO()
    counting_sort(list(values), out=buffer)
    lines = trace_lines(buffer)
    assert len(lines) == 1
    counts = lines[0]
    assert len(counts) == max(values) + 1
    assert counts[-1] == len(values)
    assert counts == sorted(counts)
    assert counts[0] == values.count(0)


def test_counting_sort_rejects_negatives():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2], out=io.StringIO())


def test_bubble_sort_two_elements_trace():
    buffer = io.StringIO()
    bubble_sort([2, 1], out=buffer)
    assert buffer.getvalue() == format_array([1, 2]) + "\n"


def test_default_output_is_stdout(capsys):
    data = [2, 1]
    selection_sort(data)
    assert data == [1, 2]
    assert capsys.readouterr().out == format_array([1, 2]) + "\n"
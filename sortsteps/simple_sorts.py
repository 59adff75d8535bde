"""In-place array sorts that print the array as they work."""

from __future__ import annotations

from collections.abc import MutableSequence
from itertools import accumulate
from typing import TextIO

from sortsteps.tracing import print_array


def _swap(values: MutableSequence[int], i: int, j: int) -> None:
    values[i], values[j] = values[j], values[i]


def bubble_sort(values: MutableSequence[int], *, out: TextIO | None = None) -> None:
    """Bubble sort in place, printing after every swap; stops early once sorted."""
    size = len(values)
    for done in range(size - 1):
        swapped = False
        for j in range(size - done - 1):
            if values[j] > values[j + 1]:
                _swap(values, j, j + 1)
                swapped = True
                print_array(values, out=out)
        if not swapped:
            return


def selection_sort(values: MutableSequence[int], *, out: TextIO | None = None) -> None:
    """Selection sort in place, printing after every swap."""
    size = len(values)
    for i in range(size - 1):
        smallest = min(range(i, size), key=values.__getitem__)
        if smallest != i:
            _swap(values, i, smallest)
            print_array(values, out=out)


def quick_sort(values: MutableSequence[int], *, out: TextIO | None = None) -> None:
    """Quick sort in place with the Lomuto scheme, printing after every swap."""

    def partition_sort(low: int, high: int) -> None:
        if low >= high:
            return
        pivot = values[high]
        boundary = low
        for i in range(low, high):
            if values[i] <= pivot:
                if i != boundary:
                    _swap(values, i, boundary)
                    print_array(values, out=out)
                boundary += 1
        if boundary != high:
            _swap(values, boundary, high)
            print_array(values, out=out)
        partition_sort(low, boundary - 1)
        partition_sort(boundary + 1, high)

    if len(values) >= 2:
        partition_sort(0, len(values) - 1)


def shell_sort(values: MutableSequence[int], *, out: TextIO | None = None) -> None:
    """Shell sort in place with Knuth gaps, printing after each gap."""
    size = len(values)
    if size < 2:
        return
    interval = 1
    while interval <= size // 3:
        interval = interval * 3 + 1
    while interval > 0:
        for i in range(interval, size):
            held = values[i]
            j = i
            while j >= interval and values[j - interval] > held:
                values[j] = values[j - interval]
                j -= interval
            values[j] = held
        print_array(values, out=out)
        interval = (interval - 1) // 3


def counting_sort(values: MutableSequence[int], *, out: TextIO | None = None) -> None:
    """Counting sort of non-negative integers, printing the cumulative counts."""
    if len(values) < 2:
        return
    if min(values) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    positions = list(accumulate(counts))
    print_array(positions, out=out)
    result = [0] * len(values)
    for value in values:
        positions[value] -= 1
        result[positions[value]] = value
    values[:] = result


def quick_sort_hoare(values: MutableSequence[int], *, out: TextIO | None = None) -> None:
    """Quick sort in place with the Hoare scheme, printing after every swap."""

    def partition(left: int, right: int) -> int:
        pivot = values[right]
        high, low = left - 1, right + 1
        while high < low:
            high += 1
            while values[high] < pivot:
                high += 1
            low -= 1
            while values[low] > pivot:
                low -= 1
            if high < low:
                _swap(values, high, low)
                print_array(values, out=out)
        return high

    def partition_sort(left: int, right: int) -> None:
        if right - left > 0:
            split = partition(left, right)
            partition_sort(left, split - 1)
            partition_sort(split, right)

    if len(values) >= 2:
        partition_sort(0, len(values) - 1)
"""Merge, heap, radix and bitonic sorts that print their progress."""

from __future__ import annotations

import sys
from collections.abc import MutableSequence
from typing import TextIO

from sortsteps.tracing import print_array

_BASE = 10


def _stream(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def _swap(values: MutableSequence[int], i: int, j: int) -> None:
    values[i], values[j] = values[j], values[i]


def merge_sort(values: MutableSequence[int], *, out: TextIO | None = None) -> None:
    """Top-down merge sort in place, printing both halves and the result of each merge."""
    if len(values) < 2:
        return
    stream = _stream(out)

    def sort_range(lo: int, hi: int) -> None:
        if hi - lo < 2:
            return
        mid = lo + (hi - lo) // 2
        sort_range(lo, mid)
        sort_range(mid, hi)
        stream.write("Merging...\n[left]: ")
        print_array(values[lo:mid], out=stream)
        stream.write("[right]: ")
        print_array(values[mid:hi], out=stream)

        merged: list[int] = []
        left, right = lo, mid
        while left < mid and right < hi:
            if values[left] < values[right]:
                merged.append(values[left])
                left += 1
            else:
                merged.append(values[right])
                right += 1
        merged.extend(values[left:mid])
        merged.extend(values[right:hi])
        values[lo:hi] = merged

        stream.write("[Done]: ")
        print_array(values[lo:hi], out=stream)

    sort_range(0, len(values))


def heap_sort(values: MutableSequence[int], *, out: TextIO | None = None) -> None:
    """Heap sort in place with sift-down, printing the array after every swap."""
    size = len(values)
    if size < 2:
        return

    def sift_down(limit: int, current: int) -> None:
        while True:
            left, right = 2 * current + 1, 2 * current + 2
            largest = current
            if left < limit and values[left] > values[largest]:
                largest = left
            if right < limit and values[right] > values[largest]:
                largest = right
            if largest == current:
                return
            _swap(values, current, largest)
            print_array(values, out=out)
            current = largest

    for i in range(size // 2 - 1, -1, -1):
        sift_down(size, i)
    for end in range(size - 1, 0, -1):
        _swap(values, 0, end)
        print_array(values, out=out)
        sift_down(end, 0)


def radix_sort(values: MutableSequence[int], *, out: TextIO | None = None) -> None:
    """LSD radix sort of non-negative integers, printing after each digit pass."""
    if len(values) < 2:
        return
    if min(values) < 0:
        raise ValueError("radix sort needs non-negative integers")
    largest = max(values)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(_BASE)]
        for value in values:
            buckets[(value // exp) % _BASE].append(value)
        values[:] = [value for bucket in buckets for value in bucket]
        print_array(values, out=out)
        exp *= _BASE


def bitonic_sort(values: MutableSequence[int], *, out: TextIO | None = None) -> None:
    """Bitonic sort in place, printing each sub-sequence before and after merging.

    The result is sorted when the length is a power of two.
    """
    size = len(values)
    if size < 2:
        return
    stream = _stream(out)

    def merge(left: int, right: int, ascending: bool) -> None:
        if right - left < 1:
            return
        step = (left + right) // 2
        half = (right - left + 1) // 2
        for i in range(left, left + half):
            if ascending == (values[i] > values[i + half]):
                _swap(values, i, i + half)
        merge(left, step, ascending)
        merge(step + 1, right, ascending)

    def report(title: str, left: int, right: int, ascending: bool) -> None:
        label = "UP" if ascending else "DOWN"
        print(f"{title} [{right - left + 1}/{size}] ({label}):", file=stream)
        print_array(values[left:right + 1], out=stream)

    def recurse(left: int, right: int, ascending: bool) -> None:
        if right - left < 1:
            return
        step = (left + right) // 2
        report("Merging", left, right, ascending)
        recurse(left, step, True)
        recurse(step + 1, right, False)
        merge(left, right, ascending)
        report("Result", left, right, ascending)

    recurse(0, size - 1, True)
"""Printing of intermediate states while a sort runs."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO


def format_array(values: Iterable[int]) -> str:
    """Return the values joined by ", " on a single line."""
    return ", ".join(str(value) for value in values)


def print_array(values: Iterable[int], *, out: TextIO | None = None) -> None:
    """Write the values as one line to ``out`` (standard output by default)."""
    stream = out if out is not None else sys.stdout
    print(format_array(values), file=stream)
"""Sorting algorithms that trace each intermediate step, and a card deck sorter."""

__version__ = "0.1.0"
__all__ = ["advanced_sorts", "deck", "linked", "simple_sorts", "tracing"]
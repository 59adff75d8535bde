"""Doubly linked lists of integers and sorts that relink their nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

from sortsteps.tracing import print_array


@dataclass(eq=False)
class ListNode:
    """A node of a doubly linked list holding one integer."""

    n: int
    prev: ListNode | None = field(default=None, repr=False)
    next: ListNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list of integers, kept in order from ``head``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: ListNode | None = None
        tail: ListNode | None = None
        for value in values:
            node = ListNode(value, prev=tail)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def __iter__(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"DoublyLinkedList({self.values()!r})"

    def values(self) -> list[int]:
        """Return the stored integers in list order."""
        return [node.n for node in self]

    def _swap_with_prev(self, node: ListNode) -> None:
        """Move ``node`` one place towards the head."""
        before = node.prev
        if before is None:
            raise ValueError("node is already at the head")
        after = node.next
        if after is not None:
            after.prev = before
        before.next = after
        node.prev = before.prev
        node.next = before
        if before.prev is not None:
            before.prev.next = node
        else:
            self.head = node
        before.prev = node


def print_list(items: Iterable[ListNode], *, out: TextIO | None = None) -> None:
    """Write the integers of the nodes as one line."""
    print_array((node.n for node in items), out=out)


def insertion_sort_list(items: DoublyLinkedList, *, out: TextIO | None = None) -> None:
    """Sort the list in place by insertion, printing it after every swap."""
    if items.head is None:
        return
    current = items.head.next
    while current is not None:
        node = current
        current = current.next
        while node.prev is not None and node.n < node.prev.n:
            items._swap_with_prev(node)
            print_list(items, out=out)


def cocktail_sort_list(items: DoublyLinkedList, *, out: TextIO | None = None) -> None:
    """Sort the list in place by cocktail shaker sort, printing after every swap."""
    if items.head is None or items.head.next is None:
        return

    start: ListNode = items.head
    end: ListNode | None = None
    while True:
        swapped = False
        current = start
        while current.next is not end:
            following = current.next
            if current.n > following.n:
                items._swap_with_prev(following)
                print_list(items, out=out)
                swapped = True
            else:
                current = following
        if not swapped:
            break

        swapped = False
        end = current
        current = current.prev
        while current.prev is not None and current is not start:
            if current.n < current.prev.n:
                items._swap_with_prev(current)
                print_list(items, out=out)
                swapped = True
            else:
                current = current.prev
        start = current.next
        if not swapped:
            break
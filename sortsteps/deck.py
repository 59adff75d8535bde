"""A deck of playing cards as a doubly linked list, and ways to sort it."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from functools import cmp_to_key
from itertools import zip_longest

_CARDS_PER_KIND = 13

_RANKS = {
    "Ace": 1,
    **{str(number): number for number in range(2, 11)},
    "Jack": 11,
    "Queen": 12,
    "King": 13,
}


class Kind(IntEnum):
    """Card suits in sorting order."""

    SPADE = 0
    HEART = 1
    CLUB = 2
    DIAMOND = 3

    @property
    def letter(self) -> str:
        """The one-letter abbreviation of the suit."""
        return "SHCD"[self]


@dataclass(frozen=True)
class Card:
    """A playing card: a value from "Ace" to "King" and a suit."""

    value: str
    kind: Kind


@dataclass(eq=False)
class DeckNode:
    """A node of the deck holding one card."""

    card: Card
    prev: DeckNode | None = field(default=None, repr=False)
    next: DeckNode | None = field(default=None, repr=False)


class Deck:
    """A doubly linked list of cards, in order from ``head``."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self.head: DeckNode | None = None
        self._link(cards)

    def _link(self, cards: Iterable[Card]) -> None:
        self.head = None
        tail: DeckNode | None = None
        for card in cards:
            node = DeckNode(card, prev=tail)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def __iter__(self) -> Iterator[DeckNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Deck({self.cards()!r})"

    def cards(self) -> list[Card]:
        """Return the cards in deck order."""
        return [node.card for node in self]

    def _swap_with_prev(self, node: DeckNode) -> None:
        """Move ``node`` one place towards the head."""
        before = node.prev
        if before is None:
            raise ValueError("node is already at the head")
        before.next = node.next
        if node.next is not None:
            node.next.prev = before
        node.next = before
        node.prev = before.prev
        before.prev = node
        if node.prev is not None:
            node.prev.next = node
        else:
            self.head = node


def card_position(card: Card) -> int:
    """Return the card's place in a sorted deck, from 1 to 52."""
    try:
        rank = _RANKS[card.value]
    except KeyError:
        raise ValueError(f"unknown card value: {card.value!r}") from None
    return rank + int(card.kind) * _CARDS_PER_KIND


def _strcmp(first: str, second: str) -> int:
    for a, b in zip_longest(first, second, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def compare_cards(first: Card, second: Card) -> int:
    """Order by suit, then by value text; negative, zero or positive."""
    if first.kind == second.kind:
        return _strcmp(first.value, second.value)
    return int(first.kind) - int(second.kind)


def sort_deck(deck: Deck) -> None:
    """Sort the deck in place by insertion: suits in order, then Ace to King."""
    if deck.head is None:
        return
    current = deck.head.next
    while current is not None:
        node = current
        current = current.next
        while node.prev is not None and card_position(node.prev.card) > card_position(node.card):
            deck._swap_with_prev(node)


def merge_sort_deck(deck: Deck) -> None:
    """Rebuild the deck in the order given by ``compare_cards`` (stable)."""
    deck._link(sorted(deck.cards(), key=cmp_to_key(compare_cards)))


def format_deck(deck: Deck) -> str:
    """Return the cards as "{value, S}" items, thirteen to a line."""
    parts: list[str] = []
    for index, card in enumerate(deck.cards()):
        column = index % _CARDS_PER_KIND
        if column:
            parts.append(", ")
        parts.append(f"{{{card.value}, {card.kind.letter}}}")
        if column == _CARDS_PER_KIND - 1:
            parts.append("\n")
    return "".join(parts)


_S, _H, _C, _D = Kind.SPADE, Kind.HEART, Kind.CLUB, Kind.DIAMOND

SHUFFLED_CARDS: Sequence[Card] = tuple(
    Card(value, kind)
    for value, kind in (
        ("Jack", _C), ("4", _H), ("3", _H), ("3", _D), ("Queen", _H), ("5", _H),
        ("5", _S), ("10", _H), ("6", _H), ("5", _D), ("6", _S), ("9", _H),
        ("7", _D), ("Jack", _S), ("Ace", _D), ("9", _C), ("Jack", _D), ("7", _S),
        ("King", _D), ("10", _C), ("King", _S), ("8", _C), ("9", _S), ("6", _C),
        ("Ace", _C), ("3", _S), ("8", _S), ("9", _D), ("2", _H), ("4", _D),
        ("6", _D), ("3", _C), ("Queen", _C), ("10", _S), ("8", _D), ("8", _H),
        ("Ace", _S), ("Jack", _H), ("2", _C), ("4", _S), ("2", _S), ("2", _D),
        ("King", _C), ("Queen", _S), ("Queen", _D), ("7", _C), ("7", _H), ("5", _C),
        ("10", _D), ("4", _C), ("King", _H), ("Ace", _H),
    )
)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a shuffled deck, sort it, and print it again."""
    deck = Deck(SHUFFLED_CARDS)
    out = sys.stdout
    out.write(format_deck(deck))
    out.write("\n")
    sort_deck(deck)
    out.write("\n")
    out.write(format_deck(deck))
    return 0
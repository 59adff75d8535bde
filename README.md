# sortsteps

sortsteps is a set of classic sorting algorithms that show their work. Each sort
changes the list it is given in place and puts it in ascending order. As it
runs, it writes the current state to a text stream after each swap, pass or
merge, in the form `1, 2, 3`. This makes the package useful for learning how
each algorithm moves elements around.

## Installation

```
pip install .
```

## Sorting lists of integers

```python
import sys
from sortsteps.simple_sorts import bubble_sort

data = [19, 48, 99, 71, 13, 52, 96, 73, 86, 7]
bubble_sort(data, out=sys.stdout)
print(data)  # [7, 13, 19, 48, 52, 71, 73, 86, 96, 99]
```

Every sort takes the list and a keyword-only `out`, which can be any text
stream: `sys.stdout`, an open file or an `io.StringIO`. If you leave `out` out,
the sort writes to standard output. A list with fewer than two items is left as
it is, and nothing is printed.

`sortsteps.simple_sorts` has these sorts:

- `bubble_sort`: prints after every swap. It stops after the first pass that
  makes no swap.
- `selection_sort`: prints after every swap.
- `quick_sort`: uses Lomuto partitioning with the last element as the pivot.
  Prints after every swap.
- `shell_sort`: uses Knuth intervals (1, 4, 13, …). Prints once for each
  interval.
- `counting_sort`: prints the cumulative count array once. It works on
  non-negative integers only and raises `ValueError` if it finds a negative one.
- `quick_sort_hoare`: uses Hoare partitioning with the last element as the
  pivot. Prints after every swap.

`sortsteps.advanced_sorts` has these sorts:

- `merge_sort`: a top-down merge sort. For each merge it prints three lines,
  `Merging...` with `[left]: …`, then `[right]: …`, then `[Done]: …`.
- `heap_sort`: a max-heap sort using sift-down. Prints after every swap.
- `radix_sort`: an LSD sort in base 10. Prints after each digit pass. It works
  on non-negative integers only and raises `ValueError` if it finds a negative
  one.
- `bitonic_sort`: prints each sub-sequence before merging, as
  `Merging [n/size] (UP):` or `(DOWN):`, and after merging, as `Result [n/size] …`.
  The result is only sorted when the length is a power of two.

`sortsteps.tracing` holds the formatting used for each printed line.
`format_array(values)` returns the text, and `print_array(values, out=...)`
writes that text followed by a newline.

## Doubly linked lists

`sortsteps.linked.DoublyLinkedList` is built from an iterable of integers and
holds `ListNode` objects. Each node has the fields `n`, `prev` and `next`.
Iterating over the list yields its nodes. `len()` counts them, and `values()`
returns the integers as a list.

The two sorts below relink the nodes themselves rather than copying values.
Each one prints the whole list after every swap.

```python
import sys
from sortsteps.linked import DoublyLinkedList, insertion_sort_list, cocktail_sort_list

items = DoublyLinkedList([19, 48, 99, 71, 13])
insertion_sort_list(items, out=sys.stdout)
print(items.values())  # [13, 19, 48, 71, 99]
```

`cocktail_sort_list` makes passes in both directions, forward and then backward.
`print_list(items, out=...)` writes any iterable of nodes in the same
comma-separated form.

## Sorting a deck of cards

`sortsteps.deck` models playing cards:

- A `Card` is a frozen dataclass with a `value` and a `kind`. The `value` is one
  of `"Ace"`, `"2"` … `"10"`, `"Jack"`, `"Queen"` or `"King"`.
- `Kind` is an `IntEnum` with the members `SPADE`, `HEART`, `CLUB` and
  `DIAMOND`. Each member has a one-letter `letter`.
- A `Deck` is a doubly linked list of `DeckNode` objects, built from an iterable
  of cards. Iterating over it yields nodes, and `cards()` returns the cards as a
  list.

The module provides these functions:

- `sort_deck(deck)` sorts the deck in place with insertion sort. Spades come
  first, then hearts, clubs and diamonds, and each suit runs from Ace to King.
- `card_position(card)` returns the rank behind that ordering, from 1 to 52. It
  raises `ValueError` for an unknown card value.
- `merge_sort_deck(deck)` rebuilds the deck in a different order. It sorts
  stably by kind first, and then by comparing the value text character by
  character (see `compare_cards(first, second)`).
- `format_deck(deck)` renders a deck as `{Ace, S}, {2, S}, ...`, with thirteen
  cards to a line.

`SHUFFLED_CARDS` is a fixed, mixed-up set of 52 cards. The `sortsteps-deck`
command prints that deck, sorts it with `sort_deck` and then prints the result:

```
sortsteps-deck
```
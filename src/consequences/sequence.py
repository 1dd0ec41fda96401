"""Searching, membership and removal helpers.

Every helper takes a plain test callable. A `consequences.Predicate` is one,
so the field comparisons it offers work with every helper:

```py
from consequences import Predicate
from consequences.sequence import first, remove_all

first(orders, Predicate.greater_than("total", 100))
remove_all(orders, Predicate.on("cancelled"))
```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, MutableSequence, Reversible, Sequence
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")  # Element

Test = Callable[[E], Any]


def first(elements: Iterable[E], test: Test[E]) -> E | None:
    """Return the first element passing ``test``, or None."""
    return next((element for element in elements if test(element)), None)


def last(elements: Iterable[E], test: Test[E]) -> E | None:
    """Return the last element passing ``test``, or None.

    Reversible inputs are searched from the end; other iterables are scanned
    in full.
    """
    if isinstance(elements, Reversible):
        return first(reversed(elements), test)
    found = None
    for element in elements:
        if test(element):
            found = element
    return found


def first_index(elements: Sequence[E], test: Test[E]) -> int | None:
    """Return the index of the first element passing ``test``, or None."""
    return next(
        (index for index, element in enumerate(elements) if test(element)), None
    )


def last_index(elements: Sequence[E], test: Test[E]) -> int | None:
    """Return the index of the last element passing ``test``, or None."""
    for index in range(len(elements) - 1, -1, -1):
        if test(elements[index]):
            return index
    return None


def contains(elements: Iterable[E], test: Test[E]) -> bool:
    """Whether any element passes ``test``."""
    return any(test(element) for element in elements)


def all_satisfy(elements: Iterable[E], test: Test[E]) -> bool:
    """Whether every element passes ``test`` (True for an empty input)."""
    return all(test(element) for element in elements)


def all_true(values: Iterable[bool]) -> bool:
    """Whether every value is true (True for an empty input)."""
    return all(values)


def all_false(values: Iterable[bool]) -> bool:
    """Whether every value is false (True for an empty input)."""
    return not any(values)


def remove_all(elements: MutableSequence[E], test: Test[E]) -> None:
    """Remove, in place, every element passing ``test``.

    The remaining elements keep their relative order.
    """
    before = len(elements)
    if isinstance(elements, list):
        elements[:] = [element for element in elements if not test(element)]
    else:
        for index in range(len(elements) - 1, -1, -1):
            if test(elements[index]):
                del elements[index]
    logger.debug("Removed %d of %d element(s)", before - len(elements), before)

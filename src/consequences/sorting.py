"""Key-based sorting.

`sorted_by` returns a new list and `sort_by` sorts a list in place. Both
project every element through ``key`` and order by the projected value.

Projected ``None`` values sort before every present value (in ascending
order), so optional fields can be sorted without a sentinel. Sorting is
stable.

String fields can be ordered with a `TextOrder`:

* ``ALPHABETICAL`` -- code point order (Python's own ``str`` ordering).
* ``CASE_INSENSITIVE`` -- order of the case-folded text.
* ``LOCALIZED`` -- ``LC_COLLATE`` collation (see `consequences.config`).
* ``LOCALIZED_CASE_INSENSITIVE`` -- ``LC_COLLATE`` collation of the
  case-folded text.
* ``LOCALIZED_STANDARD`` -- natural ordering that ignores case and diacritics
  and compares digit runs by value (``"v2" < "v10"``).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import StrEnum
from typing import Any, TypeVar

from . import text
from .keys import Key, resolve_key

E = TypeVar("E")  # Element


class TextOrder(StrEnum):
    """Orderings for string-valued keys."""

    ALPHABETICAL = "alphabetical"
    CASE_INSENSITIVE = "case_insensitive"
    LOCALIZED = "localized"
    LOCALIZED_CASE_INSENSITIVE = "localized_case_insensitive"
    LOCALIZED_STANDARD = "localized_standard"


_TEXT_TRANSFORMS: dict[TextOrder, Callable[[str], Any]] = {
    TextOrder.ALPHABETICAL: str,
    TextOrder.CASE_INSENSITIVE: text.fold_case,
    TextOrder.LOCALIZED: text.collation_key,
    TextOrder.LOCALIZED_CASE_INSENSITIVE: text.case_insensitive_collation_key,
    TextOrder.LOCALIZED_STANDARD: text.standard_sort_key,
}


def sort_key(key: Key, order: TextOrder | None = None) -> Callable[[Any], tuple]:
    """Build the ``key=`` callable used by `sorted_by` and `sort_by`.

    Args:
        key: Projection of the field to order by.
        order: How to compare string values. None compares the projected
            values directly.

    Returns:
        A callable mapping an element to a comparable tuple in which a
        ``None`` field ranks first.
    """
    project = resolve_key(key)
    transform = _TEXT_TRANSFORMS[TextOrder(order)] if order is not None else None

    def none_first(element: Any) -> tuple:
        value = project(element)
        if value is None:
            return (0,)
        return (1, transform(value) if transform else value)

    return none_first


def sorted_by(
    elements: Iterable[E],
    key: Key,
    *,
    order: TextOrder | None = None,
    descending: bool = False,
) -> list[E]:
    """Return a new list of ``elements`` ordered by ``key``.

    Args:
        elements: The elements to sort.
        key: Projection of the field to order by.
        order: Ordering of string values; see `TextOrder`.
        descending: Reverse the ordering (``None`` fields then come last).

    Returns:
        The sorted list.
    """
    return sorted(elements, key=sort_key(key, order), reverse=descending)


def sort_by(
    elements: list[E],
    key: Key,
    *,
    order: TextOrder | None = None,
    descending: bool = False,
) -> None:
    """Sort ``elements`` in place by ``key``; see `sorted_by`."""
    elements.sort(key=sort_key(key, order), reverse=descending)

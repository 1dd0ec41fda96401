"""Composable element predicates.

A `Predicate` wraps a single-argument test and offers named constructors for
the common field comparisons (equality, ordering, absence, boolean flags and
substring containment). Predicates are callable, combine with ``&``, ``|`` and
``~``, and filter iterables either eagerly (`Predicate.apply`) or lazily
(`Predicate.apply_lazy`).

A list of predicates acts as a compound filter: `filter_using` folds the
source through each predicate in turn, which selects exactly the elements
that satisfy all of them.

Example:
    ```py
    from consequences import Predicate, filter_using

    cheap_in_stock = [
        Predicate.on_not_nil("stock"),
        Predicate.less_than("price", 10),
    ]
    filter_using(products, cheap_in_stock)
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from functools import reduce
from typing import Any, Generic, TypeVar

from . import text
from .keys import Key, resolve_key

logger = logging.getLogger(__name__)

E = TypeVar("E")  # Element


def _always(_element: object) -> bool:
    return True


def _never(_element: object) -> bool:
    return False


@dataclass(frozen=True, slots=True, eq=False)
class Predicate(Generic[E]):
    """An immutable boolean test over one element.

    Attributes:
        is_included: The wrapped test. Its result is interpreted for truth.
    """

    is_included: Callable[[E], Any]

    def __call__(self, element: E) -> bool:
        return bool(self.is_included(element))

    # ------------------------------------------------------------------
    # Application
    # ------------------------------------------------------------------

    def apply(self, elements: Iterable[E]) -> list[E]:
        """Return the elements that pass the test, in their original order."""
        return [element for element in elements if self.is_included(element)]

    def apply_lazy(self, elements: Iterable[E]) -> Iterator[E]:
        """Return an iterator over the elements that pass the test.

        Nothing is materialized; the source is consumed as the result is.
        """
        return filter(self.is_included, elements)

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def __and__(self, other: Callable[[E], Any]) -> Predicate[E]:
        return all_of([self, other])

    def __or__(self, other: Callable[[E], Any]) -> Predicate[E]:
        return any_of([self, other])

    def __invert__(self) -> Predicate[E]:
        is_included = self.is_included
        return Predicate(lambda element: not is_included(element))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def custom(cls, is_included: Callable[[E], Any]) -> Predicate[E]:
        """Wrap an arbitrary test."""
        return cls(is_included)

    @classmethod
    def on_nil(cls, key: Key) -> Predicate[E]:
        """Accept elements whose field is ``None``."""
        project = resolve_key(key)
        return cls(lambda element: project(element) is None)

    @classmethod
    def on_not_nil(cls, key: Key) -> Predicate[E]:
        """Accept elements whose field is not ``None``."""
        project = resolve_key(key)
        return cls(lambda element: project(element) is not None)

    @classmethod
    def equal_to(cls, key: Key, value: Any) -> Predicate[E]:
        """Accept elements whose field equals ``value``.

        An absent (``None``) field never equals a concrete value.
        """
        project = resolve_key(key)
        return cls(lambda element: project(element) == value)

    @classmethod
    def not_equal_to(cls, key: Key, value: Any) -> Predicate[E]:
        """Accept elements whose field differs from ``value``."""
        project = resolve_key(key)
        return cls(lambda element: project(element) != value)

    @classmethod
    def less_than(cls, key: Key, bound: Any) -> Predicate[E]:
        """Accept elements whose field is strictly below ``bound``."""
        project = resolve_key(key)
        return cls(lambda element: project(element) < bound)

    @classmethod
    def greater_than(cls, key: Key, bound: Any) -> Predicate[E]:
        """Accept elements whose field is strictly above ``bound``."""
        project = resolve_key(key)
        return cls(lambda element: project(element) > bound)

    @classmethod
    def less_than_or_equal_to(cls, key: Key, bound: Any) -> Predicate[E]:
        """Accept elements whose field is at most ``bound``."""
        project = resolve_key(key)
        return cls(lambda element: project(element) <= bound)

    @classmethod
    def greater_than_or_equal_to(cls, key: Key, bound: Any) -> Predicate[E]:
        """Accept elements whose field is at least ``bound``."""
        project = resolve_key(key)
        return cls(lambda element: project(element) >= bound)

    @classmethod
    def on(cls, key: Key) -> Predicate[E]:
        """Accept elements whose boolean field is true."""
        project = resolve_key(key)
        return cls(lambda element: bool(project(element)))

    @classmethod
    def on_not(cls, key: Key) -> Predicate[E]:
        """Accept elements whose boolean field is false."""
        project = resolve_key(key)
        return cls(lambda element: not project(element))

    @classmethod
    def contains(
        cls, key: Key, substring: str, *, contains_empty: bool = True
    ) -> Predicate[E]:
        """Accept elements whose string field contains ``substring``.

        Args:
            key: Projection of a ``str`` (or ``str | None``) field.
            substring: The text to look for.
            contains_empty: When True (default) an empty ``substring`` accepts
                every element without looking at the field. When False the
                literal containment test is used even for an empty
                ``substring``, so elements whose field is ``None`` are
                rejected.

        Returns:
            The containment predicate.
        """
        return cls._containment(
            key,
            substring,
            contains_empty,
            lambda value, sub: sub in value,
        )

    @classmethod
    def case_insensitive_contains(
        cls, key: Key, substring: str, *, contains_empty: bool = True
    ) -> Predicate[E]:
        """Like `contains`, comparing case-folded text.

        See `consequences.text.fold_case`.
        """
        return cls._containment(
            key, substring, contains_empty, text.case_insensitive_contains
        )

    @classmethod
    def standard_contains(
        cls, key: Key, substring: str, *, contains_empty: bool = True
    ) -> Predicate[E]:
        """Like `contains`, ignoring case and diacritics.

        See `consequences.text.fold_standard`.
        """
        return cls._containment(key, substring, contains_empty, text.standard_contains)

    @classmethod
    def _containment(
        cls,
        key: Key,
        substring: str,
        contains_empty: bool,
        contains: Callable[[str, str], bool],
    ) -> Predicate[E]:
        if not substring and contains_empty:
            return cls(_always)
        project = resolve_key(key)

        def is_included(element: E) -> bool:
            value = project(element)
            return value is not None and contains(value, substring)

        return cls(is_included)


def all_of(predicates: Iterable[Callable[[E], Any]]) -> Predicate[E]:
    """Predicate that passes if *all* given tests pass (true when empty)."""
    tests = tuple(predicates)
    if not tests:
        return Predicate(_always)
    return Predicate(lambda element: all(test(element) for test in tests))


def any_of(predicates: Iterable[Callable[[E], Any]]) -> Predicate[E]:
    """Predicate that passes if *any* given test passes (false when empty)."""
    tests = tuple(predicates)
    if not tests:
        return Predicate(_never)
    return Predicate(lambda element: any(test(element) for test in tests))


def _as_predicate(test: Callable[[E], Any]) -> Predicate[E]:
    return test if isinstance(test, Predicate) else Predicate.custom(test)


def filter_using(
    elements: Iterable[E], predicates: Iterable[Callable[[E], Any]]
) -> list[E]:
    """Filter ``elements`` through every predicate in order.

    Each predicate narrows the result of the previous one, so the outcome is
    the elements satisfying all predicates, in source order. With no
    predicates the input is returned unchanged (as a new list).

    Args:
        elements: The source iterable. It is consumed once.
        predicates: `Predicate` instances or plain test callables.

    Returns:
        The surviving elements.
    """
    tests = [_as_predicate(test) for test in predicates]
    logger.debug("Compound filter over %d predicate(s)", len(tests))
    return reduce(
        lambda partial, predicate: predicate.apply(partial), tests, list(elements)
    )


def filter_using_lazy(
    elements: Iterable[E], predicates: Iterable[Callable[[E], Any]]
) -> Iterator[E]:
    """Lazy counterpart of `filter_using`.

    The predicates are chained as nested filters; no intermediate list is
    built and the source is consumed as the result is.
    """
    tests = [_as_predicate(test) for test in predicates]
    logger.debug("Lazy compound filter over %d predicate(s)", len(tests))
    return reduce(
        lambda partial, predicate: predicate.apply_lazy(partial), tests, iter(elements)
    )

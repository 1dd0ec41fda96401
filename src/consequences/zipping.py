"""Fixed-arity zips over three, four and five sources.

`zip3`, `zip4` and `zip5` generalize the builtin pairwise ``zip``: they advance
their sources in lockstep and produce tuples until the first source runs out.

A zip sequence keeps references to its sources without evaluating them.
Every ``iter()`` call builds a new `ZipIterator` from fresh ``iter(source)``
cursors, so:

* a zip over re-iterable collections (lists, tuples, ranges, ...) can be
  traversed any number of times, each traversal starting from the beginning;
* a zip over at least one single-pass iterator (generators, file objects,
  ``iter(...)`` results) can be traversed once.

A `ZipIterator` is a two-state machine. While *active* each ``next()`` pulls
one element from every source, left to right. The first source that raises
``StopIteration`` moves it to *ended*, which is terminal. Sources advanced
earlier during that failing step have consumed their element, which is
discarded. A `ZipIterator` is not thread-safe.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sized
from typing import Any, Generic, TypeVar, overload

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=tuple)  # Produced tuple
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
F = TypeVar("F")


def lower_bound_count(source: Iterable[Any]) -> int:
    """Return a count of elements ``source`` is certain to produce.

    Sized sources report their length; anything else reports zero.
    """
    return len(source) if isinstance(source, Sized) else 0


class ZipIterator(Generic[T]):
    """Lockstep iterator over a fixed number of source iterators."""

    __slots__ = ("_iterators", "_reached_end")

    def __init__(self, iterators: tuple[Iterator[Any], ...]) -> None:
        self._iterators = iterators
        self._reached_end = False

    @property
    def reached_end(self) -> bool:
        """Whether a source has been exhausted (terminal)."""
        return self._reached_end

    def __iter__(self) -> ZipIterator[T]:
        return self

    def __next__(self) -> T:
        if self._reached_end:
            raise StopIteration
        items = []
        for position, iterator in enumerate(self._iterators):
            try:
                items.append(next(iterator))
            except StopIteration:
                self._reached_end = True
                logger.debug(
                    "Zip of %d sources ended: source %d exhausted",
                    len(self._iterators),
                    position,
                )
                raise StopIteration from None
        return tuple(items)  # type: ignore[return-value]


class _ZipSequence(Generic[T]):
    """Shared mechanics of the fixed-arity zip sequences."""

    __slots__ = ("_sources",)

    def __init__(self, *sources: Iterable[Any]) -> None:
        self._sources = sources

    @property
    def sources(self) -> tuple[Iterable[Any], ...]:
        """The underlying sources, in zip order."""
        return self._sources

    @property
    def underestimated_count(self) -> int:
        """Lower bound on the number of tuples this sequence produces.

        The minimum of the sources' `lower_bound_count`. It is a sizing hint
        only; the actual number of tuples may be larger.
        """
        return min(lower_bound_count(source) for source in self._sources)

    def __length_hint__(self) -> int:
        return self.underestimated_count

    def __iter__(self) -> ZipIterator[T]:
        return ZipIterator(tuple(iter(source) for source in self._sources))

    def __repr__(self) -> str:
        sources = ", ".join(repr(source) for source in self._sources)
        return f"{type(self).__name__}({sources})"


class Zip3Sequence(_ZipSequence[tuple[A, B, C]], Generic[A, B, C]):
    """A sequence of 3-tuples built from three underlying sources."""

    __slots__ = ()

    def __init__(
        self, source1: Iterable[A], source2: Iterable[B], source3: Iterable[C]
    ) -> None:
        super().__init__(source1, source2, source3)


class Zip4Sequence(_ZipSequence[tuple[A, B, C, D]], Generic[A, B, C, D]):
    """A sequence of 4-tuples built from four underlying sources."""

    __slots__ = ()

    def __init__(
        self,
        source1: Iterable[A],
        source2: Iterable[B],
        source3: Iterable[C],
        source4: Iterable[D],
    ) -> None:
        super().__init__(source1, source2, source3, source4)


class Zip5Sequence(_ZipSequence[tuple[A, B, C, D, F]], Generic[A, B, C, D, F]):
    """A sequence of 5-tuples built from five underlying sources."""

    __slots__ = ()

    def __init__(  # pylint: disable=too-many-arguments
        self,
        source1: Iterable[A],
        source2: Iterable[B],
        source3: Iterable[C],
        source4: Iterable[D],
        source5: Iterable[F],
    ) -> None:
        super().__init__(source1, source2, source3, source4, source5)


def zip3(
    source1: Iterable[A], source2: Iterable[B], source3: Iterable[C]
) -> Zip3Sequence[A, B, C]:
    """Zip three sources. O(1); nothing is consumed until iteration."""
    return Zip3Sequence(source1, source2, source3)


def zip4(
    source1: Iterable[A],
    source2: Iterable[B],
    source3: Iterable[C],
    source4: Iterable[D],
) -> Zip4Sequence[A, B, C, D]:
    """Zip four sources. O(1); nothing is consumed until iteration."""
    return Zip4Sequence(source1, source2, source3, source4)


def zip5(  # pylint: disable=too-many-arguments
    source1: Iterable[A],
    source2: Iterable[B],
    source3: Iterable[C],
    source4: Iterable[D],
    source5: Iterable[F],
) -> Zip5Sequence[A, B, C, D, F]:
    """Zip five sources. O(1); nothing is consumed until iteration."""
    return Zip5Sequence(source1, source2, source3, source4, source5)


@overload
def zip_with(first: Iterable[A], second: Iterable[B], /) -> Iterator[tuple[A, B]]: ...
@overload
def zip_with(
    first: Iterable[A], second: Iterable[B], third: Iterable[C], /
) -> Zip3Sequence[A, B, C]: ...
@overload
def zip_with(
    first: Iterable[A],
    second: Iterable[B],
    third: Iterable[C],
    fourth: Iterable[D],
    /,
) -> Zip4Sequence[A, B, C, D]: ...
@overload
def zip_with(
    first: Iterable[A],
    second: Iterable[B],
    third: Iterable[C],
    fourth: Iterable[D],
    fifth: Iterable[F],
    /,
) -> Zip5Sequence[A, B, C, D, F]: ...
def zip_with(first: Iterable[Any], *others: Iterable[Any]) -> Iterable[tuple[Any, ...]]:
    """Zip ``first`` with one to four other sources.

    Two sources use the builtin ``zip``; three to five use `zip3`, `zip4` and
    `zip5`.

    Raises:
        TypeError: If fewer than one or more than four other sources are given.
    """
    match others:
        case (second,):
            return zip(first, second)
        case (second, third):
            return zip3(first, second, third)
        case (second, third, fourth):
            return zip4(first, second, third, fourth)
        case (second, third, fourth, fifth):
            return zip5(first, second, third, fourth, fifth)
    raise TypeError(f"zip_with() takes 2 to 5 sources, got {len(others) + 1}")

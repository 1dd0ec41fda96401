"""Text folding and comparison keys.

Shared by the containment predicates in `consequences.predicate` and the
string orderings in `consequences.sorting`.

Three levels of comparison are offered:

* ``fold_case`` -- Unicode case folding of NFC text.
* ``fold_standard`` -- case folding that also ignores diacritics and
  compatibility variants (``"Ｅ́"`` and ``"e"`` fold alike).
* ``standard_sort_key`` -- ``fold_standard`` plus numeric comparison of digit
  runs, so ``"file2"`` sorts before ``"file10"``.

``collation_key`` defers to the C library collation for the process's
``LC_COLLATE`` (see `consequences.config.apply_collation_locale`).
"""

from __future__ import annotations

import locale
import re
import unicodedata

_DIGIT_RUN = re.compile(r"(\d+)")


def fold_case(text: str) -> str:
    """Return ``text`` normalized to NFC and case folded."""
    return unicodedata.normalize("NFC", text).casefold()


def fold_standard(text: str) -> str:
    """Return ``text`` with compatibility forms, combining marks and case removed.

    Args:
        text: Any string.

    Returns:
        A string suitable for case- and diacritic-insensitive comparison.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def case_insensitive_contains(text: str, substring: str) -> bool:
    """Case-insensitive substring test."""
    return fold_case(substring) in fold_case(text)


def standard_contains(text: str, substring: str) -> bool:
    """Case- and diacritic-insensitive substring test."""
    return fold_standard(substring) in fold_standard(text)


def standard_sort_key(text: str) -> tuple[tuple[str | int, ...], str]:
    """Return a natural ("Finder-like") ordering key for ``text``.

    The folded text is split into alternating text and digit runs; digit runs
    compare by numeric value. ``re.split`` with a capturing group always puts
    text at even positions and digits at odd positions, so keys of different
    strings never compare ``str`` against ``int``. The original string breaks
    ties (``"a01"`` and ``"a1"`` are otherwise equal).
    """
    parts = _DIGIT_RUN.split(fold_standard(text))
    key = tuple(int(part) if i % 2 else part for i, part in enumerate(parts))
    return key, text


def collation_key(text: str) -> str:
    """Return the ``LC_COLLATE`` transform of ``text``."""
    return locale.strxfrm(text)


def case_insensitive_collation_key(text: str) -> str:
    """Return the ``LC_COLLATE`` transform of the case-folded ``text``."""
    return locale.strxfrm(fold_case(text))

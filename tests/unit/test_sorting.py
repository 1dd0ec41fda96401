"""Unit tests for consequences.sorting module."""

import locale

import pytest

from consequences.sorting import TextOrder, sort_by, sort_key, sorted_by
from tests.fixtures.records import Reading

# pylint: disable=magic-value-comparison


def names(elements):
    """Project elements to their ``name`` field."""
    return [element.name for element in elements]


def test_sorted_by_field(items):
    """Elements are ordered by the projected field."""
    assert [item.price for item in sorted_by(items, "price")] == [2, 3, 4, 7]


def test_sorted_by_descending(items):
    """descending reverses the ordering."""
    assert [item.price for item in sorted_by(items, "price", descending=True)] == [
        7,
        4,
        3,
        2,
    ]


def test_sorted_by_returns_new_list(items):
    """sorted_by leaves its input untouched."""
    before = list(items)
    sorted_by(items, "price")
    assert items == before


def test_none_sorts_first(readings):
    """Absent values come before every present value."""
    result = sorted_by(readings, "value")
    assert [reading.value for reading in result] == [None, None, None, 1, 2, 5, 7]


def test_none_sorts_last_when_descending(readings):
    """Descending order puts absent values last."""
    result = sorted_by(readings, "value", descending=True)
    assert [reading.value for reading in result] == [7, 5, 2, 1, None, None, None]


def test_sorting_is_stable(items):
    """Elements with equal keys keep their relative order."""
    result = sorted_by(items, "owner.name")
    assert names(result) == ["Crème Brûlée", "Croissant", "espresso", "CREMA"]


def test_sort_by_in_place(readings):
    """sort_by reorders the list itself."""
    target = readings
    sort_by(target, lambda r: r.amount, descending=True)
    assert target is readings
    assert target[0] == Reading(7)


@pytest.mark.parametrize(
    "order, expected",
    [
        (TextOrder.ALPHABETICAL, ["B", "a", "b", "ä"]),
        (TextOrder.CASE_INSENSITIVE, ["a", "b", "B", "ä"]),
        (TextOrder.LOCALIZED_STANDARD, ["a", "ä", "B", "b"]),
    ],
)
def test_text_orders(order, expected):
    """Each text order compares strings its own way."""
    assert sorted_by(["b", "ä", "B", "a"], lambda s: s, order=order) == expected


def test_localized_standard_compares_numbers_by_value():
    """Digit runs are compared numerically."""
    files = ["file10.txt", "File2.txt", "fïle1.txt"]
    result = sorted_by(files, lambda s: s, order=TextOrder.LOCALIZED_STANDARD)
    assert result == ["fïle1.txt", "File2.txt", "file10.txt"]


@pytest.mark.usefixtures("restore_collation_locale")
def test_localized_orders_use_lc_collate():
    """Under the C locale, collation is code point order."""
    locale.setlocale(locale.LC_COLLATE, "C")
    words = ["b", "B", "a", "A"]
    assert sorted_by(words, str, order=TextOrder.LOCALIZED) == ["A", "B", "a", "b"]
    assert sorted_by(words, str, order=TextOrder.LOCALIZED_CASE_INSENSITIVE) == [
        "a",
        "A",
        "b",
        "B",
    ]


def test_text_order_accepts_string_value(items):
    """Orders may be given by their string value."""
    result = sorted_by(items, "name", order="case_insensitive")
    assert names(result) == ["CREMA", "Croissant", "Crème Brûlée", "espresso"]


def test_text_order_with_optional_field(items):
    """Text orders apply to present values; absent values still come first."""
    result = sorted_by(items, "label", order=TextOrder.CASE_INSENSITIVE)
    assert [item.label for item in result] == [None, "coffee", "dessert", "Pastry"]


def test_unknown_text_order_is_rejected():
    """An unknown order name raises ValueError."""
    with pytest.raises(ValueError):
        sort_key("name", "bogus")  # type: ignore[arg-type]


def test_sort_key_shape():
    """Absent values map to (0,), present ones to (1, transformed)."""
    key = sort_key(lambda v: v, TextOrder.CASE_INSENSITIVE)
    assert key(None) == (0,)
    assert key("ABC") == (1, "abc")

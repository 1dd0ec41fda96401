"""Sample records used across the test-suite."""

from dataclasses import dataclass

import pytest

# pylint: disable=missing-function-docstring


@dataclass(frozen=True, slots=True)
class Reading:
    """A measurement that may be missing."""

    value: float | None

    @property
    def amount(self) -> float:
        return 0.0 if self.value is None else self.value


@dataclass(frozen=True, slots=True)
class Owner:
    """Owner of an item."""

    name: str


@dataclass(frozen=True, slots=True)
class Item:
    """A catalog entry with assorted field types."""

    name: str
    label: str | None
    price: int
    active: bool
    owner: Owner = Owner("nobody")


@pytest.fixture
def readings() -> list[Reading]:
    """Seven readings, three of them missing."""
    return [
        Reading(1),
        Reading(2),
        Reading(None),
        Reading(None),
        Reading(5),
        Reading(None),
        Reading(7),
    ]


@pytest.fixture
def items() -> list[Item]:
    """Four items covering present/absent labels and both flag values."""
    return [
        Item("Crème Brûlée", "dessert", 7, True, Owner("ana")),
        Item("espresso", None, 2, True, Owner("bo")),
        Item("Croissant", "Pastry", 3, False, Owner("ana")),
        Item("CREMA", "coffee", 4, False, Owner("cy")),
    ]

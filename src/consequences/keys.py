"""Field projections.

A *key* names the field an operation looks at. It is either a callable that
projects an element to a value, or an attribute name (dotted paths allowed)
that is resolved with `operator.attrgetter`.
"""

from __future__ import annotations

from collections.abc import Callable
from operator import attrgetter
from typing import Any, TypeAlias

Key: TypeAlias = Callable[[Any], Any] | str


def resolve_key(key: Key) -> Callable[[Any], Any]:
    """Return a projection callable for ``key``.

    Args:
        key: A projection callable, or an attribute name such as ``"amount"``
            or ``"owner.name"``.

    Returns:
        A callable mapping an element to the projected field value.

    Raises:
        TypeError: If ``key`` is neither a string nor a callable.

    Example:
        ```py
        resolve_key("owner.name")(item) == item.owner.name
        ```
    """
    if isinstance(key, str):
        return attrgetter(key)
    if not callable(key):
        raise TypeError(f"Key must be an attribute name or a callable, got {key!r}")
    return key

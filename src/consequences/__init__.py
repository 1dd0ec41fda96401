"""Consequences

Convenience operations for Python iterables and lists expressed through
field projections: composable predicates, key-based searching, sorting and
membership tests, and fixed-arity zips over three to five sources.
"""

from .keys import Key, resolve_key
from .predicate import Predicate, all_of, any_of, filter_using, filter_using_lazy
from .sorting import TextOrder, sort_by, sorted_by
from .zipping import (
    Zip3Sequence,
    Zip4Sequence,
    Zip5Sequence,
    ZipIterator,
    zip3,
    zip4,
    zip5,
    zip_with,
)

__all__ = [
    "__version__",
    "Key",
    "Predicate",
    "TextOrder",
    "ZipIterator",
    "Zip3Sequence",
    "Zip4Sequence",
    "Zip5Sequence",
    "all_of",
    "any_of",
    "filter_using",
    "filter_using_lazy",
    "resolve_key",
    "sort_by",
    "sorted_by",
    "zip3",
    "zip4",
    "zip5",
    "zip_with",
]
__version__ = "0.1.0"

"""Mathematical sets and fixed-size subset enumeration."""

from .combinatorics import (
    ElementNotFoundError,
    InvalidArgumentError,
    subsets_of_size,
    subsets_of_size_containing,
)
from .sets import Set, to_set

__all__ = [
    "ElementNotFoundError",
    "InvalidArgumentError",
    "Set",
    "subsets_of_size",
    "subsets_of_size_containing",
    "to_set",
]

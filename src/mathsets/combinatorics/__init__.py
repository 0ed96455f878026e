"""Combination and subset enumeration."""

from .indices import (
    ElementNotFoundError,
    InvalidArgumentError,
    combination_index_array,
    count_combinations,
    index_combinations,
    match_required_positions,
    sequence_combinations,
    sequence_combinations_containing,
)
from .subsets import (
    count_subsets_of_size,
    iter_subsets_of_size,
    iter_subsets_of_size_containing,
    subsets_of_size,
    subsets_of_size_containing,
)

__all__ = [
    "ElementNotFoundError",
    "InvalidArgumentError",
    "combination_index_array",
    "count_combinations",
    "count_subsets_of_size",
    "index_combinations",
    "iter_subsets_of_size",
    "iter_subsets_of_size_containing",
    "match_required_positions",
    "sequence_combinations",
    "sequence_combinations_containing",
    "subsets_of_size",
    "subsets_of_size_containing",
]

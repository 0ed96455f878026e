"""Fixed-size subset enumeration for sets."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import TypeVar

from mathsets.sets import Set

from .indices import (
    InvalidArgumentError,
    check_size,
    count_combinations,
    match_required_positions,
    sequence_combinations,
    sequence_combinations_containing,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def iter_subsets_of_size(set_: Set[T], n: int) -> Iterator[Set[T]]:
    """Lazily yield every subset of ``set_`` with exactly ``n`` elements.

    Raises ``InvalidArgumentError`` immediately when ``n`` is negative or
    greater than the cardinality of ``set_``.
    """
    elements = set_.to_list()
    logger.debug("Enumerating %d-subsets of %d elements", n, len(elements))
    combinations = sequence_combinations(elements, n)
    return (Set(combination) for combination in combinations)


def subsets_of_size(set_: Set[T], n: int) -> list[Set[T]]:
    """Return all subsets of ``set_`` with ``n`` elements, C(cardinality, n) of them."""
    return list(iter_subsets_of_size(set_, n))


def iter_subsets_of_size_containing(
    set_: Set[T], n: int, required: Sequence[T]
) -> Iterator[Set[T]]:
    """Lazily yield every ``n``-subset of ``set_`` that contains all ``required`` elements.

    Each subset holds the free elements first and the required ones after, in
    the order given. Size violations raise ``InvalidArgumentError`` and a
    missing required element raises ``ElementNotFoundError``, both before
    anything is yielded.
    """
    elements = set_.to_list()
    logger.debug(
        "Enumerating %d-subsets of %d elements containing %r", n, len(elements), list(required)
    )
    combinations = sequence_combinations_containing(elements, n, required)
    return (Set(combination) for combination in combinations)


def subsets_of_size_containing(set_: Set[T], n: int, required: Sequence[T]) -> list[Set[T]]:
    """Return all ``n``-subsets of ``set_`` containing every ``required`` element."""
    return list(iter_subsets_of_size_containing(set_, n, required))


def count_subsets_of_size(set_: Set[T], n: int, required: Sequence[T] = ()) -> int:
    """Return how many subsets the matching enumeration would produce."""
    elements = set_.to_list()
    if len(required) > n:
        raise InvalidArgumentError(
            f"{len(required)} required elements do not fit in subsets of size {n}."
        )
    check_size(len(elements), n)
    match_required_positions(elements, required)
    return count_combinations(len(elements) - len(required), n - len(required))

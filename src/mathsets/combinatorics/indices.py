"""Index-level combination generation over indexable sequences."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence
from typing import TypeVar

import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InvalidArgumentError(ValueError):
    """Raised when a requested combination size is out of range."""


class ElementNotFoundError(LookupError):
    """Raised when a required element has no unused matching position."""


def check_size(length: int, n: int) -> None:
    """Validate that ``n`` items can be chosen from ``length`` positions."""
    if n < 0:
        raise InvalidArgumentError(f"Combination size must be >= 0, got {n}.")
    if n > length:
        raise InvalidArgumentError(
            f"Combination size {n} is greater than the number of elements ({length})."
        )


def index_combinations(length: int, n: int) -> Iterator[tuple[int, ...]]:
    """Iterate over all ``n``-combinations of positions ``0..length-1``.

    Combinations come in lexicographic order of position: every combination
    starting at position 0 first, then those starting at 1, and so on.
    """
    check_size(length, n)
    return _combinations_from(0, length, n)


def _combinations_from(start: int, stop: int, n: int) -> Iterator[tuple[int, ...]]:
    if n == 0:
        yield ()
        return
    for first in range(start, stop - n + 1):
        for rest in _combinations_from(first + 1, stop, n - 1):
            yield (first,) + rest


def count_combinations(length: int, n: int) -> int:
    """Return C(length, n), or 0 when ``n > length``."""
    if length < 0 or n < 0:
        raise InvalidArgumentError(f"Counts must be >= 0, got length={length}, n={n}.")
    return math.comb(length, n)


def combination_index_array(length: int, n: int) -> np.ndarray:
    """Return all index combinations as an int64 array of shape (C(length, n), n)."""
    check_size(length, n)
    rows = list(_combinations_from(0, length, n))
    return np.array(rows, dtype=np.int64).reshape(len(rows), n)


def sequence_combinations(sequence: Sequence[T], n: int) -> Iterator[tuple[T, ...]]:
    """Iterate over all ``n``-element selections of ``sequence`` by position."""
    check_size(len(sequence), n)
    items = tuple(sequence)
    if n == len(items):
        return iter([items])
    return (
        tuple(items[i] for i in positions) for positions in _combinations_from(0, len(items), n)
    )


def match_required_positions(sequence: Sequence[T], required: Sequence[T]) -> list[int]:
    """Assign each required value to the first unused equal position.

    Repeated required values claim distinct positions, so a value listed twice
    needs two equal elements in ``sequence``.
    """
    positions: list[int] = []
    for value in required:
        for index, item in enumerate(sequence):
            if index not in positions and item == value:
                positions.append(index)
                break
        else:
            raise ElementNotFoundError(f"Required element {value!r} has no unused match.")
    return positions


def sequence_combinations_containing(
    sequence: Sequence[T], n: int, required: Sequence[T]
) -> Iterator[tuple[T, ...]]:
    """Iterate over ``n``-element selections that include every required value.

    Each selection is the combination of the unmatched elements followed by the
    required values in the order given.
    """
    required = tuple(required)
    if len(required) > n:
        raise InvalidArgumentError(
            f"{len(required)} required elements do not fit in combinations of size {n}."
        )
    check_size(len(sequence), n)

    matched = match_required_positions(sequence, required)
    logger.debug("Required elements %r matched to positions %s", required, matched)
    free = [item for index, item in enumerate(sequence) if index not in matched]
    remaining = n - len(required)
    return (combination + required for combination in sequence_combinations(free, remaining))

"""Set collection type."""

from .base import Set, to_set

__all__ = ["Set", "to_set"]

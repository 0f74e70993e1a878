"""
Id-keyed collection used by every store cache.
"""
from typing import Callable, Optional, TypeVar

V = TypeVar("V")


class Collection(dict):
    """A dict keyed by entity id with a few query helpers."""

    def filter(self, predicate: Callable[[V], bool]) -> "Collection":
        """Return a new Collection with the entries whose value matches predicate."""
        return Collection((key, value) for key, value in self.items() if predicate(value))

    def find(self, predicate: Callable[[V], bool]) -> Optional[V]:
        """Return the first value matching predicate, or None."""
        for value in self.values():
            if predicate(value):
                return value
        return None

    def first(self) -> Optional[V]:
        return next(iter(self.values()), None)

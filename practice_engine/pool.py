from __future__ import annotations

import logging
import random
from typing import Callable, Generic, Hashable, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NonRepeatPool(Generic[T]):
    """
    Shuffled ring over a fixed set of items.

    Items are served in shuffled order through an index cursor. Once every
    item has been served the array is reshuffled and a new epoch begins, so
    no item repeats within an epoch and drawing never blocks.
    """

    def __init__(
        self,
        items: Sequence[T],
        rng: random.Random,
        key: Callable[[T], Hashable] = lambda item: item,
    ) -> None:
        if not items:
            raise ValueError("NonRepeatPool needs at least one item")
        self._rng = rng
        self._key = key
        self._items = list(items)
        self._rng.shuffle(self._items)
        self._cursor = 0
        self.epoch = 0

    def __len__(self) -> int:
        return len(self._items)

    @property
    def remaining(self) -> int:
        return len(self._items) - self._cursor

    def draw(self) -> T:
        if self._cursor >= len(self._items):
            self._reshuffle()
        item = self._items[self._cursor]
        self._cursor += 1
        return item

    def key_of(self, item: T) -> Hashable:
        return self._key(item)

    def _reshuffle(self) -> None:
        self._rng.shuffle(self._items)
        self._cursor = 0
        self.epoch += 1
        logger.debug(f"Pool exhausted, reshuffled {len(self._items)} items (epoch {self.epoch})")


class RecentKeys:
    """
    Fixed-capacity ring of the most recently served keys.

    Used as the exclusion set for generated exercises whose key space is too
    large to enumerate. The oldest key is overwritten once the ring is full.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Hashable | None] = [None] * capacity
        self._cursor = 0
        self.epoch = 0

    def add(self, key: Hashable) -> None:
        self._slots[self._cursor] = key
        self._cursor += 1
        if self._cursor == len(self._slots):
            self._cursor = 0
            self.epoch += 1

    def __contains__(self, key: object) -> bool:
        return key is not None and key in self._slots

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot is not None)

    def clear(self) -> None:
        self._slots = [None] * len(self._slots)
        self._cursor = 0
        self.epoch = 0

# observations.py
# Per-window next-character statistics.
# An ObservationList keeps one CharObservation per character that has ever
# followed a window, in first-seen order. That order fixes the cumulative
# probabilities and therefore which character a random draw maps to.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)

Char = str


@dataclass
class CharObservation:
    """
    One character seen after a window.
    count: raw number of occurrences
    p: count / total count of the owning list
    cp: running sum of p up to and including this entry
    """

    char: Char
    count: int = 1
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.p} {self.cp})"


class ObservationList:
    """
    Insertion-ordered collection of CharObservation objects keyed by character.

    Lookup is a dict access instead of a linear scan; iteration order is still
    the order in which characters were first recorded.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: Dict[Char, CharObservation] = {}

    # counting -----------------------------------------------------
    def update(self, char: Char, count: int = 1) -> None:
        """Add `count` occurrences of `char`, appending it if it is new."""
        obs = self._items.get(char)
        if obs is None:
            self._items[char] = CharObservation(char, count)
        else:
            obs.count += count

    def total(self) -> int:
        return sum(obs.count for obs in self._items.values())

    # finalization -------------------------------------------------
    def calculate_probabilities(self) -> None:
        """
        Set p and cp of every entry from the current counts.
        cp is the prefix sum of p in list order, so the last cp equals
        the sum of all p (1.0 up to rounding).
        """
        total = self.total()
        if total == 0:
            return
        running = 0.0
        for obs in self._items.values():
            obs.p = obs.count / total
            running += obs.p
            obs.cp = running

    # sampling -----------------------------------------------------
    def sample(self, r: float) -> Char:
        """
        Return the first character whose cp is strictly greater than `r`.
        If rounding left the final cp at or below `r`, the last character
        is returned.
        """
        if not self._items:
            raise LookupError("cannot sample from an empty observation list")
        for obs in self._items.values():
            if obs.cp > r:
                return obs.char
        last = self.last()
        logger.debug("no cp above %r (last cp=%r), using %r", r, last.cp, last.char)
        return last.char

    # access -------------------------------------------------------
    def get(self, index: int) -> CharObservation:
        return list(self._items.values())[index]

    def find(self, char: Char) -> Optional[CharObservation]:
        return self._items.get(char)

    def index_of(self, char: Char) -> int:
        for i, c in enumerate(self._items):
            if c == char:
                return i
        return -1

    def first(self) -> CharObservation:
        return self.get(0)

    def last(self) -> CharObservation:
        if not self._items:
            raise IndexError("empty observation list")
        return next(reversed(self._items.values()))

    def chars(self) -> List[Char]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CharObservation]:
        return iter(self._items.values())

    def __contains__(self, char: object) -> bool:
        return char in self._items

    def __str__(self) -> str:
        return "(" + " ".join(str(obs) for obs in self._items.values()) + ")"

    def __repr__(self) -> str:
        return f"ObservationList({self!s})"

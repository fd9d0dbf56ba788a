"""A counted word with case-insensitive comparison."""

from __future__ import annotations

import string
from dataclasses import dataclass

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold(text: str) -> str:
    """Lower-case the ASCII letters of ``text``, leaving other characters alone."""
    return text.translate(_ASCII_LOWER)


@dataclass(eq=False)
class Word:
    """A word and the number of times it has been seen."""

    name: str
    count: int = 1

    def increment(self) -> None:
        """Record one more occurrence of the word."""
        self.count += 1

    def num_line(self) -> str:
        """The word with its count, as ``name: count``."""
        return f"{self.name}: {self.count}"

    def hist_line(self) -> str:
        """The word followed by one star per occurrence."""
        return self.name + "*" * self.count

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        mine, theirs = fold(self.name), fold(other.name)
        shared = min(len(mine), len(theirs))
        if mine[:shared] != theirs[:shared]:
            return mine[:shared] > theirs[:shared]
        # Equal up to the shorter length: the shorter word sorts first,
        # and a word counts as greater than an equal one.
        return len(mine) >= len(theirs)

    def __lt__(self, other: object) -> bool:
        greater = self.__gt__(other)
        if greater is NotImplemented:
            return NotImplemented
        return not greater

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return fold(self.name) == fold(other.name)

    def __hash__(self) -> int:
        return hash(fold(self.name))
"""A hash table of words that also keeps them in alphabetical order."""

from __future__ import annotations

import logging
from typing import IO, Iterator

from .word import Word, fold

logger = logging.getLogger(__name__)

LOAD_FACTOR = 0.6


class WordList:
    """Counts words, finds them by hashing and lists them in sorted order."""

    def __init__(self, initial_size: int = 100) -> None:
        if initial_size < 1:
            raise ValueError("initial size must be at least 1")
        self._initial_size = initial_size
        self._slots: list[Word | None] = [None] * initial_size
        self._ordered: list[Word] = []

    @property
    def capacity(self) -> int:
        """Number of slots in the hash table."""
        return len(self._slots)

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[Word]:
        return iter(list(self._ordered))

    def _probe(self, name: str) -> Iterator[int]:
        size = len(self._slots)
        index = sum(ord(ch) for ch in fold(name)) % size
        yield index
        for step in range(1, 2 * size):
            index = (index + 3 * step) % size
            yield index

    def _place(self, word: Word) -> tuple[Word, bool]:
        """Store ``word`` or bump the matching entry; report whether it is new."""
        for index in self._probe(word.name):
            slot = self._slots[index]
            if slot is None:
                self._slots[index] = word
                return word, True
            if slot == word:
                slot.increment()
                return slot, False
        raise RuntimeError(f"no free slot found for {word.name!r}")

    def _add_sorted(self, word: Word) -> None:
        position = next(
            (i for i, existing in enumerate(self._ordered) if word < existing),
            len(self._ordered),
        )
        self._ordered.insert(position, word)

    def _expand(self) -> None:
        if len(self._ordered) < LOAD_FACTOR * len(self._slots):
            return
        self._slots = [None] * (len(self._slots) + self._initial_size)
        for word in self._ordered:
            logger.info("Inserting: %s", word.name)
            self._place(word)
        logger.info("Array expanded. New size: %d", len(self._slots))

    def insert(self, name: str) -> Word:
        """Count one occurrence of ``name`` and return its stored entry."""
        if not name:
            raise ValueError("cannot insert an empty word")
        word, is_new = self._place(Word(name))
        if is_new:
            self._add_sorted(word)
            self._expand()
        return word

    def find(self, name: str) -> Word | None:
        """Return the entry matching ``name`` regardless of case, or None."""
        wanted = Word(name)
        for index in self._probe(name):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot == wanted:
                return slot
        return None

    def lines(self, hist: bool = False) -> Iterator[str]:
        """Yield one line per word, as counts or as a star histogram."""
        for word in self._ordered:
            yield word.hist_line() if hist else word.num_line()

    def read_from(self, stream: IO[str]) -> int:
        """Insert every whitespace-separated token of ``stream``; return how many."""
        total = 0
        for line in stream:
            for token in line.split():
                self.insert(token)
                total += 1
        return total

    def write_to(self, stream: IO[str]) -> None:
        """Write ``name: count`` lines for all words in order."""
        for line in self.lines(hist=False):
            stream.write(line + "\n")
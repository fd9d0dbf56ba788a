"""Command line reader that tallies a grocery list and offers a menu."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from .wordlist import WordList

DEFAULT_INPUT = "GroceryTestFile.txt"
DEFAULT_BACKUP = "frequency.dat"
DEFAULT_SIZE = 100

MENU = (
    "===================\n"
    "GROCERY LIST READER\n"
    "===================\n"
    "\n"
    "1) SEARCH FOR ITEM\n"
    "2) PRINT ALL (NUM)\n"
    "3) PRINT ALL (HIST)\n"
    "4) EXIT\n"
)


def load_list(path: str, initial_size: int = DEFAULT_SIZE) -> WordList:
    """Read every word of the file at ``path`` into a new WordList."""
    word_list = WordList(initial_size)
    with open(path, encoding="utf-8") as stream:
        word_list.read_from(stream)
    return word_list


def write_backup(word_list: WordList, path: str) -> None:
    """Write the word counts to ``path``."""
    with open(path, "w", encoding="utf-8") as stream:
        word_list.write_to(stream)


def _clear(out: IO[str]) -> None:
    if out.isatty():
        out.write("\033[2J\033[H")


def _pause(inp: IO[str], out: IO[str]) -> None:
    out.write("PRESS ENTER\n")
    out.flush()
    inp.readline()


def _read_token(inp: IO[str]) -> str | None:
    while True:
        line = inp.readline()
        if not line:
            return None
        parts = line.split()
        if parts:
            return parts[0]


def run_menu(
    word_list: WordList,
    input_stream: IO[str] | None = None,
    output_stream: IO[str] | None = None,
) -> None:
    """Show the menu until the user chooses to exit or input runs out."""
    inp = input_stream if input_stream is not None else sys.stdin
    out = output_stream if output_stream is not None else sys.stdout
    choice = ""
    while choice != "4":
        _clear(out)
        out.write(MENU)
        out.flush()
        token = _read_token(inp)
        if token is None:
            return
        choice = token

        if choice == "1":
            _clear(out)
            out.write("ENTER ITEM: ")
            out.flush()
            item = _read_token(inp)
            out.write("\n")
            if item is None:
                return
            word = word_list.find(item)
            if word is not None:
                out.write(word.num_line() + "\n\n")
            else:
                out.write("Item not found.\n\n")
            _pause(inp, out)
        elif choice in ("2", "3"):
            _clear(out)
            out.write("\nALL ITEMS:\n")
            for line in word_list.lines(hist=choice == "3"):
                out.write(line + "\n")
            out.write("\n")
            _pause(inp, out)
        elif choice == "4":
            out.write("\nGOODBYE...\n")


def main(argv: list[str] | None = None) -> int:
    """Tally the grocery file, write a backup, then run the menu."""
    parser = argparse.ArgumentParser(
        prog="grocerytally", description="Count the items of a grocery list."
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("--backup", default=DEFAULT_BACKUP)
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stdout)
    inp, out = sys.stdin, sys.stdout

    try:
        word_list = load_list(args.input, args.size)
    except OSError:
        out.write("Failed to open file.\n")
        _pause(inp, out)
        return 1
    except UnicodeDecodeError:
        out.write("File opened...\n")
        out.write("Failure occured during upload.\n")
        _pause(inp, out)
        return 1

    processed = sum(word.count for word in word_list)
    out.write("File opened...\n")
    out.write(f"Processed {processed} items...\n")

    try:
        write_backup(word_list, args.backup)
    except OSError:
        out.write("Back up file failed to open.\n")
        _pause(inp, out)
        return 1
    out.write("Back up created...\n")
    _pause(inp, out)

    run_menu(word_list, inp, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
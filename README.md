# grocerytally

grocerytally reads a grocery list and counts how often each item appears. A grocery list is a plain text file of words separated by whitespace. You can then look at the counts from a small interactive menu.

Items are matched without regard to ASCII letter case, so "Apples" and "apples" count as the same item. An item keeps the spelling it had the first time it was seen. Items are listed in alphabetical order, again without regard to case.

## Installation

```
pip install .
```

## Command line

```
grocerytally [INPUT] [--backup PATH] [--size N]
```

- `INPUT` is the grocery list to read. It defaults to `GroceryTestFile.txt` in the current directory.
- `--backup` is where the tally is written. It defaults to `frequency.dat`.
- `--size` sets the initial number of slots in the hash table. It defaults to `100`. Each time the table becomes 60% full, it grows by this amount.

The command works through these steps:

1. It reads the input file and prints `File opened...` and `Processed N items...`, where N is the total number of words read.
   - If the file cannot be opened, it prints `Failed to open file.`, waits for Enter and exits with status 1.
   - If the file cannot be decoded as UTF-8, it prints `Failure occured during upload.`, waits for Enter and exits with status 1.
2. It writes the backup file, with one `item: count` line per item in alphabetical order.
   - If the backup cannot be written, it prints `Back up file failed to open.`, waits for Enter and exits with status 1.
   - Otherwise it prints `Back up created...` and waits for Enter.
3. It shows a menu:

```
===================
GROCERY LIST READER
===================

1) SEARCH FOR ITEM
2) PRINT ALL (NUM)
3) PRINT ALL (HIST)
4) EXIT
```

The menu options work as follows:

- **1** asks for an item and shows its count, such as `apples: 3`, or `Item not found.` if there is none.
- **2** lists every item with its count.
- **3** draws each count as a row of stars, such as `apples***`.
- **4** prints `GOODBYE...` and exits.

Any other input is ignored and the menu is shown again. The menu also ends when standard input runs out. When the output is a terminal, the screen is cleared before each menu and each result. Messages about the hash table growing are logged to standard output.

## Library use

```python
import io
from grocerytally.wordlist import WordList

tally = WordList(100)
tally.read_from(io.StringIO("milk eggs Milk bread"))   # returns 4

word = tally.find("MILK")
print(word.num_line())          # milk: 2

print("\n".join(tally.lines(hist=True)))
# bread*
# eggs*
# milk**

with open("frequency.dat", "w") as backup:
    tally.write_to(backup)
```

### `grocerytally.wordlist.WordList`

- `WordList(initial_size=100)` creates an empty tally. It raises `ValueError` if `initial_size` is less than 1.
- `insert(name)` counts one occurrence of `name` and returns the stored `Word`. It raises `ValueError` for an empty name.
- `find(name)` returns the matching `Word`, ignoring case, or `None` if there is no match.
- `read_from(stream)` inserts every whitespace-separated token from a text stream and returns how many tokens it read.
- `write_to(stream)` writes one `name: count` line per item.
- `lines(hist=False)` yields one line per item, either as a count or as a star histogram.
- `len(tally)` is the number of distinct items.
- Iterating over a `WordList` yields its `Word` entries in alphabetical order.
- `capacity` is the current number of hash table slots.

### `grocerytally.word.Word`

A dataclass with these fields and methods:

- `name` and `count` fields. `count` defaults to 1.
- `increment()` adds one to `count`.
- `num_line()` returns `name: count`.
- `hist_line()` returns the name followed by one `*` per occurrence.

Words compare equal and hash the same when their names match ignoring case. They order alphabetically ignoring case, and a shorter word sorts before a longer word that starts with it. The helper `fold(text)` lower-cases only the ASCII letters of a string.

### `grocerytally.cli`

- `load_list(path, initial_size=100)` reads a file into a new `WordList`.
- `write_backup(word_list, path)` writes the tally to a file.
- `run_menu(word_list, input_stream=None, output_stream=None)` runs the menu. It uses standard input and output by default.
- `main(argv=None)` is the command above and returns its exit status.

## Limits

The backup file is only written, never read. Each run starts a new tally from the input file. Search looks for one whole item and does not match partial names.
import io
from collections import Counter

import pytest

from grocerytally.wordlist import WordList


def test_duplicates_are_counted_case_insensitively():
    words = WordList(10)
    words.insert("Milk")
    words.insert("milk")
    words.insert("MILK")
    assert len(words) == 1
    found = words.find("mIlK")
    assert found.name == "Milk"
    assert found.count == 3


def test_insert_returns_stored_entry():
    words = WordList(10)
    first = words.insert("eggs")
    second = words.insert("Eggs")
    assert first is second
    assert words.find("EGGS") is first


def test_missing_word_is_not_found():
    words = WordList(10)
    words.insert("bread")
    assert words.find("butter") is None


def test_iteration_is_sorted():
    names = ["zucchini", "Apple", "banana", "app", "Carrot", "bananas", "dates"]
    words = WordList(100)
    for name in names:
        words.insert(name)
    assert [w.name for w in words] == sorted(names, key=str.lower)


def test_capacity_grows_when_sixty_percent_full():
    words = WordList(5)
    words.insert("a")
    words.insert("b")
    assert words.capacity == 5
    words.insert("c")
    assert words.capacity > 5
    assert words.capacity % 5 == 0


def test_counts_survive_expansion():
    tokens = [f"item{i % 37}" for i in range(300)]
    words = WordList(4)
    for token in tokens:
        words.insert(token)
    expected = Counter(tokens)
    assert len(words) == len(expected)
    for name, count in expected.items():
        assert words.find(name).count == count
    assert [w.name for w in words] == sorted(expected)


def test_read_and_write_round_trip():
    words = WordList(10)
    total = words.read_from(io.StringIO("Milk eggs milk\n\n  bread\n"))
    assert total == 4
    out = io.StringIO()
    words.write_to(out)
    parsed = {}
    for line in out.getvalue().splitlines():
        name, count = line.rsplit(": ", 1)
        parsed[name] = int(count)
    assert parsed == {"Milk": 2, "eggs": 1, "bread": 1}
    assert list(parsed) == ["bread", "eggs", "Milk"]


def test_hist_lines_have_stars_matching_counts():
    words = WordList(10)
    for token in ["rice", "rice", "beans"]:
        words.insert(token)
    for word, line in zip(words, words.lines(hist=True)):
        assert line == word.name + "*" * word.count


def test_empty_word_is_rejected():
    with pytest.raises(ValueError):
        WordList(10).insert("")


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        WordList(0)
import random
from functools import total_ordering

import pytest

from sortbench.sorting import (
    Algorithm,
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)

NAMES = [
    "Bubble Sort",
    "Selection Sort",
    "Insertion Sort",
    "Merge Sort",
    "Quick Sort",
    "Shell Sort",
]


@pytest.mark.parametrize("name", NAMES)
def test_sorts_random_integers(name):
    rng = random.Random(1234)
    data = [rng.randrange(1000) for _ in range(300)]
    items = list(data)
    Algorithm(name).sort(items)
    assert items == sorted(data)


@pytest.mark.parametrize("name", NAMES)
def test_sorts_strings_lexicographically(name):
    words = ["pear", "apple", "zebra", "apple", "mango", "ab", "a", "abc"]
    items = list(words)
    Algorithm(name).sort(items)
    assert items == sorted(words)


@pytest.mark.parametrize("name", NAMES)
@pytest.mark.parametrize("data", [[], [7], [2, 1], [5, 5, 5, 5]])
def test_small_inputs(name, data):
    items = list(data)
    Algorithm(name).sort(items)
    assert items == sorted(data)


@pytest.mark.parametrize("name", NAMES)
def test_already_sorted_and_reversed(name):
    ascending = list(range(2000))
    items = list(ascending)
    Algorithm(name).sort(items)
    assert items == ascending
    items = list(reversed(ascending)) if name != "Bubble Sort" else list(range(200, 0, -1))
    expected = sorted(items)
    Algorithm(name).sort(items)
    assert items == expected


@pytest.mark.parametrize("name", NAMES)
def test_sorts_in_place_and_returns_none(name):
    items = [3, 1, 2]
    same = items
    assert Algorithm(name).sort(items) is None
    assert same is items
    assert items == [1, 2, 3]


def test_free_functions_sort_in_place():
    data = [9, -3, 4, 4, 0, 12, -7, 1]
    expected = sorted(data)

    a = list(data)
    assert bubble_sort(a) is None
    assert a == expected

    b = list(data)
    assert selection_sort(b) is None
    assert b == expected

    c = list(data)
    assert insertion_sort(c) is None
    assert c == expected

    d = list(data)
    assert merge_sort(d) is None
    assert d == expected

    e = list(data)
    assert quick_sort(e) is None
    assert e == expected

    f = list(data)
    assert shell_sort(f) is None
    assert f == expected


@total_ordering
class _Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __eq__(self, other):
        return self.key == other.key

    def __lt__(self, other):
        return self.key < other.key


def test_merge_sort_is_stable():
    items = [_Keyed(k, i) for i, k in enumerate([2, 1, 2, 1, 0, 2])]
    merge_sort(items)
    assert [(x.key, x.tag) for x in items] == sorted(
        [(x.key, x.tag) for x in items], key=lambda p: (p[0], p[1])
    )


@pytest.mark.parametrize("name", NAMES)
def test_algorithm_sort_dispatches(name):
    rng = random.Random(99)
    data = [rng.randrange(-50, 50) for _ in range(150)]
    items = list(data)
    Algorithm(name).sort(items)
    assert items == sorted(data)


def test_algorithm_display_names():
    assert [str(a) for a in Algorithm] == NAMES
    assert Algorithm("Quick Sort") is Algorithm.QUICK_SORT
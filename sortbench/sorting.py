"""Classic comparison sorts operating in place on mutable sequences."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, MutableSequence

__all__ = [
    "Algorithm",
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "shell_sort",
]


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by swapping adjacent pairs, stopping early once a pass makes no swap."""
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by moving the smallest remaining element to the front."""
    n = len(items)
    for i in range(n - 1):
        min_idx = min(range(i, n), key=items.__getitem__)
        if min_idx != i:
            items[i], items[min_idx] = items[min_idx], items[i]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by inserting each element into the sorted prefix."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def _merge(items: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    left_part = list(items[left : mid + 1])
    right_part = list(items[mid + 1 : right + 1])
    i = j = 0
    k = left
    while i < len(left_part) and j < len(right_part):
        if left_part[i] <= right_part[j]:
            items[k] = left_part[i]
            i += 1
        else:
            items[k] = right_part[j]
            j += 1
        k += 1
    for value in left_part[i:]:
        items[k] = value
        k += 1
    for value in right_part[j:]:
        items[k] = value
        k += 1


def _merge_sort_range(items: MutableSequence[Any], left: int, right: int) -> None:
    if left < right:
        mid = left + (right - left) // 2
        _merge_sort_range(items, left, mid)
        _merge_sort_range(items, mid + 1, right)
        _merge(items, left, mid, right)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Stable top-down merge sort, in place."""
    _merge_sort_range(items, 0, len(items) - 1)


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(items: MutableSequence[Any]) -> None:
    """Quick sort with the last element as pivot (Lomuto partition), in place."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))


def shell_sort(items: MutableSequence[Any]) -> None:
    """Shell sort with gaps n/2, n/4, ..., 1, in place."""
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            value = items[i]
            j = i
            while j >= gap and items[j - gap] > value:
                items[j] = items[j - gap]
                j -= gap
            items[j] = value
        gap //= 2


class Algorithm(Enum):
    """The available sorting algorithms, valued by their display names."""

    BUBBLE_SORT = "Bubble Sort"
    SELECTION_SORT = "Selection Sort"
    INSERTION_SORT = "Insertion Sort"
    MERGE_SORT = "Merge Sort"
    QUICK_SORT = "Quick Sort"
    SHELL_SORT = "Shell Sort"

    def __str__(self) -> str:
        return self.value

    def sort(self, items: MutableSequence[Any]) -> None:
        """Sort ``items`` in place with this algorithm."""
        _SORTERS[self](items)


_SORTERS: dict[Algorithm, Callable[[MutableSequence[Any]], None]] = {
    Algorithm.BUBBLE_SORT: bubble_sort,
    Algorithm.SELECTION_SORT: selection_sort,
    Algorithm.INSERTION_SORT: insertion_sort,
    Algorithm.MERGE_SORT: merge_sort,
    Algorithm.QUICK_SORT: quick_sort,
    Algorithm.SHELL_SORT: shell_sort,
}
"""
Median-of-three partition sort.

Both entry points share one routine that partitions a half-open range
[start, end) around the median of its first, middle and last values, then
processes the two sides. Pending ranges live on an explicit work-list so
deep partitions never touch the interpreter's recursion limit.
"""

from collections.abc import MutableSequence, Sequence
from typing import Callable, List, TypeVar

T = TypeVar("T")

Swap = Callable[[MutableSequence, int, int], None]


def swap_items(data, a, b):
    data[a], data[b] = data[b], data[a]


def median_of_three(first, mid, last):
    """Median of three values via nested min/max (three comparisons)."""
    return max(min(first, last), min(max(first, last), mid))


def partition(data: MutableSequence, start: int, end: int, swap: Swap = swap_items) -> int:
    """
    Partition data[start:end] in place and return the pivot's final index.

    Afterwards data[start:p] <= data[p] <= data[p+1:end]. Ranges with fewer
    than two elements are left alone and `start` is returned.
    """
    amount = end - start
    if amount < 2:
        return start

    mid = start + amount // 2
    pivot = median_of_three(data[start], data[mid], data[end - 1])

    if pivot == data[start]:
        pivot_idx = start
    elif pivot == data[end - 1]:
        pivot_idx = end - 1
    else:
        pivot_idx = mid

    # left of pivot: push anything larger across, pivot walks left
    i = start
    while i < pivot_idx:
        if data[i] > pivot:
            swap(data, i, pivot_idx - 1)
            swap(data, pivot_idx, pivot_idx - 1)
            pivot_idx -= 1
            # a new element now sits at i
            continue
        i += 1

    # right of pivot: pull anything smaller across, pivot walks right
    j = pivot_idx + 1
    while j < end:
        if data[j] < pivot:
            swap(data, j, pivot_idx + 1)
            swap(data, pivot_idx, pivot_idx + 1)
            pivot_idx += 1
        j += 1

    return pivot_idx


def sort_range(data: MutableSequence, start: int, end: int, swap: Swap = swap_items):
    """Sort data[start:end] in place, partitioning left sides before right ones."""
    pending = [(start, end)]
    while pending:
        lo, hi = pending.pop()
        if hi - lo < 2:
            continue
        p = partition(data, lo, hi, swap)
        # right first so the left side is handled first
        pending.append((p + 1, hi))
        pending.append((lo, p))


def sort_in_place(data: MutableSequence) -> None:
    """Sort `data` ascending in place. Ties land in no particular order."""
    sort_range(data, 0, len(data))


def sort_copy(data: Sequence[T]) -> List[T]:
    """Return a new ascending list of the elements of `data`; `data` is not touched."""
    result = list(data)
    sort_range(result, 0, len(result))
    return result

# ============================================================
# pivotsort - swap trace + visualizer sorter
# ============================================================
#
# sort(arr) follows the custom sorter format:
#   1. It is a generator that yields (arr, [active_indices])
#      after every swap.
#   2. It mutates `arr` in place and returns nothing.
#   3. NAME is the display name.
#
# The swaps come from the same partition routine that backs
# sort_in_place, recorded on a copy and replayed onto `arr`.
# ============================================================

from pivotsort.sorter import sort_range, swap_items

NAME = "Median-of-Three Quick Sort"


def trace_swaps(data) -> list:
    """Every (a, b) index pair swapped while sorting a copy of `data`."""
    work = list(data)
    swaps = []

    def record(seq, a, b):
        swaps.append((a, b))
        swap_items(seq, a, b)

    sort_range(work, 0, len(work), record)
    return swaps


def count_swaps(data) -> int:
    return len(trace_swaps(data))


def replay(arr, swaps):
    for a, b in swaps:
        swap_items(arr, a, b)


def sort(arr):
    """Median-of-three quick sort - O(n log n) expected, one step per swap."""
    for a, b in trace_swaps(arr):
        swap_items(arr, a, b)
        yield arr, [a, b]

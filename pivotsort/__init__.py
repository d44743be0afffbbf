from pivotsort.sorter import median_of_three, partition, sort_copy, sort_in_place, sort_range
from pivotsort.trace import trace_swaps

__all__ = [
    "median_of_three",
    "partition",
    "sort_copy",
    "sort_in_place",
    "sort_range",
    "trace_swaps",
]

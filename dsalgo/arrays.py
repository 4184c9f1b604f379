"""Array algorithms: maximum subarray sums, prefix sums, 0/1/2 sorting and trapped water."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, combinations


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("the sequence must not be empty")


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Largest sum of a contiguous, non-empty run, by trying every run: O(n^3)."""
    _require_values(values)
    return max(sum(values[start:stop]) for start, stop in combinations(range(len(values) + 1), 2))


def max_subarray_sum_prefix(values: Sequence[int]) -> int:
    """Largest sum of a contiguous, non-empty run, using cumulative sums: O(n^2)."""
    _require_values(values)
    prefix = list(accumulate(values, initial=0))
    return max(later - earlier for earlier, later in combinations(prefix, 2))


def max_subarray_sum_kadane(values: Sequence[int]) -> int:
    """Kadane's algorithm: O(n).

    The running sum is reset to zero whenever it drops below zero, so a
    sequence holding only negative numbers yields 0.
    """
    _require_values(values)
    best = 0
    current = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


class PrefixSums:
    """Answers inclusive range-sum queries over 1-based positions in O(1)."""

    def __init__(self, values: Sequence[int]) -> None:
        self._prefix = list(accumulate(values, initial=0))

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def range_sum(self, left: int, right: int) -> int:
        """Sum of the elements at positions ``left`` to ``right``, both inclusive, 1-based."""
        if not 1 <= left <= right <= len(self):
            raise IndexError(f"range {left}..{right} is outside 1..{len(self)}")
        return self._prefix[right] - self._prefix[left - 1]


def sort_012(values: Sequence[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass (Dutch national flag).

    Any value other than 0 or 1 is treated as belonging with the 2s.
    The input is left untouched; a new list is returned.
    """
    result = list(values)
    low = mid = 0
    high = len(result) - 1
    while mid <= high:
        if result[mid] == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif result[mid] == 1:
            mid += 1
        else:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
    return result


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights, in O(1) space."""
    result = 0
    left_max = right_max = 0
    lo, hi = 0, len(heights) - 1
    while lo <= hi:
        if heights[lo] < heights[hi]:
            if heights[lo] > left_max:
                left_max = heights[lo]
            else:
                result += left_max - heights[lo]
            lo += 1
        else:
            if heights[hi] > right_max:
                right_max = heights[hi]
            else:
                result += right_max - heights[hi]
            hi -= 1
    return result
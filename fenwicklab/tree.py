"""Fenwick tree (binary indexed tree) for prefix and range sums."""

from __future__ import annotations


class FenwickTree:
    """Binary indexed tree over positions ``1..size``.

    Supports adding to a single position and summing a prefix or a range of
    positions, each in logarithmic time.
    """

    def __init__(self, size=0):
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self._tree = [0] * (size + 1)

    def __len__(self):
        return self.size

    def __repr__(self):
        return f"FenwickTree(size={self.size})"

    def _check(self, index, lowest):
        if not lowest <= index <= self.size:
            raise IndexError(
                f"index {index} out of range {lowest}..{self.size}"
            )

    def update(self, index, value):
        """Add ``value`` to the element at 1-based ``index``."""
        self._check(index, 1)
        while index <= self.size:
            self._tree[index] += value
            index += index & -index

    def prefix_sum(self, index):
        """Return the sum of elements ``1..index``; ``index`` 0 gives 0."""
        self._check(index, 0)
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_query(self, left, right):
        """Return the sum of elements ``left..right`` inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)

    def kth_query(self, k):
        """Return the smallest 1-based position whose prefix sum reaches ``k``.

        With the tree holding counts of values, this is the k-th smallest
        value. If the total is below ``k`` the result is ``size + 1``.
        """
        index = 0
        for shift in range(self.size.bit_length(), -1, -1):
            candidate = index + (1 << shift)
            if candidate <= self.size and self._tree[candidate] < k:
                k -= self._tree[candidate]
                index = candidate
        return index + 1
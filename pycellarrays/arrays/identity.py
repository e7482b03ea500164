"""pycellarrays.arrays.identity"""
import numpy as np


class IdentityVector:
    """Index array with ``a[j] == j``; used to detect no-op reindexing."""

    def __init__(self, length: int):
        if length < 0:
            raise ValueError(f"IdentityVector: negative length {length}")
        self.length = int(length)

    def __len__(self):
        return self.length

    @property
    def shape(self):
        return (self.length,)

    def __getitem__(self, j):
        if not -self.length <= j < self.length:
            raise IndexError(f"index {j} out of range for IdentityVector({self.length})")
        return j if j >= 0 else self.length + j

    def __iter__(self):
        return iter(range(self.length))

    def testitem(self):
        return 0

    def __array__(self, dtype=None, copy=None):
        return np.arange(self.length, dtype=dtype if dtype is not None else np.int64)

    def __repr__(self):
        return f"IdentityVector({self.length})"

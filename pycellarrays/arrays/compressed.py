"""pycellarrays.arrays.compressed"""
import numpy as np

from pycellarrays.arrays.interface import array_cache, getindex_cached, testitem


class CompressedArray:
    """
    Run-length style array: a pool of ``values`` and pointers into it.

    Logical element ``i`` is ``values[ptrs[i]]``; repeated items are stored
    once in the pool.
    """

    def __init__(self, values, ptrs):
        self.values = values
        self.ptrs = ptrs

    def __len__(self):
        return len(self.ptrs)

    @property
    def shape(self):
        return (len(self.ptrs),)

    def array_cache(self):
        return array_cache(self.values), array_cache(self.ptrs)

    def getindex_cached(self, cache, i):
        vcache, pcache = cache
        p = getindex_cached(pcache, self.ptrs, i)
        return getindex_cached(vcache, self.values, p)

    def __getitem__(self, i):
        return self.values[self.ptrs[i]]

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def testitem(self):
        if len(self.ptrs) != 0:
            return self[0]
        return testitem(self.values)

    def __array__(self, dtype=None, copy=None):
        return np.asarray([self[i] for i in range(len(self))], dtype=dtype)

    def __repr__(self):
        return f"CompressedArray(values={self.values!r}, ptrs={self.ptrs!r})"

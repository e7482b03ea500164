"""pycellarrays.cellarrays.leaves
Concrete CellArrays backed by stored data.
"""
import numpy as np

from pycellarrays.cellarrays.base import IndexableCellArray


class IndexedCellArray(IndexableCellArray):
    """
    Cells taken from any indexable sequence of arrays: a list of ndarrays,
    a stacked ndarray, or a LazyArray produced by ``lazy_map``.
    """

    def __init__(self, items, maxsize=None, dtype=None):
        self.items = items
        first = np.asarray(items[0]) if len(items) else None
        if dtype is None:
            dtype = first.dtype if first is not None else float
        self.dtype = np.dtype(dtype)
        if maxsize is None:
            maxsize = self._scan_maxsize()
        self._maxsize = tuple(int(n) for n in maxsize)
        self.ndim = len(self._maxsize)

    def _scan_maxsize(self):
        shapes = [np.shape(a) for a in self.items]
        if not shapes:
            return ()
        ranks = {len(s) for s in shapes}
        if len(ranks) != 1:
            raise ValueError(f"IndexedCellArray: cells have different ranks {sorted(ranks)}")
        return tuple(np.max(np.asarray(shapes, dtype=np.int64), axis=0))

    def __len__(self):
        return len(self.items)

    def maxsize(self):
        return self._maxsize

    def __getitem__(self, cell):
        a = np.asarray(self.items[cell])
        return a, a.shape

    def __iter__(self):
        # lazy items share one cache for the whole pass
        traverse = getattr(self.items, "traverse", None)
        if traverse is None:
            yield from super().__iter__()
            return
        for item in traverse():
            a = np.asarray(item)
            yield a, a.shape


class PaddedCellArray(IndexableCellArray):
    """
    Cells stored in one padded block ``data[cell]`` of shape ``maxsize``
    together with their logical shapes ``sizes[cell]``.
    """

    def __init__(self, data, sizes):
        data = np.asarray(data)
        sizes = np.asarray(sizes, dtype=np.int64)
        if data.ndim < 1:
            raise ValueError("PaddedCellArray: data needs a leading cell axis")
        self.ndim = data.ndim - 1
        if sizes.shape != (data.shape[0], self.ndim):
            raise ValueError(f"PaddedCellArray: sizes must have shape "
                             f"{(data.shape[0], self.ndim)}, got {sizes.shape}")
        if np.any(sizes > np.asarray(data.shape[1:])) or np.any(sizes < 0):
            raise ValueError("PaddedCellArray: a cell size exceeds the padded block")
        self.data = data
        self.sizes = sizes
        self.dtype = data.dtype

    @classmethod
    def from_arrays(cls, arrays, fill_value=0):
        """Pad a list of equal-rank arrays into one block."""
        arrays = [np.asarray(a) for a in arrays]
        sizes = np.asarray([a.shape for a in arrays], dtype=np.int64)
        maxsize = tuple(sizes.max(axis=0)) if len(arrays) else ()
        dtype = np.result_type(*arrays) if arrays else float
        data = np.full((len(arrays),) + maxsize, fill_value, dtype=dtype)
        for cell, a in enumerate(arrays):
            data[(cell,) + tuple(slice(0, n) for n in a.shape)] = a
        return cls(data, sizes.reshape(len(arrays), len(maxsize)))

    def __len__(self):
        return self.data.shape[0]

    def maxsize(self):
        return tuple(self.data.shape[1:])

    def __getitem__(self, cell):
        return self.data[cell], tuple(int(n) for n in self.sizes[cell])


class ConstantCellArray(IndexableCellArray):
    """The same array for every one of ``length`` cells."""

    def __init__(self, array, length: int):
        self.array = np.asarray(array)
        self.length = int(length)
        self.ndim = self.array.ndim
        self.dtype = self.array.dtype

    def __len__(self):
        return self.length

    def maxsize(self):
        return self.array.shape

    def __getitem__(self, cell):
        if not 0 <= cell < self.length:
            raise IndexError(f"cell {cell} out of range for {self.length} cells")
        return self.array, self.array.shape

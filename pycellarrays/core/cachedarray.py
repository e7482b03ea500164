"""pycellarrays.core.cachedarray
Resizable scratch buffer reused across the steps of one traversal.
"""
import logging
from math import prod

import numpy as np

logger = logging.getLogger(__name__)


class CachedArray:
    """
    A flat buffer plus an active view of a logical shape.

    ``setsize`` only reallocates when the requested size exceeds the current
    capacity; the view returned by ``array`` is overwritten by every step of
    the owning traversal, so callers must not keep it past the next step.
    """

    def __init__(self, shape=(), dtype=float):
        shape = tuple(int(n) for n in shape)
        self.dtype = np.dtype(dtype)
        self._buffer = np.empty(prod(shape), dtype=self.dtype)
        self.shape = shape
        self.array = self._buffer[: prod(shape)].reshape(shape)

    @property
    def capacity(self) -> int:
        return self._buffer.size

    def setsize(self, shape):
        shape = tuple(int(n) for n in shape)
        if shape == self.shape:
            return self.array
        n = prod(shape)
        if n > self._buffer.size:
            logger.debug(f"CachedArray grows {self._buffer.size} -> {n} ({self.dtype})")
            self._buffer = np.empty(n, dtype=self.dtype)
        self.shape = shape
        self.array = self._buffer[:n].reshape(shape)
        return self.array

    def __repr__(self):
        return f"<CachedArray shape={self.shape} capacity={self.capacity}>"


def viewtosize(a, shape):
    """Leading sub-block of *a* with the logical *shape*."""
    a = np.asarray(a)
    shape = tuple(shape)
    if a.shape == shape:
        return a
    if a.ndim != len(shape):
        raise ValueError(f"viewtosize: rank mismatch {a.shape} vs {shape}")
    return a[tuple(slice(0, n) for n in shape)]

"""pycellarrays.arrays.interface
Duck-typed access protocol shared by plain sequences and the lazy arrays.
"""
import numpy as np

from pycellarrays.core.errors import DomainError


def array_cache(a):
    """Scratch object for repeated indexed reads of *a* (None if not needed)."""
    hook = getattr(a, "array_cache", None)
    if hook is not None:
        return hook()
    return None


def getindex_cached(cache, a, *i):
    """``a[i]`` read through a cache obtained from ``array_cache(a)``."""
    hook = getattr(a, "getindex_cached", None)
    if hook is not None:
        return hook(cache, *i)
    if len(i) == 1:
        return a[i[0]]
    return a[i]


def shape_of(a) -> tuple:
    shape = getattr(a, "shape", None)
    if shape is not None:
        return tuple(shape)
    return (len(a),)


def testitem(a):
    """
    A representative element of *a*.

    For non-empty arrays this is the first element. Empty ndarrays give
    zeros of the element shape; package arrays derive one from their
    structure. Anything else has no representative and raises DomainError.
    """
    hook = getattr(a, "testitem", None)
    if hook is not None:
        return hook()
    if len(a) != 0:
        return a[0]
    if isinstance(a, np.ndarray):
        item = np.zeros(a.shape[1:], dtype=a.dtype)
        return item[()] if item.ndim == 0 else item
    raise DomainError(f"Cannot build a test item for an empty {type(a).__name__}")

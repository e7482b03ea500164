"""pycellarrays.arrays.maps
The Map protocol: pure functors applied index-wise, with a reusable cache.
"""
from abc import ABC, abstractmethod

import numpy as np

from pycellarrays.core.cachedarray import CachedArray


class Map(ABC):
    """
    Base class of every functor that can be applied index-wise.

    Subclasses implement ``evaluate_cached``. ``return_cache`` may build a
    scratch object that depends only on the argument types/shapes, so one
    cache serves a whole per-cell loop. Maps that compare equal compute the
    same function and may share one cache.
    """

    def return_cache(self, *args):
        return None

    @abstractmethod
    def evaluate_cached(self, cache, *args):
        raise NotImplementedError

    def evaluate(self, *args):
        cache = self.return_cache(*args)
        return self.evaluate_cached(cache, *args)

    def testargs(self, *args):
        return args

    def return_value(self, *args):
        return self.evaluate(*self.testargs(*args))

    def __call__(self, *args):
        return self.evaluate(*args)

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class FunctionMap(Map):
    """A plain callable seen as a Map (no cache)."""

    def __init__(self, f):
        if not callable(f):
            raise TypeError(f"FunctionMap expects a callable, got {type(f).__name__}")
        self.f = f

    def evaluate_cached(self, cache, *args):
        return self.f(*args)

    def __eq__(self, other):
        if not isinstance(other, FunctionMap):
            return NotImplemented
        return self.f is other.f

    def __hash__(self):
        return hash((FunctionMap, id(self.f)))

    def __repr__(self):
        return f"FunctionMap({getattr(self.f, '__name__', self.f)!r})"


def _result_dtype(op, *args):
    """dtype of ``op`` applied to unit values of the argument dtypes."""
    probes = [np.ones((), dtype=np.asarray(a).dtype) for a in args]
    return np.asarray(op(*probes)).dtype


class Broadcasting(Map):
    """
    Element-wise application of a ufunc-like ``op`` (must accept ``out=``).

    The cache is a CachedArray sized to the broadcast shape; the returned
    array is that buffer and is overwritten by the next cached evaluation.
    """

    def __init__(self, op):
        self.op = op

    def return_cache(self, *args):
        shape = np.broadcast_shapes(*(np.shape(a) for a in args))
        return CachedArray(shape, _result_dtype(self.op, *args))

    def evaluate_cached(self, cache, *args):
        shape = np.broadcast_shapes(*(np.shape(a) for a in args))
        if shape == ():
            return self.op(*args)
        v = cache.setsize(shape)
        self.op(*args, out=v)
        return v

    def __eq__(self, other):
        if not isinstance(other, Broadcasting):
            return NotImplemented
        return self.op is other.op

    def __hash__(self):
        return hash((Broadcasting, id(self.op)))

    def __repr__(self):
        return f"Broadcasting({getattr(self.op, '__name__', self.op)!r})"


# ---------------------------------------------------------------------------
# protocol functions (plain callables are accepted as maps)
# ---------------------------------------------------------------------------
def return_cache(k, *args):
    if isinstance(k, Map):
        return k.return_cache(*args)
    return None


def evaluate_cached(cache, k, *args):
    if isinstance(k, Map):
        return k.evaluate_cached(cache, *args)
    return k(*args)


def evaluate(k, *args):
    if isinstance(k, Map):
        return k.evaluate(*args)
    return k(*args)


def testargs(k, *args):
    if isinstance(k, Map):
        return k.testargs(*args)
    return args


def return_value(k, *args):
    if isinstance(k, Map):
        return k.return_value(*args)
    return k(*args)

"""pycellarrays.arrays.lazy
Lazy composite arrays and the ``lazy_map`` entry point.

``lazy_map(Reindex(values), j_to_i)`` is routed through a small table of
structural rewrites (see ``ReindexPattern``) that avoid a generic per-item
gather whenever the shape of ``values`` allows it.
"""
import logging
from enum import Enum, auto

import numpy as np

from pycellarrays.arrays.compressed import CompressedArray
from pycellarrays.arrays.fill import Fill
from pycellarrays.arrays.identity import IdentityVector
from pycellarrays.arrays.interface import (
    array_cache, getindex_cached, shape_of, testitem,
)
from pycellarrays.arrays.maps import (
    FunctionMap, Map, evaluate_cached, return_cache, return_value,
)
from pycellarrays.arrays.posneg import gather_side_ids, get_array
from pycellarrays.arrays.reindex import PosNegReindex, Reindex
from pycellarrays.core.errors import DomainError, LengthMismatchError, check
from pycellarrays.jit.numba_helpers import aligned_with_side, all_on_side

logger = logging.getLogger(__name__)


class _LazyArrayCache:
    __slots__ = ("g", "f", "k", "kcache")

    def __init__(self, g, f):
        self.g = g
        self.f = f
        # one map cache per traversal, rebuilt when g yields a different map
        self.k = None
        self.kcache = None


class LazyArray:
    """
    Array whose item ``j`` is ``evaluate(g[j], f[0][j], ..., f[k-1][j])``.

    Nothing is stored: items are computed on demand. ``g`` is an array of
    maps, most often a ``Fill`` of a single map.
    """

    def __init__(self, g, *f):
        n = len(g)
        for k, fk in enumerate(f):
            if len(fk) != n:
                raise LengthMismatchError(
                    f"LazyArray: argument {k} has length {len(fk)}, expected {n}")
        self.g = g
        self.f = tuple(f)

    def __len__(self):
        return len(self.g)

    @property
    def shape(self):
        return (len(self.g),)

    # ------------------------------------------------------------------
    # cached access
    # ------------------------------------------------------------------
    def array_cache(self):
        return _LazyArrayCache(array_cache(self.g), [array_cache(fk) for fk in self.f])

    def getindex_cached(self, cache, j):
        k = getindex_cached(cache.g, self.g, j)
        args = [getindex_cached(c, fk, j) for c, fk in zip(cache.f, self.f)]
        if cache.k is not k and (cache.k is None or cache.k != k):
            cache.kcache = return_cache(k, *args)
        cache.k = k
        return evaluate_cached(cache.kcache, k, *args)

    def traverse(self):
        """
        Sequential pass sharing one cache; items may alias scratch memory
        and are only valid until the next step.
        """
        cache = self.array_cache()
        for j in range(len(self)):
            yield self.getindex_cached(cache, j)

    # ------------------------------------------------------------------
    # plain access (items are safe to keep)
    # ------------------------------------------------------------------
    def __getitem__(self, j):
        n = len(self)
        if not -n <= j < n:
            raise IndexError(f"index {j} out of range for LazyArray of length {n}")
        if j < 0:
            j += n
        return self.getindex_cached(self.array_cache(), j)

    def __iter__(self):
        for j in range(len(self)):
            yield self[j]

    def testitem(self):
        if len(self) != 0:
            return self[0]
        k = testitem(self.g)
        try:
            args = [testitem(fk) for fk in self.f]
        except DomainError:
            if not isinstance(k, (Reindex, PosNegReindex)):
                raise
            # gather maps ignore the index when building their return value
            args = [1 for _ in self.f]
        return return_value(k, *args)

    def __array__(self, dtype=None, copy=None):
        return np.asarray(list(self), dtype=dtype)

    def __repr__(self):
        return f"LazyArray(g={self.g!r}, nargs={len(self.f)}, length={len(self)})"


# ---------------------------------------------------------------------------
# lazy_map
# ---------------------------------------------------------------------------
def lazy_map(k, *f):
    """
    Lazily apply ``k`` index-wise to the arrays ``f``.

    ``k`` is a Map, a plain callable, or an array of maps (one per index).
    """
    if not f:
        raise ValueError("lazy_map needs at least one argument array")
    if isinstance(k, Reindex) and len(f) == 1:
        return _lazy_reindex(k, f[0])
    if isinstance(k, Map):
        g = Fill(k, len(f[0]))
    elif callable(k):
        g = Fill(FunctionMap(k), len(f[0]))
    else:
        g = k
    logger.debug(f"lazy_map: {g!r} over {len(f)} array(s) of length {len(f[0])}")
    return LazyArray(g, *f)


def reindex(values, j_to_i):
    """``result[j] == values[j_to_i[j]]``, built lazily."""
    return lazy_map(Reindex(values), j_to_i)


class ReindexPattern(Enum):
    IDENTITY = auto()
    FILL = auto()
    COMPRESSED = auto()
    POSNEG = auto()
    LAZY = auto()
    GENERIC = auto()


def _is_posneg_composite(values) -> bool:
    return (isinstance(values, LazyArray)
            and isinstance(values.g, Fill)
            and isinstance(values.g.value, PosNegReindex)
            and len(values.f) == 1)


def classify_reindex(values, j_to_i) -> ReindexPattern:
    """Pick the rewrite for ``Reindex(values)`` over ``j_to_i`` (first match wins)."""
    if isinstance(j_to_i, IdentityVector):
        return ReindexPattern.IDENTITY
    if isinstance(values, Fill):
        return ReindexPattern.FILL
    if isinstance(values, CompressedArray):
        return ReindexPattern.COMPRESSED
    if _is_posneg_composite(values):
        return ReindexPattern.POSNEG
    if isinstance(values, LazyArray):
        return ReindexPattern.LAZY
    return ReindexPattern.GENERIC


def _reindex_identity(k, j_to_i):
    check(len(k.values) == len(j_to_i),
          f"IdentityVector of length {len(j_to_i)} cannot reindex an array "
          f"of length {len(k.values)}", LengthMismatchError)
    return k.values


def _reindex_fill(k, j_to_i):
    return Fill(k.values.value, shape_of(j_to_i))


def _reindex_compressed(k, j_to_i):
    i_to_v = k.values
    ptrs = lazy_map(Reindex(i_to_v.ptrs), j_to_i)
    return CompressedArray(i_to_v.values, ptrs)


def _pos_to_index(ipos):
    return ipos - 1


def _neg_to_index(ineg):
    return -ineg - 1


def _reindex_posneg(k, j_to_i):
    i_to_iposneg = k.values.f[0]
    ipos_to_value = k.values.g.value.values_pos
    ineg_to_value = k.values.g.value.values_neg
    ids = gather_side_ids(i_to_iposneg, j_to_i)
    if aligned_with_side(ids, 1, len(ipos_to_value)):
        logger.debug("lazy_map(Reindex): aligned with the positive side")
        return ipos_to_value
    if aligned_with_side(ids, -1, len(ineg_to_value)):
        logger.debug("lazy_map(Reindex): aligned with the negative side")
        return ineg_to_value
    j_to_iposneg = lazy_map(Reindex(get_array(i_to_iposneg)), j_to_i)
    if all_on_side(ids, 1):
        j_to_ipos = lazy_map(_pos_to_index, j_to_iposneg)
        return lazy_map(Reindex(ipos_to_value), j_to_ipos)
    if all_on_side(ids, -1):
        j_to_ineg = lazy_map(_neg_to_index, j_to_iposneg)
        return lazy_map(Reindex(ineg_to_value), j_to_ineg)
    return lazy_map(PosNegReindex(ipos_to_value, ineg_to_value), j_to_iposneg)


def _reindex_lazy(k, j_to_i):
    i_to_g = k.values.g
    j_to_g = lazy_map(Reindex(i_to_g), j_to_i)
    j_to_f = [lazy_map(Reindex(i_to_fk), j_to_i) for i_to_fk in k.values.f]
    return LazyArray(j_to_g, *j_to_f)


def _reindex_generic(k, j_to_i):
    return LazyArray(Fill(k, len(j_to_i)), j_to_i)


_REINDEX_RULES = {
    ReindexPattern.IDENTITY: _reindex_identity,
    ReindexPattern.FILL: _reindex_fill,
    ReindexPattern.COMPRESSED: _reindex_compressed,
    ReindexPattern.POSNEG: _reindex_posneg,
    ReindexPattern.LAZY: _reindex_lazy,
    ReindexPattern.GENERIC: _reindex_generic,
}


def _lazy_reindex(k, j_to_i):
    pattern = classify_reindex(k.values, j_to_i)
    logger.debug(f"lazy_map(Reindex): {pattern.name} for {type(k.values).__name__} "
                 f"over {len(j_to_i)} indices")
    return _REINDEX_RULES[pattern](k, j_to_i)

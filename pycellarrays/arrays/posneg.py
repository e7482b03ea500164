"""pycellarrays.arrays.posneg
Positive/negative partitions of an index range (owner/ghost, interior/boundary).

Side ids are signed and one-based: ``+k`` is the k-th positive item, ``-k``
the k-th negative item, and ``0`` is never a valid id.
"""
import numpy as np

from pycellarrays.arrays.fill import Fill
from pycellarrays.arrays.reindex import PosNegReindex
from pycellarrays.jit.numba_helpers import invert_side_ids, side_counts


class PosNegPartition:
    """Index-partition array ``i -> signed side id`` with its inverse lookups."""

    def __init__(self, ids):
        ids = np.asarray(ids, dtype=np.int64)
        if ids.ndim != 1:
            raise ValueError(f"PosNegPartition expects a 1-D id array, got shape {ids.shape}")
        self.ids = ids
        n_pos, n_neg, max_pos, max_neg = side_counts(ids)
        if n_pos != max_pos or n_neg != max_neg:
            raise ValueError(
                f"PosNegPartition: side ids must be 1..k on each side without gaps or "
                f"repeats (got {n_pos} positive ids up to {max_pos}, "
                f"{n_neg} negative ids down to -{max_neg})")
        self.ipos_to_i, self.ineg_to_i = invert_side_ids(ids, max_pos, max_neg)
        if np.any(self.ipos_to_i < 0) or np.any(self.ineg_to_i < 0):
            raise ValueError("PosNegPartition: side ids must be 1..k on each side "
                             "without gaps or repeats")

    @classmethod
    def from_sides(cls, ipos_to_i, ineg_to_i, n: int):
        """Build the partition of ``range(n)`` from the items of each side."""
        ipos_to_i = np.asarray(ipos_to_i, dtype=np.int64)
        ineg_to_i = np.asarray(ineg_to_i, dtype=np.int64)
        ids = np.zeros(n, dtype=np.int64)
        ids[ipos_to_i] = np.arange(1, ipos_to_i.size + 1)
        ids[ineg_to_i] = -np.arange(1, ineg_to_i.size + 1)
        if ipos_to_i.size + ineg_to_i.size != n or np.any(ids == 0):
            raise ValueError("PosNegPartition.from_sides: sides must cover range(n) exactly once")
        if np.intersect1d(ipos_to_i, ineg_to_i).size:
            raise ValueError("PosNegPartition.from_sides: positive and negative sides overlap")
        return cls(ids)

    @property
    def n_pos(self) -> int:
        return self.ipos_to_i.size

    @property
    def n_neg(self) -> int:
        return self.ineg_to_i.size

    @property
    def shape(self):
        return self.ids.shape

    def __len__(self):
        return self.ids.size

    def __getitem__(self, i):
        return int(self.ids[i])

    def __iter__(self):
        return (int(s) for s in self.ids)

    def testitem(self):
        return int(self.ids[0]) if self.ids.size else 1

    def __array__(self, dtype=None, copy=None):
        return np.asarray(self.ids, dtype=dtype)

    def __repr__(self):
        return f"PosNegPartition(n={len(self)}, pos={self.n_pos}, neg={self.n_neg})"


def get_array(a):
    """Raw signed ids of a partition; any other index array is returned as is."""
    if isinstance(a, PosNegPartition):
        return a.ids
    return a


def gather_side_ids(i_to_iposneg, j_to_i) -> np.ndarray:
    """``ids[j] = i_to_iposneg[j_to_i[j]]`` as a contiguous int64 vector."""
    ids = np.asarray(get_array(i_to_iposneg), dtype=np.int64)
    j = np.asarray(j_to_i, dtype=np.int64).reshape(-1)
    return np.ascontiguousarray(ids[j])


def posneg_array(values_pos, values_neg, i_to_iposneg):
    """
    Lazy array whose item ``i`` comes from ``values_pos`` or ``values_neg``
    according to the side id ``i_to_iposneg[i]``.
    """
    from pycellarrays.arrays.lazy import LazyArray

    k = PosNegReindex(values_pos, values_neg)
    return LazyArray(Fill(k, len(i_to_iposneg)), i_to_iposneg)

import numba
import numpy as np

id_type = np.int64


@numba.njit(cache=True)
def aligned_with_side(ids, sign, n):
    """
    True if ``ids`` is exactly ``sign*1, sign*2, ..., sign*n``,
    i.e. the gathered side ids enumerate one whole side in order.
    """
    if ids.shape[0] != n:
        return False
    for j in range(n):
        if ids[j] != sign * (j + 1):
            return False
    return True


@numba.njit(cache=True)
def all_on_side(ids, sign):
    """True if every side id has the sign of ``sign`` (zeros never qualify)."""
    for j in range(ids.shape[0]):
        if ids[j] * sign <= 0:
            return False
    return True


@numba.njit(cache=True)
def side_counts(ids):
    """Number of positive and negative ids, and the largest id per side."""
    n_pos = 0
    n_neg = 0
    max_pos = 0
    max_neg = 0
    for j in range(ids.shape[0]):
        s = ids[j]
        if s > 0:
            n_pos += 1
            if s > max_pos:
                max_pos = s
        elif s < 0:
            n_neg += 1
            if -s > max_neg:
                max_neg = -s
    return n_pos, n_neg, max_pos, max_neg


@numba.njit(cache=True)
def invert_side_ids(ids, n_pos, n_neg):
    """
    Inverse lookups of a partition: ``ipos_to_i`` and ``ineg_to_i``
    (-1 where a side id is not used).
    """
    ipos_to_i = np.full(n_pos, -1, dtype=np.int64)
    ineg_to_i = np.full(n_neg, -1, dtype=np.int64)
    for i in range(ids.shape[0]):
        s = ids[i]
        if s > 0:
            ipos_to_i[s - 1] = i
        elif s < 0:
            ineg_to_i[-s - 1] = i
    return ipos_to_i, ineg_to_i

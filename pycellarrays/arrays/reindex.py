"""pycellarrays.arrays.reindex
Gather maps: ``Reindex`` (``values[i]``) and ``PosNegReindex`` (side ids).
"""
from pycellarrays.arrays.interface import array_cache, getindex_cached, testitem
from pycellarrays.arrays.maps import Map
from pycellarrays.core.errors import DomainError, OutOfDomainIndexError, check


class Reindex(Map):
    """
    ``Reindex(values)(i) == values[i]``.

    The domain of this map is the index range of ``values``; when it is
    empty no test argument exists and ``return_value`` falls back to a
    representative item of ``values``.
    """

    def __init__(self, values):
        self.values = values

    def testargs(self, *i):
        check(len(self.values) != 0, "This map has empty domain", DomainError)
        return tuple(0 for _ in i)

    def return_value(self, *i):
        if len(self.values) != 0:
            return self.evaluate(*self.testargs(*i))
        return testitem(self.values)

    def return_cache(self, *i):
        return array_cache(self.values)

    def evaluate_cached(self, cache, *i):
        return getindex_cached(cache, self.values, *i)

    def __eq__(self, other):
        if not isinstance(other, Reindex):
            return NotImplemented
        return self.values is other.values

    def __hash__(self):
        return hash((Reindex, id(self.values)))

    def __repr__(self):
        return f"Reindex({type(self.values).__name__}[{len(self.values)}])"


class PosNegReindex(Map):
    """
    Select from one of two disjoint arrays by the sign of a side id.

    ``i > 0`` reads ``values_pos[i-1]``, ``i < 0`` reads ``values_neg[-i-1]``;
    ``i == 0`` is outside the domain.
    """

    def __init__(self, values_pos, values_neg):
        self.values_pos = values_pos
        self.values_neg = values_neg

    def testargs(self, i):
        if len(self.values_pos) != 0:
            return (1,)
        check(len(self.values_neg) != 0, "This map has empty domain", DomainError)
        return (-1,)

    def return_value(self, i):
        if len(self.values_pos) != 0 or len(self.values_neg) != 0:
            return self.evaluate(*self.testargs(i))
        return testitem(self.values_pos)

    def return_cache(self, i):
        return array_cache(self.values_pos), array_cache(self.values_neg)

    def evaluate_cached(self, cache, i):
        pos_cache, neg_cache = cache
        if i > 0:
            return getindex_cached(pos_cache, self.values_pos, i - 1)
        if i < 0:
            return getindex_cached(neg_cache, self.values_neg, -i - 1)
        raise OutOfDomainIndexError("PosNegReindex is undefined for side id 0")

    def __eq__(self, other):
        if not isinstance(other, PosNegReindex):
            return NotImplemented
        return (self.values_pos is other.values_pos
                and self.values_neg is other.values_neg)

    def __hash__(self):
        return hash((PosNegReindex, id(self.values_pos), id(self.values_neg)))

    def __repr__(self):
        return (f"PosNegReindex(pos={len(self.values_pos)}, "
                f"neg={len(self.values_neg)})")

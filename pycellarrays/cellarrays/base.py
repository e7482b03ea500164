"""pycellarrays.cellarrays.base
Abstract per-cell array containers.

Traversal of a CellArray yields one ``(array, shape)`` pair per cell, where
``shape`` is the logical shape of the cell (never larger than ``maxsize()``)
and ``array`` holds the values in its leading block. Derived containers
write into a scratch buffer owned by the traversal, so a yielded array is
only valid until the next step.
"""
from abc import ABC, abstractmethod
from math import prod

import numpy as np

from pycellarrays.core.cachedarray import CachedArray, viewtosize
from pycellarrays.core.errors import LengthMismatchError, ShapeMismatchError


class CellArray(ABC):
    """Iterable collection of N-dimensional arrays, one per cell."""

    # let NumPy defer to the reflected operators
    __array_ufunc__ = None

    ndim: int = 0
    dtype = np.dtype(float)

    @abstractmethod
    def __iter__(self):
        raise NotImplementedError

    @abstractmethod
    def __len__(self):
        raise NotImplementedError

    @abstractmethod
    def maxsize(self) -> tuple:
        raise NotImplementedError

    def maxsize_at(self, i: int) -> int:
        return self.maxsize()[i]

    def maxlength(self) -> int:
        return prod(self.maxsize())

    def __str__(self):
        lines = [f"{i} -> {viewtosize(a, s)!r}" for i, (a, s) in enumerate(self)]
        return "\n".join(lines)

    def __repr__(self):
        return (f"<{self.__class__.__name__} ncells={len(self)} "
                f"maxsize={self.maxsize()} dtype={self.dtype}>")

    # ---------- operators (see cellvalues.operations for the table) ----------
    def _binary(self, name, other, reflected=False):
        from pycellarrays.cellvalues.operations import apply_binary
        return apply_binary(name, other, self) if reflected else apply_binary(name, self, other)

    def __add__(self, other): return self._binary("+", other)
    def __radd__(self, other): return self._binary("+", other, reflected=True)
    def __sub__(self, other): return self._binary("-", other)
    def __rsub__(self, other): return self._binary("-", other, reflected=True)
    def __mul__(self, other): return self._binary("*", other)
    def __rmul__(self, other): return self._binary("*", other, reflected=True)
    def __truediv__(self, other): return self._binary("/", other)
    def __rtruediv__(self, other): return self._binary("/", other, reflected=True)

    def __neg__(self):
        from pycellarrays.cellvalues.operations import apply_unary
        return apply_unary("-", self)

    def __pos__(self):
        from pycellarrays.cellvalues.operations import apply_unary
        return apply_unary("+", self)

    def __eq__(self, other):
        if not isinstance(other, CellArray):
            return NotImplemented
        from pycellarrays.cellarrays.operations import cellarrays_equal
        return cellarrays_equal(self, other)

    __hash__ = None


class IndexableCellArray(CellArray):
    """
    CellArray with direct access by cell id.

    Implementing ``__getitem__`` and ``__len__`` is enough; the traversal
    visits cells ``0 .. len-1``.
    """

    @abstractmethod
    def __getitem__(self, cell: int):
        raise NotImplementedError

    def __iter__(self):
        for cell in range(len(self)):
            yield self[cell]


def traverse_cells(c):
    """(array, shape) pairs of a CellArray, (value, np.shape(value)) otherwise."""
    if isinstance(c, CellArray):
        return iter(c)
    return ((v, np.shape(v)) for v in c)


def maxsize_of(c) -> tuple:
    """maxsize of a CellArray or CellValue operand, () for anything else."""
    hook = getattr(c, "maxsize", None)
    if hook is not None:
        return tuple(hook())
    return ()


class CellArrayFromUnaryOp(CellArray):
    """Lazy result of a unary operation on a CellArray."""

    @abstractmethod
    def inputcellarray(self) -> CellArray:
        raise NotImplementedError

    @abstractmethod
    def computesize(self, asize) -> tuple:
        raise NotImplementedError

    @abstractmethod
    def computevals(self, a, asize, v, vsize):
        raise NotImplementedError

    def __len__(self):
        return len(self.inputcellarray())

    def maxsize(self):
        return self.computesize(self.inputcellarray().maxsize())

    def __iter__(self):
        v = CachedArray(self.maxsize(), self.dtype)
        for a, asize in self.inputcellarray():
            vsize = self.computesize(asize)
            v.setsize(vsize)
            self.computevals(a, asize, v.array, vsize)
            yield v.array, vsize


class CellArrayFromElemUnaryOp(CellArrayFromUnaryOp):
    """Unary operation acting entry by entry: the shape is unchanged."""

    def computesize(self, asize):
        return tuple(asize)


class CellArrayFromBinaryOp(CellArray):
    """
    Lazy result of a binary operation; either operand may also be a
    CellValue, seen as a 0-d (or value-shaped) array per cell.
    """

    @abstractmethod
    def leftcellarray(self):
        raise NotImplementedError

    @abstractmethod
    def rightcellarray(self):
        raise NotImplementedError

    @abstractmethod
    def computesize(self, asize, bsize) -> tuple:
        raise NotImplementedError

    @abstractmethod
    def computevals(self, a, asize, b, bsize, v, vsize):
        raise NotImplementedError

    def __len__(self):
        a, b = self.leftcellarray(), self.rightcellarray()
        if len(a) != len(b):
            raise LengthMismatchError(f"operands have different lengths: {len(a)} != {len(b)}")
        return len(a)

    def maxsize(self):
        return self.computesize(maxsize_of(self.leftcellarray()),
                                maxsize_of(self.rightcellarray()))

    def __iter__(self):
        len(self)               # raises on a length mismatch
        v = CachedArray(self.maxsize(), self.dtype)
        anext = traverse_cells(self.leftcellarray())
        bnext = traverse_cells(self.rightcellarray())
        for (a, asize), (b, bsize) in zip(anext, bnext):
            vsize = self.computesize(asize, bsize)
            v.setsize(vsize)
            self.computevals(a, asize, b, bsize, v.array, vsize)
            yield v.array, vsize


class CellArrayFromElemBinaryOp(CellArrayFromBinaryOp):
    """Binary operation on equally shaped cells."""

    def computesize(self, asize, bsize):
        if tuple(asize) != tuple(bsize):
            raise ShapeMismatchError(f"cell shapes differ: {tuple(asize)} vs {tuple(bsize)}")
        return tuple(asize)

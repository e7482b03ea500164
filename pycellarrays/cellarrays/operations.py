"""pycellarrays.cellarrays.operations
Lazy element-wise and shape-changing operations on CellArrays.
"""
import numpy as np

from pycellarrays.cellarrays.base import (
    CellArray, CellArrayFromBinaryOp, CellArrayFromElemUnaryOp,
    CellArrayFromUnaryOp, maxsize_of,
)
from pycellarrays.core.cachedarray import viewtosize
from pycellarrays.core.errors import ShapeMismatchError, check_lengths


def _reciprocal(x, out=None):
    return np.divide(1.0, x, out=out)


# Entries of a CellArray are scalars, so the tensor operations reduce to
# their scalar counterparts.
ELEMENTWISE_UNARY = {
    "+": np.positive,
    "-": np.negative,
    "inv": _reciprocal,
    "det": np.positive,
    "meas": np.absolute,
}

ELEMENTWISE_BINARY = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "inner": np.multiply,
    "outer": np.multiply,
}


def result_dtype(op, *dtypes):
    """dtype produced by ``op`` on unit values of the given dtypes."""
    return np.asarray(op(*(np.ones((), dtype=d) for d in dtypes))).dtype


def _normalize_axis(axis: int, ndim: int) -> int:
    if not -ndim <= axis < ndim:
        raise ValueError(f"axis {axis} is out of bounds for cells of rank {ndim}")
    return axis + ndim if axis < 0 else axis


class CellArrayFromBroadcastUnaryOp(CellArrayFromElemUnaryOp):
    """``op`` applied to every entry of every cell."""

    def __init__(self, op, a: CellArray):
        self.op = op
        self.a = a
        self.ndim = a.ndim
        self.dtype = result_dtype(op, a.dtype)

    def inputcellarray(self):
        return self.a

    def computevals(self, a, asize, v, vsize):
        self.op(viewtosize(a, asize), out=v)


class CellArrayFromBroadcastBinaryOp(CellArrayFromBinaryOp):
    """
    ``op`` applied entry-wise to two operands with NumPy broadcasting of the
    cell shapes. One operand may be a CellValue.
    """

    def __init__(self, op, a, b):
        check_lengths(a, b, "CellArrayFromBroadcastBinaryOp operands")
        self.op = op
        self.a = a
        self.b = b
        self._maxsize = self._broadcast_maxsize(maxsize_of(a), maxsize_of(b))
        self.ndim = len(self._maxsize)
        self.dtype = result_dtype(op, a.dtype, b.dtype)

    def leftcellarray(self):
        return self.a

    def rightcellarray(self):
        return self.b

    def computesize(self, asize, bsize):
        try:
            return tuple(np.broadcast_shapes(tuple(asize), tuple(bsize)))
        except ValueError as e:
            raise ShapeMismatchError(
                f"cell shapes {tuple(asize)} and {tuple(bsize)} cannot be broadcast") from e

    @staticmethod
    def _broadcast_maxsize(sa, sb):
        # per-dimension upper bound; cells may be smaller than their maxsize
        n = max(len(sa), len(sb))
        sa = (1,) * (n - len(sa)) + sa
        sb = (1,) * (n - len(sb)) + sb
        return tuple(max(x, y) for x, y in zip(sa, sb))

    def maxsize(self):
        return self._maxsize

    def computevals(self, a, asize, b, bsize, v, vsize):
        self.op(viewtosize(a, asize), viewtosize(b, bsize), out=v)


class CellArrayFromCellSum(CellArrayFromUnaryOp):
    """Sum of every cell along ``axis``; the cells lose that dimension."""

    def __init__(self, a: CellArray, axis: int):
        self.a = a
        self.axis = _normalize_axis(axis, a.ndim)
        self.ndim = a.ndim - 1
        self.dtype = np.sum(np.ones(1, dtype=a.dtype)).dtype

    def inputcellarray(self):
        return self.a

    def computesize(self, asize):
        asize = tuple(asize)
        return asize[:self.axis] + asize[self.axis + 1:]

    def computevals(self, a, asize, v, vsize):
        np.sum(viewtosize(a, asize), axis=self.axis, out=v)


class CellArrayFromCellNewAxis(CellArrayFromUnaryOp):
    """Every cell gets a length-1 axis inserted at position ``axis``."""

    def __init__(self, a: CellArray, axis: int):
        if axis < 0:
            axis += a.ndim + 1
        if not 0 <= axis <= a.ndim:
            raise ValueError(f"new axis {axis} is out of bounds for cells of rank {a.ndim}")
        self.a = a
        self.axis = axis
        self.ndim = a.ndim + 1
        self.dtype = a.dtype

    def inputcellarray(self):
        return self.a

    def computesize(self, asize):
        asize = tuple(asize)
        return asize[:self.axis] + (1,) + asize[self.axis:]

    def computevals(self, a, asize, v, vsize):
        v[...] = np.expand_dims(viewtosize(a, asize), self.axis)


def cellsum(a: CellArray, axis: int):
    """
    Sum every cell along ``axis``. One-dimensional cells reduce to a
    CellValue holding one number per cell.
    """
    if a.ndim == 1:
        from pycellarrays.cellvalues.base import CellValueFromCellArrayReduce
        _normalize_axis(axis, 1)
        return CellValueFromCellArrayReduce(np.sum, a)
    return CellArrayFromCellSum(a, axis)


def cellnewaxis(a: CellArray, axis: int):
    return CellArrayFromCellNewAxis(a, axis)


def elementwise_unary(name: str, a: CellArray):
    return CellArrayFromBroadcastUnaryOp(ELEMENTWISE_UNARY[name], a)


def elementwise_binary(name: str, a, b):
    return CellArrayFromBroadcastBinaryOp(ELEMENTWISE_BINARY[name], a, b)


def cellarrays_equal(a: CellArray, b: CellArray) -> bool:
    """Same length, same logical shape and same values in every cell."""
    if len(a) != len(b):
        return False
    for (x, xsize), (y, ysize) in zip(a, b):
        if tuple(xsize) != tuple(ysize):
            return False
        if not np.array_equal(viewtosize(x, xsize), viewtosize(y, ysize)):
            return False
    return True

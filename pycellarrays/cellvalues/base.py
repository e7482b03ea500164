"""pycellarrays.cellvalues.base
Containers holding a single value (scalar or small tensor) per cell.
"""
from abc import ABC, abstractmethod

import numpy as np

from pycellarrays.core.cachedarray import viewtosize
from pycellarrays.core.errors import ShapeMismatchError, check_lengths


class CellValue(ABC):
    """Iterable collection of one value per cell."""

    # let NumPy defer to the reflected operators
    __array_ufunc__ = None

    @abstractmethod
    def __iter__(self):
        raise NotImplementedError

    @abstractmethod
    def __len__(self):
        raise NotImplementedError

    @property
    def dtype(self):
        for v in self:
            return np.asarray(v).dtype
        return np.dtype(float)

    def maxsize(self) -> tuple:
        """Largest shape of the values in every dimension (``()`` for scalars)."""
        shapes = [np.shape(v) for v in self]
        ranks = {len(s) for s in shapes}
        if len(ranks) > 1:
            raise ShapeMismatchError(f"cell values have different ranks {sorted(ranks)}")
        if not shapes or ranks == {0}:
            return ()
        return tuple(int(n) for n in np.max(np.asarray(shapes, dtype=np.int64), axis=0))

    @property
    def ndim(self) -> int:
        return len(self.maxsize())

    def __str__(self):
        return "\n".join(f"{i} -> {v!r}" for i, v in enumerate(self))

    def __repr__(self):
        return f"<{self.__class__.__name__} ncells={len(self)}>"

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
        if not isinstance(other, CellValue):
            return NotImplemented
        if len(self) != len(other):
            return False
        for a, b in zip(self, other):
            if not np.array_equal(a, b):
                return False
        return True

    __hash__ = None


class IndexableCellValue(CellValue):
    """CellValue with access by cell id; traversal visits ``0 .. len-1``."""

    @abstractmethod
    def __getitem__(self, cell: int):
        raise NotImplementedError

    def __iter__(self):
        for cell in range(len(self)):
            yield self[cell]


class ListCellValue(IndexableCellValue):
    """Values stored in a sequence (list, ndarray, LazyArray, ...)."""

    def __init__(self, values):
        self.values = values

    def __len__(self):
        return len(self.values)

    def __getitem__(self, cell):
        return self.values[cell]

    def maxsize(self):
        if isinstance(self.values, np.ndarray):
            return tuple(self.values.shape[1:])
        return super().maxsize()


class ConstantCellValue(IndexableCellValue):
    def __init__(self, value, length: int):
        self.value = value
        self.length = int(length)

    def __len__(self):
        return self.length

    def __getitem__(self, cell):
        if not 0 <= cell < self.length:
            raise IndexError(f"cell {cell} out of range for {self.length} cells")
        return self.value

    @property
    def dtype(self):
        return np.asarray(self.value).dtype

    def maxsize(self):
        return np.shape(self.value)


class CellValueFromUnaryOp(CellValue):
    def __init__(self, op, values: CellValue):
        self.op = op
        self.values = values

    def __len__(self):
        return len(self.values)

    def __iter__(self):
        for v in self.values:
            yield self.op(v)


class CellValueFromBinaryOp(CellValue):
    def __init__(self, op, a: CellValue, b: CellValue):
        check_lengths(a, b, "CellValueFromBinaryOp operands")
        self.op = op
        self.a = a
        self.b = b

    def __len__(self):
        return check_lengths(self.a, self.b, "CellValueFromBinaryOp operands")

    def __iter__(self):
        for a, b in zip(self.a, self.b):
            yield self.op(a, b)


class CellValueFromCellArrayReduce(CellValue):
    """One value per cell obtained by reducing the cell array with ``op``."""

    def __init__(self, op, values):
        self.op = op
        self.values = values

    def __len__(self):
        return len(self.values)

    def __iter__(self):
        for a, asize in self.values:
            yield self.op(viewtosize(a, asize))

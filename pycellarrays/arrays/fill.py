"""pycellarrays.arrays.fill"""
import numpy as np


def _as_shape(shape) -> tuple:
    if np.ndim(shape) == 0:
        return (int(shape),)
    return tuple(int(n) for n in shape)


class Fill:
    """Constant array: every index in ``shape`` maps to the same ``value``."""

    def __init__(self, value, shape):
        self.value = value
        self.shape = _as_shape(shape)
        if any(n < 0 for n in self.shape):
            raise ValueError(f"Fill: negative extent in shape {self.shape}")

    def __len__(self):
        return self.shape[0] if self.shape else 1

    @property
    def ndim(self) -> int:
        return len(self.shape)

    def _check_index(self, i):
        idx = i if isinstance(i, tuple) else (i,)
        if len(idx) != len(self.shape):
            raise IndexError(f"Fill of shape {self.shape} indexed with {i!r}")
        for ik, n in zip(idx, self.shape):
            if not -n <= ik < n:
                raise IndexError(f"index {i!r} out of range for Fill of shape {self.shape}")

    def __getitem__(self, i):
        self._check_index(i)
        return self.value

    def __iter__(self):
        for _ in range(len(self)):
            yield self.value

    def testitem(self):
        return self.value

    def __array__(self, dtype=None, copy=None):
        return np.full(self.shape, self.value, dtype=dtype)

    def __eq__(self, other):
        if not isinstance(other, Fill):
            return NotImplemented
        return self.shape == other.shape and bool(np.all(self.value == other.value))

    __hash__ = None

    def __repr__(self):
        return f"Fill({self.value!r}, {self.shape})"

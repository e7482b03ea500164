"""pycellarrays.fem.operators.inner"""
import numpy as np


def inner(a, b):
    """Full contraction: product for scalars, sum(a*b) for equal-shape tensors."""
    if np.ndim(a) == 0 or np.ndim(b) == 0:
        return a * b
    a = np.asarray(a); b = np.asarray(b)
    if a.shape != b.shape:
        raise ValueError(f'inner: shape mismatch {a.shape} vs {b.shape}')
    return np.einsum('i,i->', a.ravel(), b.ravel())


def outer(a, b):
    """Tensor product; reduces to the product for scalars."""
    if np.ndim(a) == 0 or np.ndim(b) == 0:
        return a * b
    return np.multiply.outer(np.asarray(a), np.asarray(b))

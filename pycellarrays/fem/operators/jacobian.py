"""pycellarrays.fem.operators.jacobian
inv / det / meas of a per-cell value, usually a Jacobian J = dx/dxi.
"""
import numpy as np


def inv(J):
    if np.ndim(J) == 0:
        return 1.0 / J
    J = np.asarray(J)
    if J.ndim != 2 or J.shape[0] != J.shape[1]:
        raise ValueError(f"inv: expected a square matrix, got shape {J.shape}")
    return np.linalg.inv(J)


def det(J):
    if np.ndim(J) == 0:
        return J
    J = np.asarray(J)
    if J.ndim != 2 or J.shape[0] != J.shape[1]:
        raise ValueError(f"det: expected a square matrix, got shape {J.shape}")
    return np.linalg.det(J)


def meas(J):
    """
    Measure scaling of the map with Jacobian J:
    |J| for scalars, the norm for vectors (curve tangents), |det J| for
    square matrices and sqrt(det(J J^T)) for embedded manifolds.
    """
    if np.ndim(J) == 0:
        return abs(J)
    J = np.asarray(J)
    if J.ndim == 1:
        return np.linalg.norm(J)
    if J.ndim != 2:
        raise ValueError(f"meas: unsupported rank {J.ndim}")
    if J.shape[0] == J.shape[1]:
        return abs(np.linalg.det(J))
    if J.shape[0] > J.shape[1]:
        J = J.T
    return np.sqrt(np.linalg.det(J @ J.T))

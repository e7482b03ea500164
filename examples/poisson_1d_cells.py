"""Example: 1D Poisson -(kappa u')' = 1 assembled from lazy per-cell arrays"""
import logging

import numpy as np
import scipy.sparse
import scipy.sparse.linalg as sp_la

from pycellarrays import (
    ConstantCellArray, ListCellValue, PosNegPartition, inv, lazy_map,
    posneg_array, reindex,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("poisson_1d_cells")


def solve(nx=40, kappa_left=1.0, kappa_right=1.0):
    x = np.linspace(0.0, 1.0, nx + 1) ** 1.2
    cell_to_nodes = np.column_stack([np.arange(nx), np.arange(1, nx + 1)])

    # geometry: nothing is evaluated until the cells are traversed
    cell_to_x = lazy_map(lambda nodes: x[nodes], cell_to_nodes)
    cell_to_h = lazy_map(lambda xc: xc[1] - xc[0], cell_to_x)
    detJ = ListCellValue(cell_to_h)

    # two materials: cells left of x=0.5 are on the positive side
    left = x[cell_to_nodes].mean(axis=1) < 0.5
    side_ids = np.where(left, np.cumsum(left), -np.cumsum(~left))
    partition = PosNegPartition(side_ids)
    kappa = ListCellValue(posneg_array(
        np.full(partition.n_pos, kappa_left), np.full(partition.n_neg, kappa_right), partition))

    K_ref = np.array([[1.0, -1.0], [-1.0, 1.0]])
    Ke = ConstantCellArray(K_ref, nx) * (kappa * inv(detJ))
    Fe = ConstantCellArray(np.full(2, 0.5), nx) * detJ

    rows, cols, vals = [], [], []
    F = np.zeros(nx + 1)
    for (ke, _), (fe, _), nodes in zip(Ke, Fe, cell_to_nodes):
        rows.append(np.repeat(nodes, 2))
        cols.append(np.tile(nodes, 2))
        vals.append(ke.ravel().copy())
        F[nodes] += fe
    K = scipy.sparse.coo_matrix(
        (np.concatenate(vals), (np.concatenate(rows), np.concatenate(cols))),
        shape=(nx + 1, nx + 1)).tocsr()

    interior = np.arange(1, nx)
    u = np.zeros(nx + 1)
    u[interior] = sp_la.spsolve(K[interior][:, interior], F[interior])

    boundary_h = reindex(cell_to_h, [0, nx - 1])
    logger.info(f"boundary cell sizes: {list(boundary_h)}")
    return x, u


if __name__ == "__main__":
    x, u = solve()
    err = np.max(np.abs(u - 0.5 * x * (1.0 - x)))
    logger.info(f"max nodal error (kappa=1): {err:.3e}")
    x, u = solve(kappa_left=1.0, kappa_right=10.0)
    logger.info(f"max of u with a stiff right half: {u.max():.4f}")

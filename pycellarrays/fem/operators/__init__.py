"""pycellarrays.fem.operators
Operations on the value stored for one cell (scalar, vector or matrix).
"""
from .inner import inner, outer
from .jacobian import inv, det, meas

__all__ = ['inner', 'outer', 'inv', 'det', 'meas']

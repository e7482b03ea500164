# pycellarrays.cellvalues
from .base import (
    CellValue, IndexableCellValue, ListCellValue, ConstantCellValue,
    CellValueFromUnaryOp, CellValueFromBinaryOp, CellValueFromCellArrayReduce,
)
from .operations import apply_unary, apply_binary, inv, det, meas, inner, outer

__all__ = [
    'CellValue', 'IndexableCellValue', 'ListCellValue', 'ConstantCellValue',
    'CellValueFromUnaryOp', 'CellValueFromBinaryOp', 'CellValueFromCellArrayReduce',
    'apply_unary', 'apply_binary', 'inv', 'det', 'meas', 'inner', 'outer',
]

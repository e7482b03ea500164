# pycellarrays.cellarrays
from .base import (
    CellArray, IndexableCellArray,
    CellArrayFromUnaryOp, CellArrayFromElemUnaryOp,
    CellArrayFromBinaryOp, CellArrayFromElemBinaryOp,
)
from .leaves import IndexedCellArray, PaddedCellArray, ConstantCellArray
from .operations import (
    CellArrayFromBroadcastUnaryOp, CellArrayFromBroadcastBinaryOp,
    CellArrayFromCellSum, CellArrayFromCellNewAxis,
    cellsum, cellnewaxis, cellarrays_equal,
)

__all__ = [
    'CellArray', 'IndexableCellArray',
    'CellArrayFromUnaryOp', 'CellArrayFromElemUnaryOp',
    'CellArrayFromBinaryOp', 'CellArrayFromElemBinaryOp',
    'IndexedCellArray', 'PaddedCellArray', 'ConstantCellArray',
    'CellArrayFromBroadcastUnaryOp', 'CellArrayFromBroadcastBinaryOp',
    'CellArrayFromCellSum', 'CellArrayFromCellNewAxis',
    'cellsum', 'cellnewaxis', 'cellarrays_equal',
]

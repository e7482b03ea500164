"""pycellarrays
Lazy per-cell array computations for mesh-based numerical methods.
"""
import logging

from .core import (
    SETTINGS, CachedArray, viewtosize,
    DomainError, LengthMismatchError, ShapeMismatchError, OutOfDomainIndexError,
)
from .arrays import (
    Map, FunctionMap, Broadcasting,
    evaluate, evaluate_cached, return_cache, testargs, return_value,
    array_cache, getindex_cached, testitem,
    Fill, CompressedArray, IdentityVector,
    Reindex, PosNegReindex, PosNegPartition, posneg_array,
    LazyArray, lazy_map, reindex,
)
from .cellarrays import (
    CellArray, IndexableCellArray, IndexedCellArray, PaddedCellArray,
    ConstantCellArray, cellsum, cellnewaxis,
)
from .cellvalues import (
    CellValue, IndexableCellValue, ListCellValue, ConstantCellValue,
    inv, det, meas, inner, outer,
)

if SETTINGS.debug:
    logging.getLogger(__name__).setLevel(logging.DEBUG)

__all__ = [
    'SETTINGS', 'CachedArray', 'viewtosize',
    'DomainError', 'LengthMismatchError', 'ShapeMismatchError', 'OutOfDomainIndexError',
    'Map', 'FunctionMap', 'Broadcasting',
    'evaluate', 'evaluate_cached', 'return_cache', 'testargs', 'return_value',
    'array_cache', 'getindex_cached', 'testitem',
    'Fill', 'CompressedArray', 'IdentityVector',
    'Reindex', 'PosNegReindex', 'PosNegPartition', 'posneg_array',
    'LazyArray', 'lazy_map', 'reindex',
    'CellArray', 'IndexableCellArray', 'IndexedCellArray', 'PaddedCellArray',
    'ConstantCellArray', 'cellsum', 'cellnewaxis',
    'CellValue', 'IndexableCellValue', 'ListCellValue', 'ConstantCellValue',
    'inv', 'det', 'meas', 'inner', 'outer',
]

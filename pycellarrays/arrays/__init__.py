# pycellarrays.arrays
from .maps import (
    Map, FunctionMap, Broadcasting,
    evaluate, evaluate_cached, return_cache, testargs, return_value,
)
from .interface import array_cache, getindex_cached, testitem, shape_of
from .fill import Fill
from .compressed import CompressedArray
from .identity import IdentityVector
from .reindex import Reindex, PosNegReindex
from .posneg import PosNegPartition, posneg_array, get_array
from .lazy import LazyArray, lazy_map, reindex, ReindexPattern, classify_reindex

__all__ = [
    'Map', 'FunctionMap', 'Broadcasting',
    'evaluate', 'evaluate_cached', 'return_cache', 'testargs', 'return_value',
    'array_cache', 'getindex_cached', 'testitem', 'shape_of',
    'Fill', 'CompressedArray', 'IdentityVector',
    'Reindex', 'PosNegReindex', 'PosNegPartition', 'posneg_array', 'get_array',
    'LazyArray', 'lazy_map', 'reindex', 'ReindexPattern', 'classify_reindex',
]

"""pycellarrays.cellvalues.operations
Operator table for CellArray / CellValue / plain operands.

The result kind only depends on the kinds of the operands:

    array x (array | value)  ->  CellArray (broadcast over the cell entries)
    value x value            ->  CellValue (operation on the cell values)
    plain operands           ->  wrapped as ConstantCellValue
"""
import logging
import operator

from pycellarrays.cellarrays.base import CellArray
from pycellarrays.cellarrays.operations import elementwise_binary, elementwise_unary
from pycellarrays.cellvalues.base import (
    CellValue, CellValueFromBinaryOp, CellValueFromUnaryOp, ConstantCellValue,
)
from pycellarrays.fem import operators as tensor

logger = logging.getLogger(__name__)

VALUE_UNARY = {
    "+": operator.pos,
    "-": operator.neg,
    "inv": tensor.inv,
    "det": tensor.det,
    "meas": tensor.meas,
}

VALUE_BINARY = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "inner": tensor.inner,
    "outer": tensor.outer,
}


def kind_of(x) -> str:
    if isinstance(x, CellArray):
        return "array"
    if isinstance(x, CellValue):
        return "value"
    return "plain"


def _array_result(name, a, b):
    return elementwise_binary(name, a, b)


def _value_result(name, a, b):
    return CellValueFromBinaryOp(VALUE_BINARY[name], a, b)


def _plain_result(name, a, b):
    return VALUE_BINARY[name](a, b)


_BINARY_TABLE = {
    ("array", "array"): _array_result,
    ("array", "value"): _array_result,
    ("value", "array"): _array_result,
    ("value", "value"): _value_result,
    ("plain", "plain"): _plain_result,
}


def apply_unary(name: str, a):
    kind = kind_of(a)
    if kind == "array":
        return elementwise_unary(name, a)
    if kind == "value":
        return CellValueFromUnaryOp(VALUE_UNARY[name], a)
    return VALUE_UNARY[name](a)


def apply_binary(name: str, a, b):
    ka, kb = kind_of(a), kind_of(b)
    if ka == "plain" and kb != "plain":
        a, ka = ConstantCellValue(a, len(b)), "value"
    elif kb == "plain" and ka != "plain":
        b, kb = ConstantCellValue(b, len(a)), "value"
    logger.debug(f"apply_binary: {ka} {name} {kb}")
    return _BINARY_TABLE[(ka, kb)](name, a, b)


# ---------- named operations -------------------------------------------
def inv(a): return apply_unary("inv", a)
def det(a): return apply_unary("det", a)
def meas(a): return apply_unary("meas", a)
def inner(a, b): return apply_binary("inner", a, b)
def outer(a, b): return apply_binary("outer", a, b)

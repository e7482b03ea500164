"""pycellarrays.core.errors"""
from pycellarrays.core.settings import SETTINGS


class DomainError(ValueError):
    """A map was asked for test arguments but its domain is empty."""


class LengthMismatchError(ValueError):
    """Two arrays combined index-wise have different lengths."""


class ShapeMismatchError(ValueError):
    """Per-cell shapes cannot be combined."""


class OutOfDomainIndexError(IndexError):
    """An index outside the domain of a map (e.g. side id 0)."""


def check(cond, msg: str = "check failed", exc=ValueError):
    """Raise *exc(msg)* if *cond* is false and checks are enabled."""
    if SETTINGS.checks and not cond:
        raise exc(msg)


def check_lengths(a, b, what: str = "arrays"):
    """Unconditional length equality check used by binary compositions."""
    la, lb = len(a), len(b)
    if la != lb:
        raise LengthMismatchError(f"{what} have different lengths: {la} != {lb}")
    return la

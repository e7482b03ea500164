# pycellarrays/jit/__init__.py
from .numba_helpers import aligned_with_side, all_on_side

__all__ = ['aligned_with_side', 'all_on_side']

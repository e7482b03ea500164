from .settings import Settings, SETTINGS
from .errors import (
    DomainError, LengthMismatchError, ShapeMismatchError, OutOfDomainIndexError, check,
)
from .cachedarray import CachedArray, viewtosize
__all__=['Settings','SETTINGS','DomainError','LengthMismatchError','ShapeMismatchError',
         'OutOfDomainIndexError','check','CachedArray','viewtosize']

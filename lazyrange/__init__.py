from lazyrange.bound import UNBOUNDED, Unbounded
from lazyrange.errors import RangeError
from lazyrange.rangeiter import IterResult, RangeIterator, create, range

__all__ = [
    "UNBOUNDED",
    "Unbounded",
    "RangeError",
    "IterResult",
    "RangeIterator",
    "create",
    "range",
]

"""
Bounds of a range.

A bound is a plain Python int, or UNBOUNDED. Python ints have no infinity, so
UNBOUNDED is a singleton which behaves like "+infinity" for the handful of
operations a RangeIterator performs on its bounds:

    UNBOUNDED > n           --> True, for every int n
    UNBOUNDED - 1           --> UNBOUNDED
    UNBOUNDED - n + 1       --> UNBOUNDED (this is what len() computes)
    n <= UNBOUNDED          --> True

There is no practical upper bound: an iterator whose last bound is UNBOUNDED
never becomes empty.
"""

from typing import Any, Union

from fixedint import FixedInt


class Unbounded:
    _instance: "Unbounded | None" = None

    def __new__(cls) -> "Unbounded":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNBOUNDED"

    # arithmetic: adding or removing a finite amount does not change anything
    def __add__(self, other: Any) -> "Unbounded":
        if isinstance(other, int):
            return self
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Unbounded":
        if isinstance(other, int):
            return self
        return NotImplemented

    # comparisons: greater than every int, equal only to itself
    def __eq__(self, other: Any) -> bool:
        return other is self

    def __hash__(self) -> int:
        return hash(Unbounded)

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, (int, Unbounded)):
            return False
        return NotImplemented

    def __le__(self, other: Any) -> bool:
        if isinstance(other, int):
            return False
        if isinstance(other, Unbounded):
            return True
        return NotImplemented

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, int):
            return True
        if isinstance(other, Unbounded):
            return False
        return NotImplemented

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, (int, Unbounded)):
            return True
        return NotImplemented


UNBOUNDED = Unbounded()

Bound = Union[int, Unbounded]


def is_integer(x: Any) -> bool:
    # bool is a subclass of int, but range(True, False) is certainly a mistake
    return isinstance(x, int) and not isinstance(x, bool)


def as_bound(x: Any) -> Bound:
    """
    Convert x into a Bound, or raise TypeError.

    Fixed-width ints (fixedint.Int32, fixedint.UInt8, ...) are widened to
    plain ints: their arithmetic wraps around, so UInt8(0) - 1 would be 255
    instead of -1.
    """
    if x is None or x is UNBOUNDED:
        return UNBOUNDED
    if isinstance(x, FixedInt):
        return int(x)
    if is_integer(x):
        return int(x)
    raise TypeError(f"not an integer: {x!r}")

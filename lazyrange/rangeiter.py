"""
Lazy integer ranges.

    >>> list(range(0, 5))
    [0, 1, 2, 3, 4]
    >>> list(range(1, 5, inclusive=True).rev())
    [5, 4, 3, 2, 1]
    >>> list(range(1, 10).step(2))
    [1, 3, 5, 7, 9]

A RangeIterator is at the same time the iterator and the description of the
interval which is still left to consume: len(), contains() and empty() look
at the CURRENT cursor, so their result changes while the values are produced.

Internally, the last bound is always inclusive: range(0, 5) is stored as
0..=4.
"""

from dataclasses import dataclass
from typing import Any

from lazyrange.bound import UNBOUNDED, Bound, Unbounded, as_bound
from lazyrange.errors import RangeError


@dataclass(frozen=True)
class IterResult:
    """
    The result of a single RangeIterator.advance().

    While the iterator is active, value is the produced item. Once it's
    exhausted, value is the total number of items which were produced and
    done is True.
    """

    value: Bound
    done: bool


class RangeIterator:
    curr: Bound  # next value to produce
    last: Bound  # inclusive
    descending: bool
    stepsize: int
    count: int  # number of items produced so far

    def __init__(self, curr: Bound, last: Bound, descending: bool = False,
                 stepsize: int = 1) -> None:
        self.curr = curr
        self.last = last
        self.descending = descending
        self.stepsize = stepsize
        self.count = 0

    def __repr__(self) -> str:
        extra = ""
        if self.stepsize != 1:
            extra += f" step={self.stepsize}"
        if self.descending:
            extra += " rev"
        return f"<RangeIterator {self.curr}..={self.last}{extra}>"

    # ======== iteration ========

    def advance(self) -> IterResult:
        if self.empty():
            return IterResult(self.count, done=True)
        value = self.curr
        if self.descending:
            self.curr = self.curr - self.stepsize
        else:
            self.curr = self.curr + self.stepsize
        self.count += 1
        return IterResult(value, done=False)

    def __iter__(self) -> "RangeIterator":
        return self

    def __next__(self) -> Bound:
        res = self.advance()
        if res.done:
            raise StopIteration(res.value)
        return res.value

    # ======== queries ========

    def len(self) -> Bound:
        """
        Number of values between the cursor and the last bound, i.e.
        last - curr + 1.

        NOTE: this does not take the step into account, so for stepped
        ranges it's an upper bound: range(1, 10).step(2).len() == 9, even if
        only 5 values are produced. For descending ranges the result is
        negative.
        """
        if isinstance(self.curr, Unbounded) or isinstance(self.last, Unbounded):
            return UNBOUNDED
        return self.last - self.curr + 1

    def empty(self) -> bool:
        if self.descending:
            return self.curr < self.last
        else:
            return self.curr > self.last

    def contains(self, item: int) -> bool:
        if self.descending:
            return self.last <= item <= self.curr
        else:
            return self.curr <= item <= self.last

    def __contains__(self, item: Any) -> bool:
        # without this, "x in it" would consume the iterator
        return self.contains(item)

    # ======== derived iterators ========

    def clone(self) -> "RangeIterator":
        return create(self.curr, self.last, self.descending, self.stepsize)

    def rev(self) -> "RangeIterator":
        """
        Return a new iterator which goes from the last bound down to the
        current cursor.

        This is NOT a flip of the direction: the receiver's cursor becomes
        the new last bound, no matter whether the receiver was ascending or
        descending.
        """
        return create(self.last, self.curr, True, self.stepsize)

    def step(self, n: int) -> "RangeIterator":
        return create(self.curr, self.last, self.descending, n)


def create(curr: Bound, last: Bound, rev: bool = False, step: int = 1) -> RangeIterator:
    return RangeIterator(curr, last, descending=rev, stepsize=step)


def range(start: Any = 0, end: Any = UNBOUNDED, inclusive: bool = False) -> RangeIterator:
    """
    Return a lazy iterator over start..end.

    The end bound is excluded, unless inclusive=True. If end is omitted (or
    None), the range is unbounded.

    Raise RangeError("InvalidArgument") if the bounds are not integers, or if
    either of them is negative after the end has been made inclusive: this
    means that range(0, 0) is invalid, while range(0, 0, inclusive=True) is
    the range which contains only 0.
    """
    try:
        first = as_bound(start)
        last = as_bound(end)
    except TypeError:
        raise RangeError.not_an_integer(start, end) from None
    if isinstance(first, Unbounded):
        raise RangeError.not_an_integer(start, end)

    if not inclusive:
        last -= 1
    if not (first >= 0 and last >= 0):
        raise RangeError.invalid_argument(first, last)

    return create(first, last)

from contextlib import contextmanager
from typing import Any, Optional

import click

from lazyrange.bound import Bound


class RangeError(ValueError):
    """
    Error raised when a range cannot be built.

    `etype` tells the kind of the error. The only kind which is currently
    raised is "InvalidArgument".
    """

    etype: str
    message: str

    def __init__(self, etype: str, message: str) -> None:
        self.etype = etype
        self.message = message
        super().__init__(message)

    @classmethod
    def invalid_argument(cls, start: Bound, end: Bound) -> "RangeError":
        """
        The bounds are checked AFTER normalization, so start and end are the
        values which the iterator would have used: e.g. range(-1, 10) reports
        range(-1, 9).
        """
        msg = f"range({start}, {end}): invalid argument, must use non-negative integers"
        return cls("InvalidArgument", msg)

    @classmethod
    def not_an_integer(cls, start: Any, end: Any) -> "RangeError":
        msg = f"range({start!r}, {end!r}): invalid argument, bounds must be integers"
        return cls("InvalidArgument", msg)

    def __str__(self) -> str:
        return self.format(use_colors=False)

    def format(self, use_colors: bool = True) -> str:
        prefix = click.style(self.etype, fg="red", bold=True) if use_colors else self.etype
        return f"{prefix}: {self.message}"

    @contextmanager
    @staticmethod
    def raises(etype: str, match: Optional[str] = None) -> Any:
        """
        Equivalent to pytest.raises(RangeError, ...), but also checks the
        etype.
        """
        import pytest

        with pytest.raises(RangeError, match=match) as excinfo:
            yield excinfo
        exc = excinfo.value
        assert isinstance(exc, RangeError)
        if exc.etype != etype:
            msg = f"Expected RangeError of type {etype}, but got {exc.etype}"
            pytest.fail(msg)

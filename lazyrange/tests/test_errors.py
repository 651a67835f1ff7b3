import pytest

from lazyrange.errors import RangeError


def test_invalid_argument():
    err = RangeError.invalid_argument(-1, 9)
    assert err.etype == "InvalidArgument"
    assert err.message == "range(-1, 9): invalid argument, must use non-negative integers"
    assert str(err) == "InvalidArgument: " + err.message


def test_format_colors():
    err = RangeError.invalid_argument(-1, -1)
    assert err.format(use_colors=False) == f"InvalidArgument: {err.message}"
    colored = err.format(use_colors=True)
    assert colored.startswith("\x1b[")
    assert "InvalidArgument" in colored
    assert colored.endswith(f": {err.message}")


def test_raises_checks_etype():
    with RangeError.raises("InvalidArgument", match="hello"):
        raise RangeError("InvalidArgument", "hello world")

    with pytest.raises(pytest.fail.Exception,
                       match="Expected RangeError of type InvalidArgument, but got Other"):
        with RangeError.raises("InvalidArgument"):
            raise RangeError("Other", "hello")

from typing import Any

import pytest
from typer.testing import CliRunner

from lazyrange.cli import app


@pytest.mark.usefixtures("init")
class TestMain:

    @pytest.fixture
    def init(self):
        self.runner = CliRunner()

    def invoke(self, *args: Any) -> Any:
        args2 = [str(arg) for arg in args]
        print("run: lazyrange %s" % " ".join(args2))
        res = self.runner.invoke(app, args2)
        print(res.output)
        return res

    def run(self, *args: Any) -> Any:
        res = self.invoke(*args)
        if res.exit_code != 0:
            raise res.exception  # type: ignore
        return res

    def test_values(self):
        res = self.run(0, 5)
        assert res.stdout == "0\n1\n2\n3\n4\n"

    def test_inclusive(self):
        res = self.run(1, 3, "--inclusive")
        assert res.stdout == "1\n2\n3\n"

    def test_rev(self):
        res = self.run(1, 5, "-i", "--rev", "--sep", " ")
        assert res.stdout == "5 4 3 2 1\n"

    def test_step(self):
        res = self.run(1, 10, "--step", 2, "--sep", ",")
        assert res.stdout == "1,3,5,7,9\n"

    def test_empty_range(self):
        res = self.run(10, 5)
        assert res.stdout == ""

    def test_limit(self):
        res = self.run(0, 100, "-n", 3)
        assert res.stdout == "0\n1\n2\n"

    def test_unbounded(self):
        res = self.run(7, "--limit", 2)
        assert res.stdout == "7\n8\n"

    def test_unbounded_needs_limit(self):
        res = self.invoke(7)
        assert res.exit_code == 2

    def test_unbounded_rev(self):
        res = self.invoke(7, "--rev", "--limit", 2)
        assert res.exit_code == 2

    def test_len(self):
        res = self.run(1, 10, "--inclusive", "--len")
        assert res.stdout == "10\n"
        res = self.run(3, "--len")
        assert res.stdout == "UNBOUNDED\n"

    def test_contains(self):
        res = self.run(0, 10, "--contains", 10)
        assert res.stdout == "False\n"
        res = self.run(0, 10, "-i", "--contains", 10)
        assert res.stdout == "True\n"

    def test_count(self):
        res = self.run(0, 4, "--count")
        assert "count: 4" in res.output

    def test_invalid_argument(self):
        res = self.invoke("--", -1, 10)
        assert res.exit_code == 1
        assert "InvalidArgument: range(-1, 9)" in res.output

    def test_empty_exclusive_range_is_invalid(self):
        res = self.invoke(0, 0)
        assert res.exit_code == 1
        assert "range(0, -1)" in res.output

    def test_bad_step(self):
        res = self.invoke(0, 10, "--step", 0)
        assert res.exit_code == 2
